"""Tests for the interpolation strategy registry."""

import pytest

from qinterp import (
    LinearInterpolator,
    PolynomialInterpolator,
    available_interpolators,
    get_interpolator,
    make_interpolator,
    register_interpolator,
)
from qinterp.core.interpolation import registry


def test_available_interpolators():
    assert available_interpolators() == ("linear", "barycentric")


def test_get_interpolator():
    assert get_interpolator("linear") is LinearInterpolator
    assert get_interpolator("Barycentric") is PolynomialInterpolator


def test_unknown_method():
    with pytest.raises(ValueError, match="Unknown interpolation method 'cubic'"):
        get_interpolator("cubic")


def test_make_interpolator_with_overrides():
    interp = make_interpolator(
        "barycentric", [0.0, 1.0, 2.0], [0.0, 1.0, 4.0], auto_fit=False
    )
    assert isinstance(interp, PolynomialInterpolator)
    assert interp.options.auto_fit is False
    assert not interp.is_fitted


def test_make_interpolator_options_mapping():
    interp = make_interpolator(
        "linear", [1.0, 2.0], [1.0, 2.0], options={"max_stable_degree": 3}
    )
    assert interp.options.max_stable_degree == 3
    assert interp(1.5) == pytest.approx(1.5)


def test_make_interpolator_unknown_override():
    with pytest.raises(TypeError):
        make_interpolator("linear", [1.0, 2.0], [1.0, 2.0], smoothing=1.0)


def test_register_custom_strategy(monkeypatch):
    monkeypatch.setattr(registry, "_INTERPOLATORS", dict(registry._INTERPOLATORS))

    class StepInterpolator(LinearInterpolator):
        method = "step"

        def _interpolate_between(self, query, left):
            return self._ys[left]

    register_interpolator("step", StepInterpolator)
    interp = make_interpolator("step", [0.0, 1.0, 2.0], [10.0, 20.0, 30.0])

    assert "step" in available_interpolators()
    assert interp(1.7) == 20.0


def test_register_rejects_non_interpolators():
    with pytest.raises(TypeError):
        register_interpolator("bad", object)
