"""Registry of interpolation strategies."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Sequence, Tuple, Type

from qinterp.core.interpolation.base import SortedSampleInterpolator
from qinterp.core.interpolation.linear import LinearInterpolator
from qinterp.core.interpolation.polynomial import PolynomialInterpolator
from qinterp.core.options import InterpolationOptions

# Map *method name* -> interpolator class. Users refer to these strings via
# make_interpolator(method=...).
_INTERPOLATORS: Dict[str, Type[SortedSampleInterpolator]] = {
    LinearInterpolator.method: LinearInterpolator,
    PolynomialInterpolator.method: PolynomialInterpolator,
}


def register_interpolator(name: str, interpolator: Type[SortedSampleInterpolator]) -> None:
    """Register an interpolation strategy under ``name``."""

    if not (isinstance(interpolator, type) and issubclass(interpolator, SortedSampleInterpolator)):
        raise TypeError(
            f"interpolator must be a SortedSampleInterpolator subclass, got {interpolator!r}"
        )
    _INTERPOLATORS[name.lower()] = interpolator


def get_interpolator(name: str) -> Type[SortedSampleInterpolator]:
    """Return a registered interpolator class."""

    try:
        return _INTERPOLATORS[name.lower()]
    except KeyError as exc:
        raise ValueError(
            f"Unknown interpolation method '{name}'. Available: {available_interpolators()}"
        ) from exc


def available_interpolators() -> Tuple[str, ...]:
    """List the registered interpolation method names."""

    return tuple(_INTERPOLATORS)


def make_interpolator(
    method: str,
    indices: Sequence[Any],
    values: Sequence[Any],
    *,
    options: InterpolationOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> SortedSampleInterpolator:
    """Construct an interpolator by method name.

    Args:
        method: Registered method name, e.g. ``"linear"`` or ``"barycentric"``.
        indices: Sample indices.
        values: Sample values.
        options: Optional :class:`InterpolationOptions` or mapping.
        **overrides: Keyword-only option overrides applied on top of ``options``.

    Returns:
        An unfitted interpolator instance.

    Raises:
        ValueError: If ``method`` is not registered.
        TypeError: If an override names an unknown option.
    """

    cls = get_interpolator(method)
    resolved = InterpolationOptions.from_mapping(options)
    if overrides:
        resolved = InterpolationOptions.from_mapping({**resolved.to_mapping(), **overrides})
    return cls(indices, values, options=resolved)


__all__ = [
    "register_interpolator",
    "get_interpolator",
    "available_interpolators",
    "make_interpolator",
]
