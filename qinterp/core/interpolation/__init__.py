"""Interpolation strategies over sorted one-dimensional samples."""

from .base import FitState, SortedSampleInterpolator  # noqa: F401
from .linear import LinearInterpolator  # noqa: F401
from .polynomial import PolynomialInterpolator, barycentric_weights  # noqa: F401
from .registry import (  # noqa: F401
    available_interpolators,
    get_interpolator,
    make_interpolator,
    register_interpolator,
)

__all__ = [
    "FitState",
    "SortedSampleInterpolator",
    "LinearInterpolator",
    "PolynomialInterpolator",
    "barycentric_weights",
    "available_interpolators",
    "get_interpolator",
    "make_interpolator",
    "register_interpolator",
]
