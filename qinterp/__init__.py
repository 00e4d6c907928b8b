# qinterp - generic one-dimensional interpolation for quantitative finance
"""Interpolate sampled curves keyed on numbers or calendar dates."""

from qinterp.core import (
    CalculationError,
    DuplicateIndexError,
    EmptySampleError,
    FitState,
    IncomparableIndexError,
    InterpolationIndex,
    InterpolationOptions,
    InterpolationValue,
    Interpolator,
    InvalidInputError,
    LinearInterpolator,
    NotFittedError,
    OutsideOfRangeError,
    PolynomialInterpolator,
    QInterpError,
    UnequalLengthError,
    available_interpolators,
    get_interpolator,
    make_interpolator,
    register_interpolator,
)
from qinterp.logging import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Contract
    "Interpolator",
    "InterpolationIndex",
    "InterpolationValue",
    # Strategies
    "LinearInterpolator",
    "PolynomialInterpolator",
    "FitState",
    "InterpolationOptions",
    "available_interpolators",
    "get_interpolator",
    "make_interpolator",
    "register_interpolator",
    # Exceptions
    "QInterpError",
    "InvalidInputError",
    "CalculationError",
    "UnequalLengthError",
    "EmptySampleError",
    "IncomparableIndexError",
    "DuplicateIndexError",
    "OutsideOfRangeError",
    "NotFittedError",
    # Logging
    "configure_logging",
    "get_logger",
]
