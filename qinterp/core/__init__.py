"""Public interpolation API: contract, strategies, options and errors."""

from qinterp.core.api import InterpolationIndex, InterpolationValue, Interpolator
from qinterp.core.errors import (
    CalculationError,
    DuplicateIndexError,
    EmptySampleError,
    IncomparableIndexError,
    InvalidInputError,
    NotFittedError,
    OutsideOfRangeError,
    QInterpError,
    UnequalLengthError,
)
from qinterp.core.interpolation import (
    FitState,
    LinearInterpolator,
    PolynomialInterpolator,
    SortedSampleInterpolator,
    available_interpolators,
    get_interpolator,
    make_interpolator,
    register_interpolator,
)
from qinterp.core.options import InterpolationOptions


__all__ = [
    "InterpolationIndex",
    "InterpolationValue",
    "Interpolator",
    "QInterpError",
    "InvalidInputError",
    "CalculationError",
    "UnequalLengthError",
    "EmptySampleError",
    "IncomparableIndexError",
    "DuplicateIndexError",
    "OutsideOfRangeError",
    "NotFittedError",
    "FitState",
    "SortedSampleInterpolator",
    "LinearInterpolator",
    "PolynomialInterpolator",
    "available_interpolators",
    "get_interpolator",
    "make_interpolator",
    "register_interpolator",
    "InterpolationOptions",
]
