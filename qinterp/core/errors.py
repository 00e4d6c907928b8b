from __future__ import annotations

"""Centralized error types for the qinterp core package."""

from typing import Any, Tuple


class QInterpError(Exception):
    """Base exception for qinterp package."""

    pass


class InvalidInputError(QInterpError, ValueError):
    """Exception raised for invalid input parameters."""

    pass


class CalculationError(QInterpError):
    """Exception raised when calculations fail."""

    pass


class UnequalLengthError(InvalidInputError):
    """Index and value sequences have different lengths."""

    pass


class EmptySampleError(InvalidInputError):
    """An interpolator needs at least one sample."""

    pass


class IncomparableIndexError(InvalidInputError):
    """An index is missing (NaN, NaT, None) or cannot be ordered against the others."""

    pass


class DuplicateIndexError(InvalidInputError):
    """The same index appears more than once in the sample set."""

    pass


class OutsideOfRangeError(InvalidInputError):
    """A query lies outside the closed interval spanned by the samples.

    Args:
        query: The rejected query index.
        bounds: ``(min_index, max_index)`` of the sample set at query time.
    """

    def __init__(self, query: Any, bounds: Tuple[Any, Any]) -> None:
        self.query = query
        self.bounds = bounds
        super().__init__(
            f"Query {query!r} is outside of the interpolation range "
            f"[{bounds[0]!r}, {bounds[1]!r}]; extrapolation is not supported"
        )


class NotFittedError(CalculationError):
    """The interpolator must be fitted before it can be queried."""

    pass


__all__ = [
    "QInterpError",
    "InvalidInputError",
    "CalculationError",
    "UnequalLengthError",
    "EmptySampleError",
    "IncomparableIndexError",
    "DuplicateIndexError",
    "OutsideOfRangeError",
    "NotFittedError",
]
