"""Tests for the error hierarchy."""

import pytest

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


@pytest.mark.parametrize(
    "error",
    [
        UnequalLengthError,
        EmptySampleError,
        IncomparableIndexError,
        DuplicateIndexError,
    ],
)
def test_input_errors_are_value_errors(error):
    assert issubclass(error, InvalidInputError)
    assert issubclass(error, ValueError)
    assert issubclass(error, QInterpError)


def test_not_fitted_is_calculation_error():
    assert issubclass(NotFittedError, CalculationError)
    assert not issubclass(NotFittedError, ValueError)


def test_outside_of_range_message():
    err = OutsideOfRangeError(6.0, (1.0, 5.0))
    assert isinstance(err, InvalidInputError)
    assert err.query == 6.0
    assert err.bounds == (1.0, 5.0)
    assert "extrapolation is not supported" in str(err)
