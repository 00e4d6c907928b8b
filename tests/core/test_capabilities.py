"""Tests for the index capability helpers."""

from datetime import date

import numpy as np
import pandas as pd
import pytest

from qinterp.core.capabilities import (
    CAPACITY_INTERVAL,
    check_comparable,
    delta_ratio,
    is_missing,
    normalised_coordinates,
    sort_samples,
)
from qinterp.core.errors import (
    DuplicateIndexError,
    IncomparableIndexError,
    InvalidInputError,
)


@pytest.mark.parametrize(
    "value", [float("nan"), np.nan, None, pd.NaT, np.datetime64("NaT")]
)
def test_is_missing_true(value):
    assert is_missing(value)


@pytest.mark.parametrize(
    "value", [0.0, 1, date(2024, 1, 1), pd.Timestamp("2024-01-01"), np.datetime64("2024-01-01")]
)
def test_is_missing_false(value):
    assert not is_missing(value)


def test_is_missing_rejects_arrays():
    with pytest.raises(InvalidInputError, match="scalars"):
        is_missing([1.0, 2.0])


def test_check_comparable():
    assert check_comparable(1.0, 2.0)
    assert not check_comparable(2.0, 2.0)
    with pytest.raises(IncomparableIndexError, match="Cannot compare"):
        check_comparable(date(2024, 1, 1), 1.0)


def test_sort_samples_keeps_pairs():
    xs, ys = sort_samples([3, 1, 2], ["c", "a", "b"])
    assert xs == [1, 2, 3]
    assert ys == ["a", "b", "c"]


def test_sort_samples_duplicates():
    with pytest.raises(DuplicateIndexError, match="Duplicate"):
        sort_samples([date(2024, 1, 1), date(2024, 1, 1)], [1.0, 2.0])


def test_delta_ratio_dates():
    ratio = delta_ratio(date(1990, 6, 20), date(1990, 6, 16), date(1990, 7, 17))
    assert ratio == pytest.approx(4 / 31)


def test_normalised_coordinates():
    coords = normalised_coordinates([0.0, 5.0, 10.0], [0.0, 5.0, 10.0, 2.5])
    np.testing.assert_allclose(coords, [0.0, 2.0, CAPACITY_INTERVAL, 1.0])


def test_normalised_coordinates_single_sample():
    np.testing.assert_array_equal(normalised_coordinates([date(2024, 1, 1)], [date(2024, 1, 1)]), [0.0])
