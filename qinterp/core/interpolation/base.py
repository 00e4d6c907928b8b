"""Sorted-sample state shared by every interpolation strategy."""

from __future__ import annotations

import enum
from bisect import bisect_left
from typing import Any, Generic, Iterable, List, Mapping, Sequence, Tuple

import pandas as pd

from qinterp.core.api import IndexT, ValueT
from qinterp.core.capabilities import check_comparable, sort_samples, validate_index
from qinterp.core.errors import (
    DuplicateIndexError,
    EmptySampleError,
    OutsideOfRangeError,
    UnequalLengthError,
)
from qinterp.core.options import InterpolationOptions
from qinterp.logging import get_logger

logger = get_logger("qinterp.interpolation")


class FitState(enum.Enum):
    """Readiness of an interpolator for queries."""

    UNFITTED = "unfitted"
    FITTED = "fitted"


class SortedSampleInterpolator(Generic[IndexT, ValueT]):
    """Base class holding samples sorted by strictly ascending index.

    Subclasses implement :meth:`_interpolate_between`, which is only called
    for queries strictly inside a bracket ``indices[left] < q < indices[left + 1]``.
    Range checks and exact hits are handled here, so every strategy returns the
    stored value object unchanged when ``q`` is a sample index.

    Args:
        indices: Sample indices (floats, dates, timestamps...). Need not be sorted.
        values: Sample values, paired positionally with ``indices``.
        options: Optional :class:`InterpolationOptions` or mapping of overrides.

    Raises:
        UnequalLengthError: If ``indices`` and ``values`` differ in length.
        EmptySampleError: If no samples are supplied.
        IncomparableIndexError: If an index is NaN/NaT/None or the indices
            cannot be ordered.
        DuplicateIndexError: If an index is repeated.
    """

    #: Registry name, set by concrete strategies.
    method: str = ""

    def __init__(
        self,
        indices: Sequence[IndexT],
        values: Sequence[ValueT],
        options: InterpolationOptions | Mapping[str, Any] | None = None,
    ) -> None:
        indices = list(indices)
        values = list(values)
        if len(indices) != len(values):
            raise UnequalLengthError(
                f"Indices and values must have the same length. "
                f"Got indices: {len(indices)}, values: {len(values)}"
            )
        if not indices:
            raise EmptySampleError("At least one sample is required")

        self._xs: List[IndexT]
        self._ys: List[ValueT]
        self._xs, self._ys = sort_samples(indices, values)
        self._options = InterpolationOptions.from_mapping(options)
        self._state = FitState.UNFITTED

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Tuple[IndexT, ValueT]],
        options: InterpolationOptions | Mapping[str, Any] | None = None,
    ):
        """Build an interpolator from ``(index, value)`` pairs."""

        pairs = list(pairs)
        return cls([p[0] for p in pairs], [p[1] for p in pairs], options=options)

    @classmethod
    def from_series(
        cls,
        series: pd.Series,
        options: InterpolationOptions | Mapping[str, Any] | None = None,
    ):
        """Build an interpolator keyed on the index of ``series``."""

        if not isinstance(series, pd.Series):
            raise TypeError(f"series must be a pandas Series, got {type(series)}")
        return cls(list(series.index), series.tolist(), options=options)

    def to_series(self, name: str | None = None) -> pd.Series:
        """Return the stored samples as a ``pandas.Series`` indexed by sample index."""

        return pd.Series(self._ys, index=pd.Index(self._xs), name=name)

    # ------------------------------------------------------------------
    # Interpolator contract
    # ------------------------------------------------------------------
    def fit(self) -> None:
        self._state = FitState.FITTED

    def range(self) -> Tuple[IndexT, IndexT]:
        return self._xs[0], self._xs[-1]

    def add_point(self, index: IndexT, value: ValueT) -> None:
        """Insert ``(index, value)`` at its ordered position.

        Raises:
            IncomparableIndexError: If ``index`` is missing or cannot be
                compared with the stored indices.
            DuplicateIndexError: If ``index`` is already stored.
        """

        validate_index(index)
        check_comparable(self._xs[0], index)
        position = self._search(index)
        if position < len(self._xs) and not check_comparable(index, self._xs[position]):
            raise DuplicateIndexError(f"Index {index!r} is already present")

        self._xs.insert(position, index)
        self._ys.insert(position, value)
        if self._state is FitState.FITTED:
            logger.debug("Sample added at position %d; interpolator marked unfitted", position)
        self._invalidate()

    def interpolate(self, query: IndexT) -> ValueT:
        """Return the value at ``query``.

        Raises:
            IncomparableIndexError: If ``query`` is missing or of an
                incompatible type.
            OutsideOfRangeError: If ``query`` lies outside :meth:`range`.
        """

        validate_index(query)

        lower, upper = self.range()
        if check_comparable(query, lower) or check_comparable(upper, query):
            raise OutsideOfRangeError(query, (lower, upper))

        position = self._search(query)
        if not check_comparable(query, self._xs[position]):
            return self._ys[position]

        return self._interpolate_between(query, position - 1)

    def __call__(self, query: IndexT) -> ValueT:
        return self.interpolate(query)

    def interpolate_many(self, queries: Iterable[IndexT]) -> List[ValueT]:
        """Interpolate each query in order, failing on the first invalid one."""

        return [self.interpolate(q) for q in queries]

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def indices(self) -> List[IndexT]:
        """Copy of the sorted sample indices."""
        return list(self._xs)

    @property
    def values(self) -> List[ValueT]:
        """Copy of the sample values, in index order."""
        return list(self._ys)

    @property
    def points(self) -> List[Tuple[IndexT, ValueT]]:
        """Return the ``(index, value)`` samples in index order."""
        return list(zip(self._xs, self._ys))

    @property
    def options(self) -> InterpolationOptions:
        return self._options

    @property
    def state(self) -> FitState:
        return self._state

    @property
    def is_fitted(self) -> bool:
        return self._state is FitState.FITTED

    def __len__(self) -> int:
        return len(self._xs)

    def __repr__(self) -> str:
        lower, upper = self.range()
        return (
            f"{type(self).__name__}(n={len(self)}, range=({lower!r}, {upper!r}), "
            f"state={self._state.value})"
        )

    # ------------------------------------------------------------------
    # Strategy hooks
    # ------------------------------------------------------------------
    def _search(self, index: IndexT) -> int:
        return bisect_left(self._xs, index)

    def _invalidate(self) -> None:
        self._state = FitState.UNFITTED

    def _interpolate_between(self, query: IndexT, left: int) -> ValueT:
        raise NotImplementedError


__all__ = ["FitState", "SortedSampleInterpolator"]
