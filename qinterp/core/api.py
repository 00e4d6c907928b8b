"""Core protocols for one-dimensional interpolation.

Two capability protocols describe what an index and a value must support. The
index side needs ordering and a difference whose ratio with another difference
is a plain number: ``(x - a) / (b - a)``. That is what lets floats and calendar
dates share one implementation, since ``date - date`` is a ``timedelta`` and
``timedelta / timedelta`` is a ``float``. The value side needs addition,
subtraction and scaling by such a ratio.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple, TypeVar, runtime_checkable


class InterpolationIndex(Protocol):
    """Ordered index type with a divisible difference."""

    def __lt__(self, other: Any) -> bool:
        ...

    def __le__(self, other: Any) -> bool:
        ...

    def __sub__(self, other: Any) -> Any:
        ...


class InterpolationValue(Protocol):
    """Value type closed under addition, subtraction and ratio scaling."""

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __mul__(self, ratio: Any) -> Any:
        ...


IndexT = TypeVar("IndexT", bound=InterpolationIndex)
ValueT = TypeVar("ValueT", bound=InterpolationValue)


@runtime_checkable
class Interpolator(Protocol[IndexT, ValueT]):
    """Operation set every interpolation strategy exposes."""

    def fit(self) -> None:
        """Prepare the interpolator for queries. Idempotent."""
        ...

    def range(self) -> Tuple[IndexT, IndexT]:
        """Return the inclusive ``(min_index, max_index)`` covered by the samples."""
        ...

    def add_point(self, index: IndexT, value: ValueT) -> None:
        """Insert one sample, keeping indices strictly ascending."""
        ...

    def interpolate(self, query: IndexT) -> ValueT:
        """Return the estimated value at ``query``."""
        ...


__all__ = [
    "InterpolationIndex",
    "InterpolationValue",
    "Interpolator",
    "IndexT",
    "ValueT",
]
