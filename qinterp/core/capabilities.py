"""Runtime checks backing the index and value capability protocols."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import numpy as np
import pandas as pd

from qinterp.core.errors import (
    DuplicateIndexError,
    IncomparableIndexError,
    InvalidInputError,
)

# Barycentric weights grow like (4 / span) ** n, so coordinates are mapped onto
# an interval of length 4 before any products are taken.
CAPACITY_INTERVAL: float = 4.0


def is_missing(index: Any) -> bool:
    """Return ``True`` for ``None``, NaN and NaT scalars.

    Raises:
        InvalidInputError: If ``index`` is not a scalar.
    """

    if np.ndim(index) != 0:
        raise InvalidInputError(
            f"Interpolation indices must be scalars, got {type(index).__name__}"
        )
    return bool(pd.isna(index))


def check_comparable(left: Any, right: Any) -> bool:
    """Return ``left < right`` or raise if the two cannot be ordered."""

    try:
        return bool(left < right)
    except TypeError as exc:
        raise IncomparableIndexError(
            f"Cannot compare {left!r} ({type(left).__name__}) with "
            f"{right!r} ({type(right).__name__})"
        ) from exc


def validate_index(index: Any) -> None:
    """Reject a single missing index."""

    if is_missing(index):
        raise IncomparableIndexError(f"Interpolation index {index!r} is missing (NaN/NaT/None)")


def sort_samples(indices: Sequence[Any], values: Sequence[Any]) -> tuple[list, list]:
    """Return ``indices`` and ``values`` sorted together by strictly ascending index.

    Raises:
        IncomparableIndexError: If an index is missing or the indices cannot
            be ordered against each other.
        DuplicateIndexError: If two samples share an index.
    """

    for index in indices:
        validate_index(index)

    try:
        pairs = sorted(zip(indices, values), key=lambda pair: pair[0])
    except TypeError as exc:
        raise IncomparableIndexError(
            "Interpolation indices cannot be mutually ordered; "
            "mixed index types are not supported"
        ) from exc

    for (prev, _), (curr, _) in zip(pairs, pairs[1:]):
        if not check_comparable(prev, curr):
            raise DuplicateIndexError(f"Duplicate interpolation index {curr!r}")

    return [p[0] for p in pairs], [p[1] for p in pairs]


def delta_ratio(query: Any, left: Any, right: Any) -> Any:
    """Return ``(query - left) / (right - left)``.

    The result is a plain number for floats and dates alike; for ``Decimal``
    indices it stays a ``Decimal``.
    """

    return (query - left) / (right - left)


def normalised_coordinates(indices: Sequence[Any], points: Iterable[Any]) -> np.ndarray:
    """Map ``points`` onto float coordinates relative to the span of ``indices``.

    ``indices[0]`` maps to ``0`` and ``indices[-1]`` to :data:`CAPACITY_INTERVAL`.
    A single-sample set maps every point to ``0``.
    """

    points = list(points)
    if len(indices) < 2:
        return np.zeros(len(points), dtype=float)

    origin, end = indices[0], indices[-1]
    return np.array(
        [CAPACITY_INTERVAL * float(delta_ratio(p, origin, end)) for p in points],
        dtype=float,
    )


__all__ = [
    "CAPACITY_INTERVAL",
    "is_missing",
    "check_comparable",
    "validate_index",
    "sort_samples",
    "delta_ratio",
    "normalised_coordinates",
]
