"""Polynomial Lagrange interpolation in barycentric form.

Implements the second ("true") barycentric formula of Berrut and Trefethen,
*Barycentric Lagrange Interpolation*, SIAM Review 46(3), 2004::

    p(x) = sum(w_i * y_i / (x - x_i)) / sum(w_i / (x - x_i))
    w_i  = 1 / prod_{j != i} (x_i - x_j)

Weights are computed once by :meth:`PolynomialInterpolator.fit` in O(n^2) and
each query then costs O(n). Indices are first mapped to float coordinates on
an interval of length 4 so the same arithmetic serves floats and dates, and
weights are evaluated in log space then rescaled to ``max |w_i| == 1``. Any
common factor cancels between numerator and denominator.
"""

from __future__ import annotations

import warnings
from typing import Any, Mapping, Sequence

import numpy as np

from qinterp.core.api import IndexT, ValueT
from qinterp.core.capabilities import delta_ratio, normalised_coordinates
from qinterp.core.errors import CalculationError, NotFittedError
from qinterp.core.interpolation.base import FitState, SortedSampleInterpolator
from qinterp.core.options import InterpolationOptions
from qinterp.logging import get_logger

logger = get_logger("qinterp.polynomial")


def barycentric_weights(coordinates: np.ndarray) -> np.ndarray:
    """Return normalised barycentric weights for distinct float ``coordinates``.

    Args:
        coordinates: 1-D array of pairwise distinct nodes.

    Returns:
        Array of weights proportional to ``1 / prod_{j != i}(x_i - x_j)``,
        scaled so the largest magnitude is 1.

    Raises:
        CalculationError: If two nodes coincide in floating point.
    """

    x = np.asarray(coordinates, dtype=float)
    if x.ndim != 1:
        raise ValueError(f"coordinates must be one-dimensional, got shape {x.shape}")
    if x.size <= 1:
        return np.ones_like(x)

    diff = x[:, None] - x[None, :]
    np.fill_diagonal(diff, 1.0)
    if np.any(diff == 0.0):
        raise CalculationError(
            "Barycentric weights are undefined: sample indices coincide after "
            "conversion to floating point"
        )

    log_magnitude = -np.sum(np.log(np.abs(diff)), axis=1)
    sign = np.prod(np.sign(diff), axis=1)
    weights = sign * np.exp(log_magnitude - log_magnitude.max())

    if not np.all(np.isfinite(weights)):
        raise CalculationError("Barycentric weights are not finite")
    return weights


class PolynomialInterpolator(SortedSampleInterpolator[IndexT, ValueT]):
    """Lagrange polynomial interpolator using the barycentric method.

    The interpolant is the unique polynomial of degree ``n - 1`` through all
    ``n`` samples. With two samples it reduces to linear interpolation.

    Args:
        indices: Sample indices.
        values: Sample values. Each must support ``+`` and scaling by the
            index ratio type (``float`` for numbers and dates, ``Decimal``
            for ``Decimal`` indices).
        options: :class:`InterpolationOptions` or a mapping of overrides.
            ``auto_fit`` controls whether an unfitted interpolator fits itself
            on first query.

    Example:
        >>> interp = PolynomialInterpolator([0.0, 1.0, 2.0], [0.0, 1.0, 4.0])
        >>> interp.fit()
        >>> round(interp(1.5), 12)
        2.25
    """

    method = "barycentric"

    def __init__(
        self,
        indices: Sequence[IndexT],
        values: Sequence[ValueT],
        options: InterpolationOptions | Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(indices, values, options=options)
        # (nodes, weights), replaced as one object so readers never see half a fit
        self._cache: tuple[np.ndarray, np.ndarray] | None = None

    @property
    def bary_weights(self) -> np.ndarray | None:
        """Cached barycentric weights, or ``None`` while unfitted."""
        cache = self._cache
        if cache is None:
            return None
        return cache[1].copy()

    def compute_weights(self) -> np.ndarray:
        """Compute barycentric weights for the current sample set.

        Does not touch the cache; :meth:`fit` stores the result.
        """

        coordinates = normalised_coordinates(self._xs, self._xs)
        return barycentric_weights(coordinates)

    def fit(self) -> None:
        """Compute and cache the barycentric weights.

        Raises:
            CalculationError: If the weights cannot be computed.
        """

        if self._state is FitState.FITTED and self._cache is not None:
            return

        degree = len(self._xs) - 1
        if degree > self._options.max_stable_degree and self._options.warn_on_unstable:
            logger.warning(
                "Polynomial of degree %d exceeds max_stable_degree=%d",
                degree,
                self._options.max_stable_degree,
            )
            warnings.warn(
                f"Interpolating polynomial of degree {degree} is ill-conditioned on "
                "arbitrary nodes and may oscillate between samples. Consider "
                "LinearInterpolator for dense sample sets.",
                UserWarning,
            )

        nodes = normalised_coordinates(self._xs, self._xs)
        weights = barycentric_weights(nodes)
        self._cache = (nodes, weights)
        self._state = FitState.FITTED
        logger.debug("Computed %d barycentric weights", weights.size)

    def _invalidate(self) -> None:
        super()._invalidate()
        self._cache = None

    def _interpolate_between(self, query: IndexT, left: int) -> ValueT:
        cache = self._cache
        if cache is None:
            if not self._options.auto_fit:
                raise NotFittedError(
                    "PolynomialInterpolator is not fitted; call fit() after "
                    "construction or add_point()"
                )
            self.fit()
            cache = self._cache
        nodes, weights = cache

        (point,) = normalised_coordinates(self._xs, [query])
        distances = point - nodes
        hits = np.flatnonzero(distances == 0.0)
        if hits.size:
            # Distinct indices that collapse to the same float coordinate.
            return self._ys[int(hits[0])]

        terms = weights / distances
        coefficients = (terms / terms.sum()).tolist()

        ratio = delta_ratio(query, self._xs[left], self._xs[left + 1])
        if not isinstance(ratio, float):
            # Scale in the index ratio type, e.g. Decimal for Decimal indices.
            coefficients = [type(ratio)(c) for c in coefficients]

        result = self._ys[0] * coefficients[0]
        for value, coefficient in zip(self._ys[1:], coefficients[1:]):
            result = result + value * coefficient
        return result


__all__ = ["PolynomialInterpolator", "barycentric_weights"]
