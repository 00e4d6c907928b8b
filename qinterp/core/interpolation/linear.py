"""Piecewise-linear interpolation between bracketing samples."""

from __future__ import annotations

from qinterp.core.api import IndexT, ValueT
from qinterp.core.capabilities import delta_ratio
from qinterp.core.interpolation.base import SortedSampleInterpolator


class LinearInterpolator(SortedSampleInterpolator[IndexT, ValueT]):
    """Linear interpolator over the two samples bracketing each query.

    Works for any index whose differences divide into a number, so calendar
    dates are weighted by day-count ratio. No extrapolation is performed.

    Example:
        >>> interp = LinearInterpolator([1.0, 2.0, 3.0], [10.0, 20.0, 30.0])
        >>> interp(2.5)
        25.0
    """

    method = "linear"

    def _interpolate_between(self, query: IndexT, left: int) -> ValueT:
        right = left + 1
        delta_value = self._ys[right] - self._ys[left]
        ratio = delta_ratio(query, self._xs[left], self._xs[right])
        return self._ys[left] + delta_value * ratio


__all__ = ["LinearInterpolator"]
