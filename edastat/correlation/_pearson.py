"""
Pearson correlation on pairwise-complete cases.

r = (n Sxy - Sx Sy) / sqrt((n Sxx - Sx^2)(n Syy - Sy^2))

computed from raw sums. Constant input, or a non-positive radicand from
rounding on near-constant input, yields r = 0.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from edastat.core.exceptions import DimensionError


def pairwise_mask(xi: NDArray, xj: NDArray) -> NDArray:
    """Boolean mask where both columns are non-NaN."""
    return ~(np.isnan(xi) | np.isnan(xj))


def pearson_r(x: ArrayLike, y: ArrayLike) -> float:
    """
    Pearson correlation coefficient of two equal-length numeric series.

    Returns:
        r clipped to [-1, 1]; 0.0 for empty or constant input
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    if x.shape != y.shape:
        raise DimensionError(f"Inconsistent lengths: x={x.shape[0]}, y={y.shape[0]}")

    n = x.shape[0]
    if n == 0:
        return 0.0
    if x.min() == x.max() or y.min() == y.max():
        return 0.0

    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_x2 = float(np.sum(x * x))
    sum_y2 = float(np.sum(y * y))

    numerator = n * sum_xy - sum_x * sum_y
    radicand = (n * sum_x2 - sum_x * sum_x) * (n * sum_y2 - sum_y * sum_y)
    if radicand <= 0.0:
        return 0.0

    r = numerator / math.sqrt(radicand)
    return min(max(r, -1.0), 1.0)
