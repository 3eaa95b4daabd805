"""
Order statistics: median and fraction quantile.

Both sort a private copy of the sample. They use different index rules on
purpose, so median(x) and quantile(x, 0.5) are separate algorithms:

    median:   n odd  -> sorted[(n-1)//2]
              n even -> mean of sorted[(n-1)//2] and sorted[n//2]

    quantile: i = floor((n-1) * frac)
              i == n-1 -> sorted[n-1]
              n even   -> mean of sorted[i] and sorted[i+1]
              n odd    -> sorted[i]

A sample containing NaN has no ordering, so both return NaN for it.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pydescriptive.core.special import NAN


def _has_nan(x: NDArray[np.floating[Any]]) -> bool:
    return bool(np.any(np.isnan(x)))


def sample_median(x: NDArray[np.floating[Any]]) -> float:
    """Median of the sample. NaN if empty or if any value is NaN."""
    n = len(x)
    if n == 0 or _has_nan(x):
        return NAN

    sx = np.sort(x)

    if n % 2 == 0:
        n1 = sx[(n - 1) // 2]
        n2 = sx[n // 2]
        return float((n1 + n2) / 2.0)
    return float(sx[(n - 1) // 2])


def sample_quantile(x: NDArray[np.floating[Any]], frac: float) -> float:
    """
    Quantile of the sample at fraction ``frac`` in [0, 1].

    NaN if the sample is empty, contains NaN, or ``frac`` lies outside
    [0, 1] (a NaN ``frac`` included). ``frac == 0`` returns the minimum.
    """
    n = len(x)
    frac = float(frac)

    if n == 0:
        return NAN
    if not 0.0 <= frac <= 1.0:
        return NAN
    if _has_nan(x):
        return NAN
    if frac == 0.0:
        return float(np.min(x))

    sx = np.sort(x)

    max_idx = n - 1
    i = int(math.floor(max_idx * frac))

    if i == max_idx:
        return float(sx[max_idx])
    if n % 2 == 0:
        return float((sx[i] + sx[i + 1]) / 2.0)
    return float(sx[i])
