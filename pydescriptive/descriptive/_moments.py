"""
Moment-based sample statistics.

Kernels operate on a 1D float64 array and return a Python float. Undefined
results are NaN, never exceptions: each statistic checks its minimum sample
size explicitly, and degenerate arithmetic (zero variance, infinities) is
left to IEEE-754 under np.errstate.

Formulas:
    variance   s^2 = sum((x - xbar)^2) / (n - 1)
    skewness   G1  = n^2 / ((n-1)(n-2)) * m3 / s^3
               where m3 = sum((x - xbar)^3) / n  (adjusted Fisher-Pearson)
    kurtosis   G2  = (n+1)n / ((n-1)(n-2)(n-3)) * sum((x - xbar)^4) / s^4
                     - 3 (n-1)^2 / ((n-2)(n-3))  (excess kurtosis)
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pydescriptive.core.special import NAN
from pydescriptive.descriptive._common import MIN_SAMPLES


def sample_mean(x: NDArray[np.floating[Any]]) -> float:
    """Arithmetic mean. NaN for an empty sample."""
    n = len(x)
    if n == 0:
        return NAN
    with np.errstate(invalid='ignore'):
        return float(np.sum(x) / n)


def sample_variance(x: NDArray[np.floating[Any]]) -> float:
    """Bessel-corrected variance. NaN when n < 2."""
    n = len(x)
    if n < MIN_SAMPLES['var']:
        return NAN

    xbar = sample_mean(x)
    with np.errstate(invalid='ignore'):
        s2 = np.sum((x - xbar) ** 2)
        return float(1.0 / (n - 1) * s2)


def sample_sd(x: NDArray[np.floating[Any]]) -> float:
    """Square root of the Bessel-corrected variance."""
    return math.sqrt(sample_variance(x))


def sample_skewness(x: NDArray[np.floating[Any]]) -> float:
    """Adjusted Fisher-Pearson standardized moment coefficient. NaN when n < 3."""
    if len(x) < MIN_SAMPLES['skewness']:
        return NAN

    xbar = sample_mean(x)
    n = float(len(x))

    with np.errstate(divide='ignore', invalid='ignore'):
        diffs = x - xbar
        lhs = n ** 2 / ((n - 1.0) * (n - 2.0))

        m3 = np.sum(diffs ** 3) * (1.0 / n)
        s3 = np.sum(diffs ** 2) * (1.0 / (n - 1.0))
        s3 = s3 ** 1.5

        return float(lhs * m3 / s3)


def sample_kurtosis(x: NDArray[np.floating[Any]]) -> float:
    """Population excess kurtosis estimated from the sample. NaN when n < 4."""
    if len(x) < MIN_SAMPLES['kurtosis']:
        return NAN

    xbar = sample_mean(x)
    s = np.float64(sample_variance(x))
    n = float(len(x))

    lhs = ((n + 1.0) * n) / ((n - 1.0) * (n - 2.0) * (n - 3.0))
    rhs = 3.0 * ((n - 1.0) ** 2 / ((n - 2.0) * (n - 3.0)))

    with np.errstate(divide='ignore', invalid='ignore'):
        cen = np.sum((x - xbar) ** 4)
        cen = cen * (1.0 / s ** 2)
        return float(lhs * cen - rhs)
