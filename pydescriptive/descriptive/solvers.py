"""
Public entry points for descriptive statistics.

Scalar functions: mean(), unbiased_variance(), standard_deviation(),
median(), quantile(), skewness(), kurtosis(). Each returns a float and
returns NaN, never raises, when the statistic is undefined for the sample.

Pipeline functions: describe() and summary() run the CPU backend and
return a DescriptiveSolution with timing and warnings attached.
"""

from __future__ import annotations

from typing import Iterable

from numpy.typing import ArrayLike

from pydescriptive.descriptive.design import SampleDesign
from pydescriptive.descriptive.solution import DescriptiveSolution
from pydescriptive.descriptive.backends.cpu import CPUDescriptiveBackend
from pydescriptive.descriptive._common import VALID_STATISTICS
from pydescriptive.descriptive._moments import (
    sample_mean, sample_variance, sample_sd, sample_skewness, sample_kurtosis,
)
from pydescriptive.descriptive._order import sample_median, sample_quantile


def _ensure_design(data: ArrayLike | SampleDesign) -> SampleDesign:
    """Convert raw array to SampleDesign if needed."""
    if isinstance(data, SampleDesign):
        return data
    return SampleDesign.from_array(data)


# ---------------------------------------------------------------------------
# Scalar statistics
# ---------------------------------------------------------------------------

def mean(x: ArrayLike | SampleDesign) -> float:
    """
    Arithmetic mean, sum(x) / n.

    Returns NaN for an empty sample.
    """
    return sample_mean(_ensure_design(x).data)


def unbiased_variance(x: ArrayLike | SampleDesign) -> float:
    """
    Sample variance with Bessel's correction, sum((x - mean)^2) / (n - 1).

    Returns NaN when n < 2.
    """
    return sample_variance(_ensure_design(x).data)


def standard_deviation(x: ArrayLike | SampleDesign) -> float:
    """Square root of unbiased_variance(x). NaN when n < 2."""
    return sample_sd(_ensure_design(x).data)


def median(x: ArrayLike | SampleDesign) -> float:
    """
    Median of the sample.

    For even n, the average of the two middle order statistics. Returns
    NaN for an empty sample or one containing NaN. The caller's data is
    never reordered.

    Examples
    --------
    >>> median([1.4, 3.6, 6.5, 9.3, 10.2, 15.1, 2.2])
    6.5
    >>> median([2.2, 2.5])
    2.35
    """
    return sample_median(_ensure_design(x).data)


def quantile(x: ArrayLike | SampleDesign, frac: float) -> float:
    """
    Quantile of the sample at fraction ``frac``.

    Parameters
    ----------
    x : array-like or SampleDesign
        1D sample.
    frac : float
        Fraction of 1, e.g. 0.25 for the 25th percentile.

    Returns
    -------
    float
        ``min(x)`` for frac == 0 and ``max(x)`` for frac == 1. Otherwise
        the order statistic at floor((n-1) * frac), averaged with its
        successor when n is even. NaN for an empty sample, a sample
        containing NaN, or frac outside [0, 1].

    Notes
    -----
    quantile(x, 0.5) is not defined in terms of median(x); the two use
    different index rules and need not agree for every n.
    """
    return sample_quantile(_ensure_design(x).data, frac)


def skewness(x: ArrayLike | SampleDesign) -> float:
    """
    Adjusted Fisher-Pearson standardized moment coefficient.

        G1 = n^2 / ((n-1)(n-2)) * m3 / s^3

    with m3 the third central moment (divided by n) and s^2 the
    Bessel-corrected variance. Returns NaN when n < 3.
    """
    return sample_skewness(_ensure_design(x).data)


def kurtosis(x: ArrayLike | SampleDesign) -> float:
    """
    Excess kurtosis of the population, estimated from the sample.

        G2 = (n+1)n / ((n-1)(n-2)(n-3)) * sum((x - mean)^4) / s^4
             - 3 (n-1)^2 / ((n-2)(n-3))

    Returns NaN when n < 4.
    """
    return sample_kurtosis(_ensure_design(x).data)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def describe(
    data: ArrayLike | SampleDesign,
    *,
    probs: ArrayLike | None = None,
    compute: Iterable[str] | None = None,
) -> DescriptiveSolution:
    """
    Compute descriptive statistics in one pass.

    Computes: mean, variance, standard deviation, median, quantiles,
    skewness, kurtosis and the six-number summary, using the same
    algorithms as the scalar functions.

    Parameters
    ----------
    data : array-like or SampleDesign
        1D sample.
    probs : array-like, optional
        Quantile fractions. Default (0, 0.25, 0.5, 0.75, 1.0).
    compute : iterable of str, optional
        Subset of {'mean', 'var', 'sd', 'median', 'quantiles', 'summary',
        'skewness', 'kurtosis'}. Default: all.

    Returns
    -------
    DescriptiveSolution. Undefined statistics are NaN, and each one is
    explained in ``.warnings``.
    """
    design = _ensure_design(data)
    be = CPUDescriptiveBackend()

    compute_set = set(VALID_STATISTICS) if compute is None else set(compute)

    result = be.solve(design, compute=compute_set, quantile_probs=probs)

    return DescriptiveSolution(_result=result, _design=design)


def summary(data: ArrayLike | SampleDesign) -> DescriptiveSolution:
    """
    Compute six-number summary: Min, Q1, Median, Mean, Q3, Max.

    Parameters
    ----------
    data : array-like or SampleDesign
        1D sample.

    Returns
    -------
    DescriptiveSolution with summary_table and mean populated.
    """
    design = _ensure_design(data)
    be = CPUDescriptiveBackend()

    result = be.solve(design, compute={'summary', 'mean'})

    return DescriptiveSolution(_result=result, _design=design)
