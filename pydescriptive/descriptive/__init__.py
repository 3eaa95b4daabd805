"""
Descriptive statistics module.

Public API:
    mean(x)                 - Arithmetic mean
    unbiased_variance(x)    - Variance (Bessel-corrected)
    standard_deviation(x)   - Square root of the unbiased variance
    median(x)               - Median
    quantile(x, frac)       - Fraction quantile
    skewness(x)             - Adjusted Fisher-Pearson skewness
    kurtosis(x)             - Excess kurtosis
    describe(x)             - All statistics at once
    summary(x)              - Six-number summary (Min, Q1, Median, Mean, Q3, Max)

Undefined statistics (empty sample, too few observations, fraction outside
[0, 1]) are NaN.
"""

from pydescriptive.descriptive.design import SampleDesign
from pydescriptive.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pydescriptive.descriptive._common import DEFAULT_QUANTILE_PROBS, MIN_SAMPLES
from pydescriptive.descriptive.solvers import (
    mean,
    unbiased_variance,
    standard_deviation,
    median,
    quantile,
    skewness,
    kurtosis,
    describe,
    summary,
)

__all__ = [
    "mean",
    "unbiased_variance",
    "standard_deviation",
    "median",
    "quantile",
    "skewness",
    "kurtosis",
    "describe",
    "summary",
    "SampleDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
    "DEFAULT_QUANTILE_PROBS",
    "MIN_SAMPLES",
]
