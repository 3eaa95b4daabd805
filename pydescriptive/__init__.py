"""
pydescriptive: descriptive statistics and the Gaussian distribution.

Pure functions over in-memory samples of floats. Statistics that are
undefined for a sample (too few observations, fraction outside [0, 1])
are NaN; test with is_nan().

Submodules:
    descriptive: median, quantile, variance, skewness, kurtosis, describe
    distributions: GaussDist (pdf, cdf, moments)
    core: exceptions, validation, NaN and error-function primitives
"""

__version__ = "0.1.0"

from pydescriptive.core.special import NAN, is_nan, erf, erfc
from pydescriptive.core.exceptions import (
    PyDescriptiveError,
    ValidationError,
    DimensionError,
)
from pydescriptive.descriptive import (
    mean,
    unbiased_variance,
    standard_deviation,
    median,
    quantile,
    skewness,
    kurtosis,
    describe,
    summary,
    SampleDesign,
    DescriptiveSolution,
)
from pydescriptive.distributions import GaussDist, norm_dist
from pydescriptive import descriptive
from pydescriptive import distributions

__all__ = [
    "__version__",
    # Special values
    "NAN",
    "is_nan",
    "erf",
    "erfc",
    # Exceptions
    "PyDescriptiveError",
    "ValidationError",
    "DimensionError",
    # Descriptive statistics
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
    "DescriptiveSolution",
    # Distributions
    "GaussDist",
    "norm_dist",
    "descriptive",
    "distributions",
]
