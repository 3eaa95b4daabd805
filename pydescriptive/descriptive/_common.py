"""
Shared constants for descriptive statistics.

Defaults and minimum sample sizes used by both the scalar functions and
the describe() pipeline.
"""

# Default probabilities for describe() / quantile grids
DEFAULT_QUANTILE_PROBS = (0.0, 0.25, 0.5, 0.75, 1.0)

# Smallest sample for which each statistic is defined; below it the
# statistic is NaN. mean/median/quantiles need a single observation.
MIN_SAMPLES = {
    'mean': 1,
    'median': 1,
    'quantiles': 1,
    'summary': 1,
    'var': 2,
    'sd': 2,
    'skewness': 3,
    'kurtosis': 4,
}

VALID_STATISTICS = frozenset(MIN_SAMPLES)

SUMMARY_LABELS = ("Min.", "1st Qu.", "Median", "Mean", "3rd Qu.", "Max.")
