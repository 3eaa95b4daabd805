"""
CPU reference backend for descriptive statistics.

Runs the scalar kernels from _moments and _order over a SampleDesign and
collects a warning for every statistic that came out undefined.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescriptive.core.exceptions import ValidationError
from pydescriptive.core.result import Result
from pydescriptive.core.compute.timing import Timer
from pydescriptive.descriptive.design import SampleDesign
from pydescriptive.descriptive.solution import DescriptiveParams
from pydescriptive.descriptive._common import (
    DEFAULT_QUANTILE_PROBS, MIN_SAMPLES, VALID_STATISTICS,
)
from pydescriptive.descriptive._moments import (
    sample_mean, sample_variance, sample_sd, sample_skewness, sample_kurtosis,
)
from pydescriptive.descriptive._order import sample_median, sample_quantile


class CPUDescriptiveBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(
        self,
        design: SampleDesign,
        *,
        compute: set[str],
        quantile_probs: ArrayLike | None = None,
    ) -> Result[DescriptiveParams]:
        """
        Compute requested descriptive statistics.

        Parameters
        ----------
        design : SampleDesign
        compute : set of str
            Which statistics to compute. Valid entries:
            'mean', 'var', 'sd', 'median', 'quantiles', 'summary',
            'skewness', 'kurtosis'
        quantile_probs : array-like or None
            Quantile fractions. Default (0, 0.25, 0.5, 0.75, 1.0).

        Raises
        ------
        ValidationError
            If ``compute`` names an unknown statistic.
        """
        compute = set(compute)
        unknown = compute - VALID_STATISTICS
        if unknown:
            raise ValidationError(
                f"Unknown statistics: {sorted(unknown)}. "
                f"Valid: {sorted(VALID_STATISTICS)}"
            )

        timer = Timer()
        timer.start()

        x = design.data
        warnings_list = self._undefined_warnings(design, compute)

        mean = None
        variance = None
        sd = None
        median = None
        skewness = None
        kurtosis = None
        quantiles = None
        q_probs = None
        summary_table = None

        if 'mean' in compute:
            with timer.section('mean'):
                mean = sample_mean(x)

        if 'var' in compute:
            with timer.section('variance'):
                variance = sample_variance(x)

        if 'sd' in compute:
            with timer.section('sd'):
                sd = sample_sd(x)

        if 'median' in compute:
            with timer.section('median'):
                median = sample_median(x)

        if 'quantiles' in compute:
            with timer.section('quantiles'):
                if quantile_probs is None:
                    quantile_probs = DEFAULT_QUANTILE_PROBS
                q_probs = np.asarray(quantile_probs, dtype=np.float64).ravel()
                quantiles = self._compute_quantiles(x, q_probs)

                out_of_range = q_probs[~((q_probs >= 0.0) & (q_probs <= 1.0))]
                if len(out_of_range) > 0:
                    warnings_list.append(
                        f"quantiles: fractions outside [0, 1] give NaN: "
                        f"{out_of_range.tolist()}"
                    )

        if 'summary' in compute:
            with timer.section('summary'):
                summary_table = self._compute_summary(x)

        if 'skewness' in compute:
            with timer.section('skewness'):
                skewness = sample_skewness(x)

        if 'kurtosis' in compute:
            with timer.section('kurtosis'):
                kurtosis = sample_kurtosis(x)

        timer.stop()

        params = DescriptiveParams(
            n=design.n,
            mean=mean,
            variance=variance,
            sd=sd,
            median=median,
            skewness=skewness,
            kurtosis=kurtosis,
            quantiles=quantiles,
            quantile_probs=q_probs,
            summary_table=summary_table,
        )

        return Result(
            params=params,
            info={'n': design.n, 'computed': sorted(compute)},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _undefined_warnings(self, design: SampleDesign, compute: set[str]) -> list[str]:
        """Describe every requested statistic that will be NaN, and why."""
        warnings_list: list[str] = []

        if design.has_missing:
            warnings_list.append(
                f"sample contains {design.n_missing} NaN value(s); "
                f"all statistics are NaN"
            )
            return warnings_list

        for stat in sorted(compute):
            required = MIN_SAMPLES[stat]
            if design.n < required:
                warnings_list.append(
                    f"{stat}: undefined for n={design.n} (requires n >= {required})"
                )

        higher = sorted(
            stat for stat in compute & {'skewness', 'kurtosis'}
            if design.n >= MIN_SAMPLES[stat]
        )
        if higher and sample_variance(design.data) == 0.0:
            for stat in higher:
                warnings_list.append(f"{stat}: undefined for zero-variance sample")

        return warnings_list

    def _compute_quantiles(
        self, x: NDArray[np.floating[Any]], probs: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        """One fraction quantile per probability, shape (n_probs,)."""
        result = np.empty(len(probs), dtype=np.float64)
        for i, p in enumerate(probs):
            result[i] = sample_quantile(x, p)
        return result

    def _compute_summary(self, x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """
        Six-number summary: Min, Q1, Median, Mean, Q3, Max.

        Q1/Q3 use the fraction quantile; Median uses the median rule.
        """
        return np.array([
            sample_quantile(x, 0.0),     # Min
            sample_quantile(x, 0.25),    # Q1 (1st Qu.)
            sample_median(x),            # Median
            sample_mean(x),              # Mean
            sample_quantile(x, 0.75),    # Q3 (3rd Qu.)
            sample_quantile(x, 1.0),     # Max
        ], dtype=np.float64)
