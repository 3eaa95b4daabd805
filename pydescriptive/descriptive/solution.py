"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pydescriptive.core.result import Result
from pydescriptive.descriptive._common import SUMMARY_LABELS

if TYPE_CHECKING:
    from pydescriptive.descriptive.design import SampleDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    All statistic fields are optional (None if not computed). describe()
    populates all of them; summary() populates summary_table and mean.
    A computed-but-undefined statistic is NaN, not None.
    """
    n: int

    # Scalar statistics
    mean: float | None = None
    variance: float | None = None
    sd: float | None = None
    median: float | None = None
    skewness: float | None = None
    kurtosis: float | None = None

    # Quantiles: shape (n_probs,)
    quantiles: NDArray[np.floating[Any]] | None = None
    quantile_probs: NDArray[np.floating[Any]] | None = None

    # Summary table: shape (6,): Min, Q1, Median, Mean, Q3, Max
    summary_table: NDArray[np.floating[Any]] | None = None


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'SampleDesign'

    # --- Scalar statistics ---

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._result.params.n

    @property
    def mean(self) -> float | None:
        return self._result.params.mean

    @property
    def variance(self) -> float | None:
        """Variance (Bessel-corrected, n-1)."""
        return self._result.params.variance

    @property
    def sd(self) -> float | None:
        """Standard deviation, sqrt of the Bessel-corrected variance."""
        return self._result.params.sd

    @property
    def median(self) -> float | None:
        return self._result.params.median

    @property
    def skewness(self) -> float | None:
        """Adjusted Fisher-Pearson skewness."""
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float | None:
        """Excess kurtosis."""
        return self._result.params.kurtosis

    # --- Quantiles ---

    @property
    def quantiles(self) -> NDArray[np.floating[Any]] | None:
        """Quantile values, shape (n_probs,)."""
        return self._result.params.quantiles

    @property
    def quantile_probs(self) -> NDArray[np.floating[Any]] | None:
        """Fractions used for quantile computation."""
        return self._result.params.quantile_probs

    # --- Summary ---

    @property
    def summary_table(self) -> NDArray[np.floating[Any]] | None:
        """Six-number summary (6,): Min, Q1, Median, Mean, Q3, Max."""
        return self._result.params.summary_table

    # --- Metadata ---

    @property
    def name(self) -> str | None:
        """Sample label from the design."""
        return self._design.name

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    def summary(self) -> str:
        """Text report of whatever was computed; NaN prints as nan."""
        lines = [f"Descriptive Statistics ({self.name or 'x'}, n={self.n}):"]

        rows = [
            ("mean", self.mean),
            ("var", self.variance),
            ("sd", self.sd),
            ("median", self.median),
            ("skewness", self.skewness),
            ("kurtosis", self.kurtosis),
        ]
        for label, value in rows:
            if value is not None:
                lines.append(f"  {label:<9}{value:.6f}")

        if self.quantiles is not None:
            for p, q in zip(self.quantile_probs, self.quantiles):
                label = f"{p * 100:g}%"
                lines.append(f"  {label:<9}{q:.6f}")

        if self.summary_table is not None:
            values = [f"{v:.6f}" for v in self.summary_table]
            width = max(max(len(lbl) for lbl in SUMMARY_LABELS),
                        max(len(v) for v in values))
            lines.append("")
            lines.append("  ".join(lbl.rjust(width) for lbl in SUMMARY_LABELS))
            lines.append("  ".join(v.rjust(width) for v in values))

        return "\n".join(lines)

    def __repr__(self) -> str:
        params = self._result.params
        computed = []
        if params.mean is not None:
            computed.append("mean")
        if params.variance is not None:
            computed.append("var")
        if params.sd is not None:
            computed.append("sd")
        if params.median is not None:
            computed.append("median")
        if params.quantiles is not None:
            computed.append("quantiles")
        if params.summary_table is not None:
            computed.append("summary")
        if params.skewness is not None:
            computed.append("skewness")
        if params.kurtosis is not None:
            computed.append("kurtosis")

        stats_str = ", ".join(computed) if computed else "none"
        return f"DescriptiveSolution(n={params.n}, computed=[{stats_str}])"
