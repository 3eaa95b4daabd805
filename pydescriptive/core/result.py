"""
Generic result container for pydescriptive computations.

The Result class provides a standardized envelope for pipeline outputs
(describe(), summary()). It carries timing, warnings and provenance next to
the parameter payload, so diagnostics travel with the numbers instead of
being logged.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (computed statistics, sample size)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any
import platform

import numpy as np
import scipy

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata attached to every Result by default."""
    from pydescriptive import __version__

    return {
        'pydescriptive_version': __version__,
        'numpy_version': np.__version__,
        'scipy_version': scipy.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (statistics, quantiles, etc.)
        info: Structured metadata (sample size, computed statistics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation, e.g.
            statistics that are undefined for the sample
        provenance: Library versions used to produce the result

    Examples:
        >>> Result(
        ...     params=DescriptiveParams(n=7, mean=6.9),
        ...     info={'computed': ['mean']},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_descriptive'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
