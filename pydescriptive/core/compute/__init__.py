"""
Shared compute infrastructure for pydescriptive.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical validation
"""

from pydescriptive.core.compute.timing import Timer
from pydescriptive.core.compute.tolerances import (
    ToleranceTier,
    REFERENCE,
    PUBLISHED,
    ERF_REFERENCE,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "REFERENCE",
    "PUBLISHED",
    "ERF_REFERENCE",
    "select_tolerance",
]
