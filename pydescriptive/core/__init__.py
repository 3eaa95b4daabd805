"""
Core infrastructure for pydescriptive.

This module provides shared abstractions and utilities used by the
domain subpackages (descriptive, distributions).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    special: NaN sentinel and error-function primitives
    compute: Timing and tolerance tiers
"""

from pydescriptive.core.result import Result
from pydescriptive.core.exceptions import (
    PyDescriptiveError,
    ValidationError,
    DimensionError,
)
from pydescriptive.core.special import NAN, is_nan, erf, erfc

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyDescriptiveError",
    "ValidationError",
    "DimensionError",
    # Special values
    "NAN",
    "is_nan",
    "erf",
    "erfc",
]
