"""
Exception hierarchy for pydescriptive.

All exceptions inherit from PyDescriptiveError to allow catching any
library-specific error.

Statistically undefined results (empty samples, too few observations,
quantile fractions outside [0, 1]) are NOT errors: they return NaN.
Exceptions are reserved for inputs that are not a sample at all.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDescriptiveError(Exception):
    """Base exception for all pydescriptive errors."""
    pass


class ValidationError(PyDescriptiveError):
    """
    Input validation failed.

    Raised when user-provided inputs cannot be interpreted as numeric
    samples, or when an unknown statistic name is requested.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a sample is not one-dimensional.

    Attributes:
        shape: Shape of the offending array, if known
        expected_ndim: Number of dimensions that was required
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, ...] | None = None,
        expected_ndim: int | None = None,
    ):
        super().__init__(message)
        self.shape = shape
        self.expected_ndim = expected_ndim
