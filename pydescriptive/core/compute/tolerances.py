"""
Tolerance tiers for numerical validation.

Defines precision expectations for the two kinds of reference values the
library is checked against:
- closed-form sample statistics (sums, sorts, powers): near machine precision
- special functions (erf, erfc, and pdf/cdf built on them): 1e-8 absolute,
  the accuracy promised for the error function

Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Sample statistics: summation order may differ from the reference
REFERENCE = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='reference',
    description='double precision sample statistics: summation-order noise only',
)

# Published reference values quoted to ~16 digits, compared at 1e-8
PUBLISHED = ToleranceTier(
    rtol=0.0,
    atol=1e-8,
    name='published',
    description='absolute 1e-8 against published reference values',
)

# erf/erfc and everything derived from them
ERF_REFERENCE = ToleranceTier(
    rtol=0.0,
    atol=1e-8,
    name='erf_reference',
    description='error-function primitives: 1e-8 absolute',
)


def select_tolerance(quantity: str) -> ToleranceTier:
    """Select the tolerance tier for a named quantity."""
    if quantity in ('erf', 'erfc', 'pdf', 'cdf'):
        return ERF_REFERENCE
    return REFERENCE
