"""
NaN sentinel and error-function primitives.

NaN is the library-wide signal for "statistic undefined for this sample".
erf/erfc delegate to scipy.special, which wraps the Cephes double-precision
implementations.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import special as sp_special


NAN: float = float('nan')


def is_nan(x: float) -> bool:
    """True iff ``x`` is the IEEE-754 not-a-number value."""
    return math.isnan(x)


def _scalar_or_array(
    value: NDArray[np.floating[Any]],
) -> float | NDArray[np.floating[Any]]:
    """Unwrap 0-d results to a Python float."""
    if value.ndim == 0:
        return float(value)
    return value


def erf(x: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """
    Gauss error function.

    erf(x) = 2/sqrt(pi) * integral_0^x exp(-t^2) dt

    Parameters
    ----------
    x : float or array-like
        Evaluation point(s).

    Returns
    -------
    float for scalar input, ndarray otherwise.
    """
    return _scalar_or_array(sp_special.erf(np.asarray(x, dtype=np.float64)))


def erfc(x: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """
    Complementary error function, erfc(x) = 1 - erf(x).

    Computed directly rather than as 1 - erf(x), so it keeps full relative
    precision in the upper tail.
    """
    return _scalar_or_array(sp_special.erfc(np.asarray(x, dtype=np.float64)))
