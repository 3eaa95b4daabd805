"""
Gaussian (normal) distribution.

GaussDist is an immutable (mu, sigma) value. Its moments are exact
constants of the parameters; pdf and cdf are closed-form:

    pdf(x) = exp(-(x - mu)^2 / (2 sigma^2)) / (sigma sqrt(2 pi))
    cdf(x) = (1 + erf((x - mu) / (sigma sqrt(2)))) / 2

sigma is not validated. sigma == 0 gives the IEEE-754 limits (Inf, NaN)
instead of raising.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescriptive.core.special import erf
from pydescriptive.descriptive import solvers


_SQRT_2 = math.sqrt(2.0)
_SQRT_2PI = math.sqrt(2.0 * math.pi)


@dataclass(frozen=True)
class GaussDist:
    """
    Gaussian distribution with mean ``mu`` and standard deviation ``sigma``.

    Construction:
        GaussDist(mu=1.0, sigma=2.0)
        GaussDist.standard()            # mu=0, sigma=1
        GaussDist.from_sample(x)        # sample mean and standard deviation
    """
    mu: float
    sigma: float

    @classmethod
    def standard(cls) -> GaussDist:
        """Standard normal distribution, mu=0 and sigma=1."""
        return cls(mu=0.0, sigma=1.0)

    @classmethod
    def from_sample(cls, x: ArrayLike) -> GaussDist:
        """
        Moment estimate from a sample: mean(x) and standard_deviation(x).

        Either parameter is NaN when the sample is too small for it.
        """
        return cls(mu=solvers.mean(x), sigma=solvers.standard_deviation(x))

    # --- Moments ---

    def mean(self) -> float:
        return self.mu

    def median(self) -> float:
        return self.mu

    def standard_deviation(self) -> float:
        return self.sigma

    def variance(self) -> float:
        return self.sigma ** 2

    def skewness(self) -> float:
        return 0.0

    def kurtosis(self) -> float:
        """Excess kurtosis, zero for every Gaussian."""
        return 0.0

    # --- Density and distribution functions ---

    def pdf(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        """
        Probability density at ``x``.

        Returns a float for scalar input, an ndarray otherwise.
        """
        x_arr = np.asarray(x, dtype=np.float64)
        mu = np.float64(self.mu)
        sigma = np.float64(self.sigma)

        with np.errstate(divide='ignore', invalid='ignore'):
            numer = np.exp(-((x_arr - mu) ** 2 / (2.0 * sigma ** 2)))
            denom = sigma * _SQRT_2PI
            result = numer / denom

        if result.ndim == 0:
            return float(result)
        return result

    def cdf(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        """
        Cumulative probability P(X <= x).

        Returns a float for scalar input, an ndarray otherwise.
        """
        x_arr = np.asarray(x, dtype=np.float64)
        mu = np.float64(self.mu)
        sigma = np.float64(self.sigma)

        with np.errstate(divide='ignore', invalid='ignore'):
            z = (x_arr - mu) / (sigma * _SQRT_2)

        return 0.5 * (1.0 + erf(z))


def norm_dist() -> GaussDist:
    """Standard normal distribution; same as GaussDist.standard()."""
    return GaussDist.standard()
