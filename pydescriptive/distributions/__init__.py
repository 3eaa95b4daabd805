"""
Probability distributions.

Public API:
    GaussDist(mu, sigma)    - Gaussian distribution value type
    norm_dist()             - Standard normal, GaussDist(0.0, 1.0)
"""

from pydescriptive.distributions.gaussian import GaussDist, norm_dist

__all__ = [
    "GaussDist",
    "norm_dist",
]
