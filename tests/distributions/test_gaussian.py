"""
Tests for GaussDist.

pdf/cdf are checked against scipy.stats.norm and against published
standard-normal values.
"""

import math
import warnings
from dataclasses import FrozenInstanceError

import numpy as np
import pytest
from scipy import stats as sp_stats

from pydescriptive import is_nan
from pydescriptive.core.compute.tolerances import ERF_REFERENCE
from pydescriptive.descriptive import mean, standard_deviation
from pydescriptive.distributions import GaussDist, norm_dist


class TestConstruction:

    def test_fields(self):
        g = GaussDist(mu=1.5, sigma=2.0)
        assert g.mu == 1.5
        assert g.sigma == 2.0

    def test_standard(self):
        g = GaussDist.standard()
        assert g.mu == 0.0
        assert g.sigma == 1.0

    def test_norm_dist_equals_explicit(self):
        assert norm_dist() == GaussDist(mu=0.0, sigma=1.0)

    def test_immutable(self):
        g = norm_dist()
        with pytest.raises(FrozenInstanceError):
            g.mu = 1.0

    def test_repr(self):
        assert repr(GaussDist(mu=1.0, sigma=2.0)) == "GaussDist(mu=1.0, sigma=2.0)"

    def test_from_sample(self, odd_sample):
        g = GaussDist.from_sample(odd_sample)
        assert g.mu == mean(odd_sample)
        assert g.sigma == standard_deviation(odd_sample)

    def test_from_single_observation(self):
        g = GaussDist.from_sample([2.3])
        assert g.mu == 2.3
        assert is_nan(g.sigma)


class TestMoments:

    def test_standard_normal_moments_agree(self):
        n = norm_dist()
        g = GaussDist(mu=0.0, sigma=1.0)
        assert n.mean() == g.mean()
        assert n.median() == g.median()
        assert n.standard_deviation() == g.standard_deviation()
        assert n.variance() == g.variance()

    def test_location_scale(self):
        g = GaussDist(mu=2.0, sigma=3.0)
        assert g.mean() == 2.0
        assert g.median() == 2.0
        assert g.standard_deviation() == 3.0
        assert g.variance() == 9.0

    @pytest.mark.parametrize("mu,sigma", [(0.0, 1.0), (-4.0, 0.25), (1e6, 1e3)])
    def test_shape_moments_are_zero(self, mu, sigma):
        g = GaussDist(mu=mu, sigma=sigma)
        assert g.skewness() == 0.0
        assert g.kurtosis() == 0.0


class TestPdf:

    def test_standard_normal_reference(self):
        assert abs(norm_dist().pdf(0.5) - 0.3520653267642995) < ERF_REFERENCE.atol

    def test_peak(self):
        np.testing.assert_allclose(norm_dist().pdf(0.0), 1.0 / math.sqrt(2.0 * math.pi))

    def test_symmetric(self):
        g = GaussDist(mu=1.0, sigma=2.0)
        np.testing.assert_allclose(g.pdf(1.0 - 0.7), g.pdf(1.0 + 0.7), rtol=1e-15)

    def test_matches_scipy(self):
        g = GaussDist(mu=-1.0, sigma=0.5)
        x = np.linspace(-4.0, 2.0, 25)
        np.testing.assert_allclose(
            g.pdf(x), sp_stats.norm.pdf(x, loc=-1.0, scale=0.5), rtol=1e-12,
        )

    def test_scalar_returns_float(self):
        assert isinstance(norm_dist().pdf(0.5), float)

    def test_array_returns_array(self):
        result = norm_dist().pdf([0.0, 0.5])
        assert isinstance(result, np.ndarray)
        assert result.shape == (2,)

    def test_far_tail_underflows_to_zero(self):
        assert norm_dist().pdf(100.0) == 0.0


class TestCdf:

    def test_standard_normal_reference(self):
        assert abs(norm_dist().cdf(0.5) - 0.6914624612740131) < ERF_REFERENCE.atol

    def test_median_is_half(self):
        assert GaussDist(mu=3.0, sigma=2.0).cdf(3.0) == 0.5

    def test_standardization(self):
        """cdf of N(2, 3) at 2 + 3 * 0.5 equals the standard cdf at 0.5."""
        np.testing.assert_allclose(
            GaussDist(mu=2.0, sigma=3.0).cdf(3.5), norm_dist().cdf(0.5), rtol=1e-15,
        )

    def test_matches_scipy(self):
        g = GaussDist(mu=10.0, sigma=4.0)
        x = np.linspace(-5.0, 25.0, 31)
        np.testing.assert_allclose(
            g.cdf(x), sp_stats.norm.cdf(x, loc=10.0, scale=4.0),
            rtol=0.0, atol=ERF_REFERENCE.atol,
        )

    def test_limits(self):
        g = norm_dist()
        assert g.cdf(np.inf) == 1.0
        assert g.cdf(-np.inf) == 0.0

    def test_monotone(self):
        values = norm_dist().cdf(np.linspace(-6.0, 6.0, 101))
        assert np.all(np.diff(values) >= 0.0)

    def test_scalar_returns_float(self):
        assert isinstance(norm_dist().cdf(0.5), float)


class TestDegenerateSigma:
    """sigma == 0 is not validated; IEEE arithmetic decides the result."""

    def test_no_exception_or_warning(self):
        g = GaussDist(mu=0.0, sigma=0.0)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            g.pdf(0.0)
            g.pdf(1.0)
            g.cdf(0.0)
            g.cdf(1.0)

    def test_pdf_at_mean_is_nan(self):
        assert is_nan(GaussDist(mu=0.0, sigma=0.0).pdf(0.0))

    def test_cdf_is_step(self):
        g = GaussDist(mu=0.0, sigma=0.0)
        assert g.cdf(1.0) == 1.0
        assert g.cdf(-1.0) == 0.0
        assert is_nan(g.cdf(0.0))
