"""
Tests for SampleDesign, describe() and summary().
"""

import numpy as np
import pytest

from pydescriptive import __version__, is_nan
from pydescriptive.core.exceptions import DimensionError, ValidationError
from pydescriptive.descriptive import (
    describe, summary, median, quantile, skewness, kurtosis,
    SampleDesign, DescriptiveSolution, DEFAULT_QUANTILE_PROBS,
)


class TestSampleDesign:
    """Test SampleDesign construction and validation."""

    def test_from_list(self):
        design = SampleDesign.from_array([1.0, 2.0, 3.0])
        assert design.n == 3
        assert design.name is None
        np.testing.assert_array_equal(design.data, [1.0, 2.0, 3.0])

    def test_empty_allowed(self):
        design = SampleDesign.from_array([])
        assert design.n == 0
        assert not design.has_missing

    def test_private_copy(self):
        arr = np.array([3.0, 1.0, 2.0])
        design = SampleDesign.from_array(arr)
        arr[0] = 100.0
        assert design.data[0] == 3.0

    def test_read_only(self):
        design = SampleDesign.from_array([3.0, 1.0, 2.0])
        with pytest.raises(ValueError):
            design.data[0] = 0.0

    def test_missing_counted(self):
        design = SampleDesign.from_array([1.0, np.nan, np.nan, 4.0])
        assert design.has_missing
        assert design.n_missing == 2

    def test_rejects_2d(self):
        with pytest.raises(DimensionError):
            SampleDesign.from_array([[1.0, 2.0], [3.0, 4.0]])

    def test_rejects_scalar(self):
        with pytest.raises(DimensionError):
            SampleDesign.from_array(3.0)

    def test_rejects_strings(self):
        with pytest.raises(ValidationError):
            SampleDesign.from_array(["a", "b"])

    def test_explicit_name(self):
        design = SampleDesign.from_array([1.0], name="height")
        assert design.name == "height"

    def test_pandas_series_name(self):
        pd = pytest.importorskip("pandas")
        design = SampleDesign.from_array(pd.Series([1.0, 2.0], name="weight"))
        assert design.name == "weight"
        assert design.n == 2

    def test_repr(self):
        r = repr(SampleDesign.from_array([1.0, np.nan], name="h"))
        assert "n=2" in r
        assert "missing=1" in r
        assert "'h'" in r


class TestDescribe:

    def test_returns_solution(self, odd_sample):
        assert isinstance(describe(odd_sample), DescriptiveSolution)

    def test_matches_scalar_functions(self, even_sample):
        result = describe(even_sample)
        assert result.n == 8
        assert result.median == median(even_sample)
        assert result.skewness == skewness(even_sample)
        assert result.kurtosis == kurtosis(even_sample)
        np.testing.assert_allclose(result.mean, 6.1, rtol=1e-12)
        np.testing.assert_allclose(result.sd, np.sqrt(result.variance), rtol=1e-15)

    def test_default_quantiles(self, odd_sample):
        result = describe(odd_sample)
        np.testing.assert_array_equal(result.quantile_probs, DEFAULT_QUANTILE_PROBS)
        np.testing.assert_array_equal(result.quantiles, [1.4, 2.2, 6.5, 9.3, 15.1])

    def test_custom_quantiles(self, even_sample):
        result = describe(even_sample, probs=[0.1, 0.75, 0.9])
        expected = [quantile(even_sample, p) for p in (0.1, 0.75, 0.9)]
        np.testing.assert_array_equal(result.quantiles, expected)

    def test_out_of_range_probability(self, even_sample):
        result = describe(even_sample, probs=[0.5, 1.5])
        assert result.quantiles[0] == 5.05
        assert is_nan(result.quantiles[1])
        assert any("outside [0, 1]" in w for w in result.warnings)

    def test_compute_subset(self, odd_sample):
        result = describe(odd_sample, compute=['median'])
        assert result.median == 6.5
        assert result.mean is None
        assert result.quantiles is None
        assert result.info['computed'] == ['median']

    def test_unknown_statistic_rejected(self, odd_sample):
        with pytest.raises(ValidationError, match="Unknown statistics"):
            describe(odd_sample, compute={'mode'})

    def test_no_warnings_for_regular_sample(self, even_sample):
        assert describe(even_sample).warnings == ()

    def test_small_sample_warnings(self):
        result = describe([2.2, 2.5])
        assert is_nan(result.skewness)
        assert is_nan(result.kurtosis)
        assert result.variance == pytest.approx(0.045)
        assert any(w.startswith("skewness: undefined for n=2") for w in result.warnings)
        assert any(w.startswith("kurtosis: undefined for n=2") for w in result.warnings)
        assert not any(w.startswith("var:") for w in result.warnings)

    def test_empty_sample_all_nan(self):
        result = describe([])
        for value in (result.mean, result.variance, result.sd, result.median,
                      result.skewness, result.kurtosis):
            assert is_nan(value)
        assert np.all(np.isnan(result.quantiles))
        assert np.all(np.isnan(result.summary_table))
        assert any("mean: undefined for n=0" in w for w in result.warnings)

    def test_missing_values_warning(self):
        result = describe([1.0, 2.0, np.nan, 4.0, 5.0])
        assert is_nan(result.mean)
        assert is_nan(result.median)
        assert result.warnings == ("sample contains 1 NaN value(s); all statistics are NaN",)

    def test_zero_variance_warning(self):
        result = describe([5.0, 5.0, 5.0, 5.0])
        assert result.variance == 0.0
        assert is_nan(result.skewness)
        assert "skewness: undefined for zero-variance sample" in result.warnings
        assert "kurtosis: undefined for zero-variance sample" in result.warnings

    def test_metadata(self, odd_sample):
        result = describe(odd_sample)
        assert result.backend_name == 'cpu_descriptive'
        assert 'total_seconds' in result.timing
        assert 'kurtosis' in result.timing
        assert result.info['n'] == 7
        assert result.provenance['pydescriptive_version'] == __version__

    def test_accepts_design(self, odd_sample):
        design = SampleDesign.from_array(odd_sample, name="x1")
        result = describe(design)
        assert result.name == "x1"
        assert result.median == 6.5

    def test_input_not_mutated(self, even_sample):
        arr = np.array(even_sample)
        describe(arr)
        np.testing.assert_array_equal(arr, even_sample)

    def test_repr(self, odd_sample):
        r = repr(describe(odd_sample, compute={'mean', 'kurtosis'}))
        assert "n=7" in r
        assert "mean" in r
        assert "kurtosis" in r
        assert "median" not in r

    def test_text_summary(self, odd_sample):
        text = describe(odd_sample).summary()
        assert "n=7" in text
        assert "skewness" in text
        assert "Median" in text


class TestSummary:

    def test_six_numbers(self, even_sample):
        result = summary(even_sample)
        table = result.summary_table
        assert table.shape == (6,)
        assert table[0] == 0.5
        np.testing.assert_allclose(table[1], 1.8, rtol=1e-12)
        assert table[2] == 5.05
        np.testing.assert_allclose(table[3], 6.1, rtol=1e-12)
        assert table[4] == 9.75
        assert table[5] == 15.1

    def test_populates_mean_only(self, odd_sample):
        result = summary(odd_sample)
        assert result.mean is not None
        assert result.skewness is None
        assert result.quantiles is None

    def test_text_lists_labels(self, odd_sample):
        text = summary(odd_sample).summary()
        for label in ("Min.", "1st Qu.", "Median", "Mean", "3rd Qu.", "Max."):
            assert label in text
