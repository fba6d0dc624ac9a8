"""
Tests for compare(): the two-sample aggregate.

p-values are checked against scipy.stats.ttest_ind with pooled variance.
"""

import math

import numpy as np
import pytest
from scipy import stats as sp_stats

from stablestats.core.exceptions import ValidationError
from stablestats.descriptive import (
    ComparisonSolution, SampleDesign, compare,
    correlation, covariance, p_variance, t_test,
)


class TestCompareValues:

    def test_reference_samples(self, sample_a, sample_b):
        result = compare(sample_a, sample_b)
        assert isinstance(result, ComparisonSolution)
        np.testing.assert_allclose(result.statistic, -5.67026326985851, rtol=1e-10)
        np.testing.assert_allclose(result.pooled_variance, 0.00123775384615385, rtol=1e-10)
        assert result.df == 26.0

    def test_consistent_with_scalar_functions(self, int_a, int_b):
        result = compare(int_a, int_b)
        assert result.statistic == t_test(int_a, int_b)
        assert result.pooled_variance == p_variance(int_a, int_b)
        assert result.covariance == covariance(int_a, int_b)
        assert result.correlation == correlation(int_a, int_b)

    def test_means(self, sample_a, sample_b):
        p = compare(sample_a, sample_b).params
        np.testing.assert_allclose(p.mean1, np.mean(sample_a), rtol=1e-14)
        np.testing.assert_allclose(p.mean2, np.mean(sample_b), rtol=1e-14)
        assert (p.n1, p.n2) == (14, 14)

    @pytest.mark.parametrize("alternative, scipy_alt", [
        ("two.sided", "two-sided"),
        ("less", "less"),
        ("greater", "greater"),
    ])
    def test_p_value_matches_scipy(self, rng, alternative, scipy_alt):
        x = rng.standard_normal(15) + 0.4
        y = rng.standard_normal(22)
        result = compare(x, y, alternative=alternative)
        expected = sp_stats.ttest_ind(x, y, equal_var=True, alternative=scipy_alt)
        np.testing.assert_allclose(result.statistic, expected.statistic, rtol=1e-10)
        np.testing.assert_allclose(result.p_value, expected.pvalue, rtol=1e-8)

    def test_one_sided_p_values_complement(self, sample_a, sample_b):
        less = compare(sample_a, sample_b, alternative='less').p_value
        greater = compare(sample_a, sample_b, alternative='greater').p_value
        np.testing.assert_allclose(less + greater, 1.0, rtol=1e-12)

    def test_unequal_lengths_skip_association(self, rng):
        result = compare(rng.standard_normal(10), rng.standard_normal(12))
        assert result.covariance is None
        assert result.correlation is None
        assert result.df == 20.0
        assert result.info['paired_stats'] is False
        assert 'association' not in result.timing

    def test_design_input(self, sample_a, sample_b):
        result = compare(SampleDesign.from_array(sample_a), sample_b)
        np.testing.assert_allclose(result.statistic, -5.67026326985851, rtol=1e-10)


class TestCompareEdgeCases:

    def test_too_few_observations(self):
        result = compare([1.0], [2.0])
        assert result.df == 0.0
        assert math.isnan(result.p_value)
        assert any("not enough observations" in w for w in result.warnings)

    def test_constant_samples(self):
        result = compare([2.0, 2.0, 2.0], [1.0, 1.0])
        assert result.statistic == np.inf
        assert result.p_value == 0.0
        assert any("essentially constant" in w for w in result.warnings)

    def test_invalid_alternative(self, sample_a, sample_b):
        with pytest.raises(ValidationError, match="alternative must be"):
            compare(sample_a, sample_b, alternative='two-sided')

    def test_empty_sample(self, sample_a):
        with pytest.raises(ValidationError, match="y: requires at least 1"):
            compare(sample_a, [])


class TestCompareDisplay:

    def test_summary(self, sample_a, sample_b):
        text = compare(sample_a, sample_b, alternative='less').summary()
        assert "Two Sample t-test" in text
        assert "df = 26" in text
        assert "true difference in means is less than 0" in text
        assert "correlation = " in text

    def test_summary_without_association(self):
        text = compare([1.0, 2.0, 3.0], [2.0, 4.0]).summary()
        assert "correlation" not in text

    def test_repr(self, sample_a, sample_b):
        assert repr(compare(sample_a, sample_b)).startswith(
            "ComparisonSolution(n1=14, n2=14, t=-5.67026"
        )
