"""Tests for Student's t-distribution built on regularized_beta."""

import math

import numpy as np
import pytest
from scipy import stats

from betacf.distribution import TDistribution
from betacf.exceptions import NotStrictlyPositiveError, OutOfRangeError

DFS = [1.0, 2.5, 5.0, 10.0, 30.0, 200.0]
XS = [-6.0, -2.0, -0.5, 0.25, 1.0, 3.0, 8.0]


def test_cdf_at_center_is_exactly_one_half():
    assert TDistribution(10).cumulative_probability(0.0) == 0.5


@pytest.mark.parametrize("df", DFS)
@pytest.mark.parametrize("x", XS)
def test_cdf_matches_reference(df, x):
    dist = TDistribution(df)
    assert np.isclose(dist.cumulative_probability(x), stats.t.cdf(x, df), rtol=1e-10, atol=1e-14)


@pytest.mark.parametrize("df", DFS)
@pytest.mark.parametrize("x", XS)
def test_density_matches_reference(df, x):
    dist = TDistribution(df)
    assert np.isclose(dist.density(x), stats.t.pdf(x, df), rtol=1e-10, atol=0.0)
    assert np.isclose(dist.log_density(x), stats.t.logpdf(x, df), rtol=1e-10)


@pytest.mark.parametrize("df", DFS)
def test_cdf_is_symmetric(df):
    dist = TDistribution(df)
    for x in (0.3, 1.7, 4.2):
        total = dist.cumulative_probability(x) + dist.cumulative_probability(-x)
        assert math.isclose(total, 1.0, abs_tol=1e-14)


def test_cdf_limits():
    dist = TDistribution(4)
    assert dist.cumulative_probability(-math.inf) == 0.0
    assert dist.cumulative_probability(math.inf) == 1.0


@pytest.mark.parametrize("df", [0.0, -3.0, math.nan])
def test_invalid_degrees_of_freedom(df):
    with pytest.raises(NotStrictlyPositiveError):
        TDistribution(df)


def test_invalid_degrees_of_freedom_is_value_error():
    with pytest.raises(ValueError, match="degrees_of_freedom"):
        TDistribution(0)


def test_moments():
    assert math.isnan(TDistribution(0.5).numerical_mean)
    assert math.isnan(TDistribution(1.0).numerical_mean)
    assert TDistribution(1.5).numerical_mean == 0.0
    assert math.isnan(TDistribution(1.0).numerical_variance)
    assert TDistribution(1.5).numerical_variance == math.inf
    assert TDistribution(2.0).numerical_variance == math.inf
    assert math.isclose(TDistribution(6.0).numerical_variance, 1.5)


def test_support():
    dist = TDistribution(3)
    assert dist.support_lower_bound == -math.inf
    assert dist.support_upper_bound == math.inf
    assert dist.is_support_connected
    assert not dist.is_support_lower_bound_inclusive
    assert not dist.is_support_upper_bound_inclusive
    assert dist.probability(1.0) == 0.0


def test_probability_between():
    dist = TDistribution(8)
    expected = stats.t.cdf(1.5, 8) - stats.t.cdf(-0.5, 8)
    assert math.isclose(dist.probability_between(-0.5, 1.5), expected, rel_tol=1e-10)
    with pytest.raises(ValueError):
        dist.probability_between(1.0, 0.0)


@pytest.mark.parametrize("df", [1.0, 1.8, 3.0, 10.0, 60.0])
@pytest.mark.parametrize("p", [0.001, 0.05, 0.5, 0.9, 0.975, 0.999])
def test_inverse_cdf_matches_reference(df, p):
    dist = TDistribution(df)
    assert math.isclose(
        dist.inverse_cumulative_probability(p), stats.t.ppf(p, df), rel_tol=1e-7, abs_tol=1e-7
    )


def test_inverse_cdf_bounds_and_domain():
    dist = TDistribution(5)
    assert dist.inverse_cumulative_probability(0.0) == -math.inf
    assert dist.inverse_cumulative_probability(1.0) == math.inf
    for p in (-0.1, 1.1, math.nan):
        with pytest.raises(OutOfRangeError):
            dist.inverse_cumulative_probability(p)


def test_sampling_is_reproducible():
    dist = TDistribution(7, rng=np.random.default_rng(0))
    dist.reseed_random_generator(42)
    first = dist.sample(5)
    dist.reseed_random_generator(42)
    second = dist.sample(5)
    assert first.shape == (5,)
    np.testing.assert_allclose(first, second)
    assert isinstance(dist.sample(), float)


def test_sample_size_must_be_positive():
    with pytest.raises(NotStrictlyPositiveError):
        TDistribution(7).sample(0)
