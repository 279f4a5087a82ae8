"""Tests for the Monte Carlo estimators."""

import math

import pytest

from mersenne.twister import MersenneTwister
from simulation.monte_carlo import estimate_pi, sample_mean


def test_estimate_pi_is_close():
    est = estimate_pi(MersenneTwister(42), 200000)
    assert est.n_samples == 200000
    assert 0 <= est.hits <= est.n_samples
    assert est.estimate == pytest.approx(4.0 * est.hits / est.n_samples)
    # Well inside 6 standard errors (~0.022 here).
    assert abs(est.estimate - math.pi) < 6 * est.std_error


def test_estimate_pi_is_reproducible():
    a = estimate_pi(MersenneTwister(7), 5000)
    b = estimate_pi(MersenneTwister(7), 5000)
    assert a == b


def test_estimate_pi_uses_randd_cc_pairs():
    n = 700  # 1400 draws, crosses a batch boundary
    rng = MersenneTwister(3)
    hits = 0
    for _ in range(n):
        x = rng.randd_cc()
        y = rng.randd_cc()
        if x * x + y * y <= 1.0:
            hits += 1

    other = MersenneTwister(3)
    est = estimate_pi(other, n)
    assert est.hits == hits
    assert other.position == 2 * n


def test_sample_mean_near_one_half():
    summary = sample_mean(MersenneTwister(1), 100000)
    assert summary.n_samples == 100000
    assert abs(summary.mean - 0.5) < 6 * summary.std_error
    # Uniform[0, 1] has std 1/sqrt(12) ~ 0.2887
    assert summary.std == pytest.approx(1 / math.sqrt(12), abs=0.01)


@pytest.mark.parametrize("func", [estimate_pi, sample_mean])
@pytest.mark.parametrize("n", [0, -5])
def test_non_positive_samples_raise(func, n):
    with pytest.raises(ValueError):
        func(MersenneTwister(1), n)
