# simulation/monte_carlo.py

"""
Small Monte Carlo estimators driven by an MT19937 stream.

These are the typical consumers of the generator: they pull large batches
of outputs, scale them into the unit interval and reduce them to an
estimate plus its standard error.

    - estimate_pi:  hit-or-miss estimate of pi from points in the unit
                    square that land inside the quarter circle,
    - sample_mean:  mean of unit-interval draws (should approach 0.5).

Both scale outputs exactly like MersenneTwister.randd_cc (divide by
2**32 - 1), so a run is reproducible from the seed alone and consumes a
known number of outputs (2 per point for pi, 1 per sample for the mean).
"""

from __future__ import annotations

import math

import numpy as np

from core_types import MonteCarloEstimate, SampleSummary
from mersenne.twister import UINT32_MAX, MersenneTwister
from utils.logging_utils import get_logger


logger = get_logger(__name__)


def _unit_draws(rng: MersenneTwister, count: int) -> np.ndarray:
    """
    `count` double-precision draws in [0, 1], identical to calling
    rng.randd_cc() `count` times.
    """
    return rng.rand_u32_block(count).astype(np.float64) / float(UINT32_MAX)


def _check_n_samples(n_samples: int) -> None:
    if n_samples <= 0:
        raise ValueError(f"n_samples must be positive, got {n_samples}")


def estimate_pi(
    rng: MersenneTwister,
    n_samples: int,
) -> MonteCarloEstimate:
    """
    Estimate pi from `n_samples` points (x, y) in the unit square.

    Each point uses two consecutive draws, x first. A point is a hit when
    x**2 + y**2 <= 1, and

        pi ~= 4 * hits / n_samples

    with standard error 4 * sqrt(p * (1 - p) / n_samples), p = hits / n.
    """
    _check_n_samples(n_samples)

    draws = _unit_draws(rng, 2 * n_samples)
    x = draws[0::2]
    y = draws[1::2]
    hits = int(np.count_nonzero(x * x + y * y <= 1.0))

    p = hits / n_samples
    estimate = 4.0 * p
    std_error = 4.0 * math.sqrt(p * (1.0 - p) / n_samples)

    logger.info(
        "Pi estimate from %d samples: %.6f (+/- %.6f)",
        n_samples, estimate, std_error,
    )
    return MonteCarloEstimate(
        estimate=estimate,
        n_samples=n_samples,
        hits=hits,
        std_error=std_error,
    )


def sample_mean(
    rng: MersenneTwister,
    n_samples: int,
) -> SampleSummary:
    """
    Mean and (population) standard deviation of `n_samples` unit draws.
    """
    _check_n_samples(n_samples)

    draws = _unit_draws(rng, n_samples)
    mean = float(np.mean(draws))
    std = float(np.std(draws))

    return SampleSummary(
        mean=mean,
        std=std,
        n_samples=n_samples,
        std_error=std / math.sqrt(n_samples),
    )
