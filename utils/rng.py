# utils/rng.py

"""
Random number generator utilities.

Every stream is an explicit MersenneTwister value:
  - simulations are reproducible,
  - independent workers / threads each get their own generator.

`make_rng` is the helper you should normally call in main.py and then pass
the resulting generator down into the simulation code.

For scripts that really want one ambient stream there is a process-wide
default stream. It is created exactly once (by `init_default_stream` or on
first use of `default_stream`) and is never re-seeded implicitly. Its
creation is lock-guarded, but drawing from it is NOT thread-safe: wrap
draws in your own lock if several threads share it.
"""

from __future__ import annotations

import threading
from typing import Optional

from config import DEFAULT_SEED
from core_types import Seed
from mersenne.twister import MersenneTwister
from utils.logging_utils import get_logger


logger = get_logger(__name__)

_DEFAULT_STREAM: Optional[MersenneTwister] = None
_DEFAULT_STREAM_LOCK = threading.Lock()


def make_rng(seed: Optional[Seed] = None) -> MersenneTwister:
    """
    Create an independent MT19937 generator.

    Args:
        seed:
            If provided, used to seed the generator deterministically.
            If None, config.DEFAULT_SEED is used (there is no entropy
            seeding).
    """
    if seed is None:
        seed = DEFAULT_SEED
    return MersenneTwister(seed)


def init_default_stream(seed: Seed) -> MersenneTwister:
    """
    Create the process-wide default stream from `seed`.

    Raises:
        RuntimeError: if the default stream already exists (either from an
            earlier call or from default_stream()).
    """
    global _DEFAULT_STREAM

    with _DEFAULT_STREAM_LOCK:
        if _DEFAULT_STREAM is not None:
            raise RuntimeError(
                "Default stream is already initialized; "
                "create a separate generator with make_rng() instead"
            )
        _DEFAULT_STREAM = make_rng(seed)
        logger.info("Default stream initialized with seed %d", seed)
        return _DEFAULT_STREAM


def default_stream() -> MersenneTwister:
    """
    Return the process-wide default stream, creating it from
    config.DEFAULT_SEED on first use.
    """
    global _DEFAULT_STREAM

    with _DEFAULT_STREAM_LOCK:
        if _DEFAULT_STREAM is None:
            _DEFAULT_STREAM = make_rng(DEFAULT_SEED)
            logger.info("Default stream initialized with seed %d", DEFAULT_SEED)
        return _DEFAULT_STREAM


def reset_default_stream() -> None:
    """
    Forget the default stream so the next init starts over. Meant for tests.
    """
    global _DEFAULT_STREAM

    with _DEFAULT_STREAM_LOCK:
        _DEFAULT_STREAM = None
