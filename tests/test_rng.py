"""Tests for make_rng and the process-wide default stream."""

import pytest

from config import DEFAULT_SEED
from mersenne.twister import MersenneTwister
from utils.rng import default_stream, init_default_stream, make_rng


def test_make_rng_is_seeded():
    rng = make_rng(1)
    assert isinstance(rng, MersenneTwister)
    assert rng.rand_u32() == 1791095845


def test_make_rng_defaults_to_config_seed():
    assert make_rng().rand_u32() == MersenneTwister(DEFAULT_SEED).rand_u32()


def test_make_rng_returns_independent_streams():
    a = make_rng(5)
    b = make_rng(5)
    assert a is not b
    a.rand_u32_block(10)
    assert b.position == 0


def test_default_stream_is_created_once():
    first = default_stream()
    assert default_stream() is first
    assert first.rand_u32() == MersenneTwister(DEFAULT_SEED).rand_u32()


def test_init_default_stream_uses_seed():
    stream = init_default_stream(1)
    assert default_stream() is stream
    assert stream.rand_u32() == 1791095845


def test_init_default_stream_refuses_reseed():
    init_default_stream(1)
    with pytest.raises(RuntimeError):
        init_default_stream(1)


def test_init_after_implicit_creation_raises():
    default_stream()
    with pytest.raises(RuntimeError):
        init_default_stream(2)
