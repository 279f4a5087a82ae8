# mersenne/twister.py

"""
MT19937 ("Mersenne Twister") pseudo-random number generator.

One `MersenneTwister` instance owns one reproducible stream:

    rng = MersenneTwister(seed=1)
    rng.rand_u32()   # 1791095845
    rng.rand_u32()   # 4282876139

The output sequence matches the reference mt19937ar.c code bit for bit.
It is fast and well distributed, which makes it suitable for Monte Carlo
work, but it is NOT cryptographically secure: 624 consecutive outputs
are enough to recover the whole state.

State layout:
  - `_words`: 624 raw uint32 state words (numpy array, wraps mod 2**32),
  - `_batch`: the tempered copy of `_words`, rebuilt after every twist,
  - `_cursor`: how many words of the current batch were already returned.
    It is 624 right after seeding so the first draw triggers a twist.

Instances are not thread-safe. Give each thread / worker its own
generator (see utils.rng.make_rng) instead of sharing one.
"""

from __future__ import annotations

import operator

import numpy as np

from config import DEFAULT_SEED
from core_types import Position, Seed, UInt32, UInt64
from utils.logging_utils import get_logger


logger = get_logger(__name__)


# -------------------------------------------------------------------
# Algorithm constants
# -------------------------------------------------------------------

N: int = 624
M: int = 397

MATRIX_A: int = 0x9908B0DF
UPPER_MASK: int = 0x80000000
LOWER_MASK: int = 0x7FFFFFFF

MASK_32: int = 0xFFFFFFFF
UINT32_MAX: int = 0xFFFFFFFF

SEED_MULTIPLIER: int = 1812433253

TEMPER_SHIFT_U: int = 11
TEMPER_SHIFT_S: int = 7
TEMPER_MASK_B: int = 0x9D2C5680
TEMPER_SHIFT_T: int = 15
TEMPER_MASK_C: int = 0xEFC60000
TEMPER_SHIFT_L: int = 18

_MAG01 = np.array([0, MATRIX_A], dtype=np.uint32)
_UINT32_MAX_F32 = np.float32(UINT32_MAX)
_UINT32_MAX_F64 = float(UINT32_MAX)


# -------------------------------------------------------------------
# Pure helpers
# -------------------------------------------------------------------


def normalize_seed(seed: Seed) -> UInt32:
    """
    Reduce any integer seed to 32 bits.

    Wider and negative ints are taken modulo 2**32 (two's complement for
    negatives). Anything that is not an integer raises TypeError.
    """
    try:
        value = operator.index(seed)
    except TypeError:
        raise TypeError(
            f"seed must be an integer, got {type(seed).__name__}"
        ) from None
    return value & MASK_32


def init_words(seed: UInt32) -> np.ndarray:
    """
    Build the 624-word initial state for a 32-bit seed.

        words[0] = seed
        words[i] = 1812433253 * (words[i-1] ^ (words[i-1] >> 30)) + i   (mod 2**32)
    """
    words = [0] * N
    words[0] = prev = seed & MASK_32
    for i in range(1, N):
        prev = (SEED_MULTIPLIER * (prev ^ (prev >> 30)) + i) & MASK_32
        words[i] = prev
    return np.array(words, dtype=np.uint32)


def twist(words: np.ndarray) -> None:
    """
    Recompute all 624 state words in place.

    The reference code walks i = 0..623 and writes words[i] from
    words[i+1] and words[(i+397) % 624]. Walking in blocks of N - M = 227
    reproduces that read/write order exactly: inside a block, words[i+1]
    has not been written yet, and words[(i+397) % 624] lies in a block
    that is either untouched (first block) or already finished.
    """
    step = N - M
    for start in range(0, N - 1, step):
        stop = min(start + step, N - 1)
        src = (start + M) % N
        y = (words[start:stop] & UPPER_MASK) | (words[start + 1:stop + 1] & LOWER_MASK)
        words[start:stop] = words[src:src + (stop - start)] ^ (y >> 1) ^ _MAG01[y & 1]

    # Last word wraps around to words[0], which is already updated.
    y = (words[N - 1:N] & UPPER_MASK) | (words[0:1] & LOWER_MASK)
    words[N - 1:N] = words[M - 1:M] ^ (y >> 1) ^ _MAG01[y & 1]


def temper(y):
    """
    Tempering transform applied to a raw state word before it is output.

    Works on a Python int in [0, 2**32) or on a uint32 numpy array; the
    masks keep every intermediate within 32 bits.
    """
    y = y ^ (y >> TEMPER_SHIFT_U)
    y = y ^ ((y << TEMPER_SHIFT_S) & TEMPER_MASK_B)
    y = y ^ ((y << TEMPER_SHIFT_T) & TEMPER_MASK_C)
    y = y ^ (y >> TEMPER_SHIFT_L)
    return y


def _normalize_count(count: int) -> int:
    try:
        value = operator.index(count)
    except TypeError:
        raise TypeError(
            f"count must be an integer, got {type(count).__name__}"
        ) from None
    if value < 0:
        raise ValueError(f"count must be non-negative, got {value}")
    return value


# -------------------------------------------------------------------
# Generator
# -------------------------------------------------------------------


class MersenneTwister:
    """
    A single MT19937 stream.

    Args:
        seed:
            Any integer; reduced modulo 2**32. Defaults to
            config.DEFAULT_SEED (5489, the reference default).
    """

    def __init__(self, seed: Seed = DEFAULT_SEED) -> None:
        self._words: np.ndarray = np.zeros(N, dtype=np.uint32)
        self._batch: np.ndarray = np.zeros(N, dtype=np.uint32)
        self._cursor: int = N
        self._position: Position = 0
        self._seed: UInt32 = 0
        self.seed(seed)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self._seed}, position={self._position})"

    # ---------- state management ----------

    @property
    def position(self) -> Position:
        """Zero-based index of the next output since the last seed."""
        return self._position

    def seed(self, seed: Seed) -> None:
        """
        (Re)initialize the whole state from `seed`.

        Prior state is discarded, so re-seeding with the same value replays
        the stream from position 0.
        """
        value = normalize_seed(seed)
        self._words = init_words(value)
        self._cursor = N
        self._position = 0
        self._seed = value
        logger.debug("Seeded MT19937 with %d", value)

    def _regenerate(self) -> None:
        # Callers reset the cursor.
        twist(self._words)
        self._batch = temper(self._words)

    # ---------- draws ----------

    def rand_u32(self) -> UInt32:
        """Next 32-bit output, in [0, 2**32 - 1]."""
        if self._cursor >= N:
            self._regenerate()
            self._cursor = 0
        y = int(self._batch[self._cursor])
        self._cursor += 1
        self._position += 1
        return y

    def rand_u64(self) -> UInt64:
        """Two consecutive 32-bit outputs, high word first."""
        hi = self.rand_u32()
        lo = self.rand_u32()
        return (hi << 32) | lo

    def randf_cc(self) -> np.float32:
        """Single-precision draw in the closed interval [0, 1]."""
        return np.float32(self.rand_u32()) / _UINT32_MAX_F32

    def randd_cc(self) -> float:
        """
        Double-precision draw in the closed interval [0, 1].

        Uses one 32-bit output divided by 2**32 - 1, so only 2**32
        distinct values are possible.
        """
        return self.rand_u32() / _UINT32_MAX_F64

    # ---------- bulk operations ----------

    def rand_u32_block(self, count: int) -> np.ndarray:
        """
        The next `count` outputs as a uint32 array.

        Equivalent to `count` calls to rand_u32, but copies whole slices of
        the tempered batch.
        """
        count = _normalize_count(count)

        out = np.empty(count, dtype=np.uint32)
        filled = 0
        while filled < count:
            if self._cursor >= N:
                self._regenerate()
                self._cursor = 0
            take = min(N - self._cursor, count - filled)
            out[filled:filled + take] = self._batch[self._cursor:self._cursor + take]
            self._cursor += take
            filled += take

        self._position += count
        return out

    def discard(self, count: int) -> None:
        """
        Advance the stream by `count` outputs.

        Skipped batches are twisted but never tempered, so this is several
        times cheaper than drawing and dropping the values.
        """
        count = _normalize_count(count)

        self._position += count

        available = N - self._cursor
        if count <= available:
            self._cursor += count
            return

        count -= available
        full_batches, rest = divmod(count, N)
        for _ in range(full_batches):
            twist(self._words)
        self._cursor = N

        if rest:
            self._regenerate()
            self._cursor = rest
