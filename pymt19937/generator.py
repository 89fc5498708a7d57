"""The MT19937 generator state machine."""

from __future__ import annotations

import logging
import operator

import numpy as np

from .constants import (
    A,
    DEFAULT_SEED,
    F,
    LOWER_MASK,
    M,
    MASK_32,
    N,
    SEED_MAX,
    UPPER_MASK,
    W,
)
from .tempering import temper, temper_array

LOGGER = logging.getLogger(__name__)

__all__ = ["MT19937Generator"]

# Index blocks of the twist that may be updated as a whole.  Each block reads
# ``state[(i + M) % N]`` only from a block that is either complete or not yet
# started, so the result matches the word-by-word recurrence.
_TWIST_BLOCKS = ((0, N - M), (N - M, 2 * (N - M)), (2 * (N - M), N - 1))

_MAG01 = np.array([0, A], dtype=np.uint32)


def _check_seed(seed: int | None) -> int:
    if seed is None:
        return DEFAULT_SEED
    if isinstance(seed, (bool, np.bool_)):
        raise TypeError("Seed must be an integer, got bool")
    try:
        value = operator.index(seed)
    except TypeError:
        raise TypeError(f"Seed must be an integer, got {type(seed).__name__}") from None
    if value < 0 or value > SEED_MAX:
        raise ValueError(f"Seed must be between 0 and 2**32 - 1, got {value}")
    return value


def _check_count(count: int) -> int:
    value = operator.index(count)
    if value < 0:
        raise ValueError(f"size must be non-negative, got {value}")
    return value


def _init_state(seed: int) -> np.ndarray:
    """Fill all ``N`` state words from *seed* using the Knuth multiplier."""

    words = [seed]
    prev = seed
    for i in range(1, N):
        prev = (F * (prev ^ (prev >> (W - 2))) + i) & MASK_32
        words.append(prev)
    return np.array(words, dtype=np.uint32)


class MT19937Generator:
    """Mersenne Twister producing 32-bit unsigned integers.

    Parameters
    ----------
    seed:
        Integer in ``[0, 2**32 - 1]``.  When *None* the default seed of the
        reference implementation (5489) is used.  ``bool`` is rejected.

    Notes
    -----
    ``seed``, ``lower_mask`` and ``upper_mask`` are read-only; use
    :meth:`reseed` to restart the sequence.  The generator is a plain mutable
    object without locking.  Use one instance per thread or stream.
    """

    __slots__ = ("_seed", "state", "index", "twists")

    def __init__(self, seed: int | None = None) -> None:
        self.reseed(seed)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self._seed}, index={self.index}, twists={self.twists})"

    @property
    def seed(self) -> int:
        """Seed of the current sequence."""
        return self._seed

    @property
    def lower_mask(self) -> int:
        return LOWER_MASK

    @property
    def upper_mask(self) -> int:
        return UPPER_MASK

    def reseed(self, seed: int | None = None) -> None:
        """Reset the state as if the generator was constructed with *seed*."""

        value = _check_seed(seed)
        self._seed = value
        self.state = _init_state(value)
        self.index = N
        self.twists = 0
        LOGGER.debug("Seeded MT19937 generator with %d", value)

    def twist(self) -> None:
        """Regenerate the whole state and rewind the cursor."""

        mt = self.state
        for start, stop in _TWIST_BLOCKS:
            y = (mt[start:stop] & UPPER_MASK) | (mt[start + 1:stop + 1] & LOWER_MASK)
            src = (start + M) % N
            mt[start:stop] = mt[src:src + stop - start] ^ (y >> 1) ^ _MAG01[y & 1]

        # The last word wraps around to the freshly updated ``mt[0]``.
        y = (int(mt[N - 1]) & UPPER_MASK) | (int(mt[0]) & LOWER_MASK)
        mt[N - 1] = int(mt[M - 1]) ^ (y >> 1) ^ int(_MAG01[y & 1])

        self.index = 0
        self.twists += 1
        LOGGER.debug("Twist %d regenerated %d state words", self.twists, N)

    def next(self) -> int:
        """Return the next 32-bit output."""

        if self.index >= N:
            self.twist()
        y = int(self.state[self.index])
        self.index += 1
        return temper(y)

    def random_raw(self, size: int | None = None) -> int | np.ndarray:
        """Return *size* successive outputs as a ``uint32`` array.

        With ``size=None`` a single Python integer is returned, exactly as
        :meth:`next`.  The generator ends in the same state as after *size*
        calls to :meth:`next`.
        """

        if size is None:
            return self.next()

        count = _check_count(size)
        out = np.empty(count, dtype=np.uint32)
        filled = 0
        while filled < count:
            if self.index >= N:
                self.twist()
            take = min(N - self.index, count - filled)
            out[filled:filled + take] = temper_array(self.state[self.index:self.index + take])
            self.index += take
            filled += take
        return out

    def discard(self, count: int) -> None:
        """Advance past *count* outputs without producing them.

        Leaves the generator exactly where *count* calls to :meth:`next`
        would, using no memory beyond the state itself.
        """

        remaining = _check_count(count)
        while remaining:
            if self.index >= N:
                self.twist()
            step = min(N - self.index, remaining)
            self.index += step
            remaining -= step

    def __iter__(self) -> MT19937Generator:
        return self

    def __next__(self) -> int:
        return self.next()
