"""Output tempering of the Mersenne Twister."""

from __future__ import annotations

import numpy as np

from .constants import B, C, D, L, MASK_32, S, T, U

__all__ = ["temper", "temper_array"]


def temper(y: int) -> int:
    """Return the tempered value of the 32-bit state word *y*."""

    if y < 0 or y > MASK_32:
        raise ValueError(f"State word must be between 0 and 2**32 - 1, got {y}")
    y ^= (y >> U) & D
    y ^= (y << S) & B
    y ^= (y << T) & C
    y ^= y >> L
    return y


def temper_array(words: np.ndarray) -> np.ndarray:
    """Element-wise :func:`temper` for an array of 32-bit state words.

    A new ``uint32`` array is returned; *words* is left untouched.
    """

    y = np.array(words, dtype=np.uint32)
    y ^= (y >> U) & np.uint32(D)
    y ^= (y << S) & np.uint32(B)
    y ^= (y << T) & np.uint32(C)
    y ^= y >> L
    return y
