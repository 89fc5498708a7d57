"""Parameters of the 32-bit Mersenne Twister (MT19937).

Names follow the usual presentation of the algorithm: ``(w, n, m, r)`` for the
recurrence, ``a`` for the twist matrix and ``(u, d, s, b, t, c, l)`` for the
tempering transform.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Recurrence
# ---------------------------------------------------------------------------

W = 32
N = 624
M = 397
R = 31
A = 0x9908B0DF

# ---------------------------------------------------------------------------
# Tempering
# ---------------------------------------------------------------------------

U = 11
D = 0xFFFFFFFF
S = 7
B = 0x9D2C5680
T = 15
C = 0xEFC60000
L = 18

# ---------------------------------------------------------------------------
# Seeding
# ---------------------------------------------------------------------------

F = 1812433253
# Default seed of the reference mt19937ar.c
DEFAULT_SEED = 5489

MASK_32 = (1 << W) - 1
SEED_MAX = MASK_32
LOWER_MASK = (1 << R) - 1
UPPER_MASK = ~LOWER_MASK & MASK_32

__all__ = [
    "A",
    "B",
    "C",
    "D",
    "DEFAULT_SEED",
    "F",
    "L",
    "LOWER_MASK",
    "M",
    "MASK_32",
    "N",
    "R",
    "S",
    "SEED_MAX",
    "T",
    "U",
    "UPPER_MASK",
    "W",
]
