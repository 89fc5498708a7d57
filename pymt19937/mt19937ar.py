"""Module-level API mimicking the reference ``mt19937ar.c`` routines.

The C implementation keeps a single static state vector which is initialised
with ``init_genrand`` and consumed with ``genrand_int32``.  The same calling
convention is reproduced here on top of a module-owned
:class:`~pymt19937.generator.MT19937Generator`, so code written against the
reference routines can be ported without threading a generator object through
every call.  Only the integer routines are provided.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .generator import MT19937Generator


@dataclass
class _GlobalState:
    """Container holding the shared generator."""

    generator: MT19937Generator = field(default_factory=MT19937Generator)

    def reseed(self, seed: Optional[int] = None) -> None:
        self.generator.reseed(seed)


_STATE = _GlobalState()


def init_genrand(seed: Optional[int] = None) -> None:
    """Initialise the module generator.

    Parameters
    ----------
    seed:
        Integer in ``[0, 2**32 - 1]``.  When *None* the reference default seed
        5489 is used, which is also the state the module starts in.
    """

    _STATE.reseed(seed)


def genrand_int32(size: Optional[int] = None) -> int | np.ndarray:
    """Return random 32-bit unsigned integers in ``[0, 2**32)``."""

    return _STATE.generator.random_raw(size)


def get_generator() -> MT19937Generator:
    """Return the generator backing this module."""

    return _STATE.generator


__all__ = [
    "genrand_int32",
    "get_generator",
    "init_genrand",
]
