"""Mersenne Twister (MT19937) generator of 32-bit unsigned integers."""

from .constants import DEFAULT_SEED
from .generator import MT19937Generator
from .mt19937ar import genrand_int32, get_generator, init_genrand
from .tempering import temper, temper_array

__all__ = [
    "DEFAULT_SEED",
    "MT19937Generator",
    "genrand_int32",
    "get_generator",
    "init_genrand",
    "temper",
    "temper_array",
]
