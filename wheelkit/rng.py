"""Pseudo-random numbers built from 31-bit draws."""

import random
import time

from .core import USIZE_MAX

_RAND_BITS = 31
_generator = random.Random()


def tsrandom():
    """Seed the generator with the current time in whole seconds."""
    _generator.seed(int(time.time()))


def random_usize():
    """Return a random unsigned 64-bit value made of two 31-bit draws."""
    a = _generator.getrandbits(_RAND_BITS)
    b = _generator.getrandbits(_RAND_BITS)
    return (a << 32 | b) & USIZE_MAX


def random_isize():
    """Return :func:`random_usize` read as a signed 64-bit value."""
    value = random_usize()
    return value - (1 << 64) if value >= 1 << 63 else value


def random_f64():
    """Return a random float in ``[0, 1]``."""
    return random_usize() / USIZE_MAX


def random_range(start, end):
    """Return a random integer in ``[start, end)``."""
    if start > end:
        raise ValueError(f"expected start <= end, found: {start} > {end}")
    width = end - start
    if width == 0:
        raise ValueError(f"empty range: [{start}, {end})")
    return random_usize() % width + start