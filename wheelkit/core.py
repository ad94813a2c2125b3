"""Shared constants, timing helpers and small numeric utilities."""

import time

VERSION = "0.1.0"

USIZE_BITS = 64
USIZE_MAX = (1 << USIZE_BITS) - 1


def time_now():
    """Return a point in time, in seconds, for use with :func:`elapsed`."""
    return time.perf_counter()


def elapsed(t0):
    """Return the milliseconds passed since ``t0`` (a value from :func:`time_now`)."""
    return (time_now() - t0) * 1e3


def clamp(value, low, high):
    """Limit ``value`` to the closed interval ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value