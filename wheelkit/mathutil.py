"""Integer helpers."""


def usize_log2(n):
    """Return the floor of the base-2 logarithm of a positive integer."""
    if n <= 0:
        raise ValueError(f"expected n > 0, found: {n}")
    return n.bit_length() - 1