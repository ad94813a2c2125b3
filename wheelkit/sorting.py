"""In-place randomised quicksort."""

from .rng import random_range


def _shuffle(items):
    for i in range(1, len(items)):
        j = random_range(i, len(items))
        items[i - 1], items[j] = items[j], items[i - 1]


def _partition(items, begin, end):
    i, j = begin, end - 1
    pivot = items[i]
    while i < j:
        while i < j and items[j] >= pivot:
            j -= 1
        items[i] = items[j]
        while i < j and items[i] <= pivot:
            i += 1
        items[j] = items[i]
    items[i] = pivot
    return i


def qsort(items):
    """Shuffle, then quicksort a mutable sequence in place."""
    _shuffle(items)
    ranges = [(0, len(items))]
    while ranges:
        begin, end = ranges.pop()
        if end <= begin + 1:
            continue
        middle = _partition(items, begin, end)
        ranges.append((begin, middle))
        ranges.append((middle + 1, end))