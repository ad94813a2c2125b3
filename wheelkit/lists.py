"""A bounds-checked growable list."""

from .rng import random_range

LIST_DEFAULT_SIZE = 128
LIST_MAX_INCREASE = 1024


class ArrayList:
    """Growable list with strict index checks and a tracked capacity.

    Capacity doubles up to ``LIST_MAX_INCREASE`` extra slots at a time and
    halves when less than half of it is in use.
    """

    def __init__(self, values=None, capacity=None):
        if capacity is None:
            capacity = LIST_DEFAULT_SIZE if values is None else None
        items = list(values) if values is not None else []
        self.capacity = len(items) if capacity is None else capacity
        self._items = []
        for value in items:
            self.push(value)

    def _check_index(self, i):
        if not 0 <= i < len(self._items):
            raise IndexError(f"expected i < length, found: {i} >= {len(self._items)}")

    def __getitem__(self, i):
        self._check_index(i)
        return self._items[i]

    def __setitem__(self, i, value):
        self._check_index(i)
        self._items[i] = value

    def insert(self, i, value):
        length = len(self._items)
        if not 0 <= i <= length:
            raise IndexError(f"expected i <= length, found: {i} > {length}")
        if self.capacity <= length:
            growth = min(self.capacity, LIST_MAX_INCREASE)
            self.capacity += growth if growth else 1
        self._items.insert(i, value)

    def push(self, value):
        self.insert(len(self._items), value)

    def delete(self, i):
        """Remove and return the element at ``i``."""
        self._check_index(i)
        value = self._items.pop(i)
        if self.capacity > len(self._items) * 2:
            self.capacity //= 2
        return value

    def is_empty(self):
        return not self._items

    def shuffle(self):
        """Shuffle in place, swapping each slot with a random later one."""
        items = self._items
        for i in range(1, len(items)):
            j = random_range(i, len(items))
            items[i - 1], items[j] = items[j], items[i - 1]

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __eq__(self, other):
        if not isinstance(other, ArrayList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None

    def __str__(self):
        return "{" + ", ".join(str(item) for item in self._items) + "}"

    def __repr__(self):
        return f"ArrayList({self._items!r})"