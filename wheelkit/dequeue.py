"""A double-ended queue of values."""

from collections import deque


class Dequeue:
    """Double-ended queue that raises :class:`IndexError` when read while empty."""

    def __init__(self, values=()):
        self._items = deque(values)

    def push_front(self, value):
        self._items.appendleft(value)

    def push_back(self, value):
        self._items.append(value)

    def _require_items(self):
        if not self._items:
            raise IndexError("expected a non-empty Dequeue")

    def pop_front(self):
        self._require_items()
        return self._items.popleft()

    def pop_back(self):
        self._require_items()
        return self._items.pop()

    def first(self):
        self._require_items()
        return self._items[0]

    def last(self):
        self._require_items()
        return self._items[-1]

    def is_empty(self):
        return not self._items

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __reversed__(self):
        return reversed(self._items)

    def __repr__(self):
        return f"Dequeue({list(self._items)!r})"