"""Mutable strings and Knuth-Morris-Pratt substring search."""


def build_next(t):
    """Return the KMP ``next`` table of the pattern ``t``."""
    table = [-1]
    i, j = 1, -1
    while i < len(t):
        if j == -1 or t[j] == t[i - 1]:
            j += 1
            table.append(j)
            i += 1
        else:
            j = table[j]
    return table


def build_nextval(t):
    """Return the optimised KMP ``nextval`` table of the pattern ``t``."""
    table = [-1]
    i, j = 1, -1
    while i < len(t):
        if j == -1 or t[j] == t[i - 1]:
            j += 1
            table.append(table[j] if t[j] == t[i] else j)
            i += 1
        else:
            j = table[j]
    return table


def kmp(s, t):
    """Return the index of the first occurrence of ``t`` in ``s``, or -1."""
    tlen = len(t)
    table = build_nextval(t)
    i = j = 0
    while i < len(s):
        if j == -1 or (j < tlen and s[i] == t[j]):
            i += 1
            j += 1
            if j == tlen:
                return i - tlen
        else:
            j = table[j]
    return -1


class Str:
    """A mutable string edited one character at a time."""

    def __init__(self, text=""):
        self._chars = list(text)

    def insert(self, i, c):
        """Insert the single character ``c`` before position ``i``."""
        if not 0 <= i <= len(self._chars):
            raise IndexError(f"expected i <= length, found: {i} > {len(self._chars)}")
        if len(c) != 1:
            raise ValueError(f"expected a single character, found: {c!r}")
        self._chars.insert(i, c)

    def insert_str(self, i, t):
        """Insert every character of ``t`` starting at position ``i``."""
        for offset, c in enumerate(t):
            self.insert(i + offset, c)

    def push(self, c):
        self.insert(len(self._chars), c)

    def push_str(self, t):
        for c in t:
            self.push(c)

    def delete(self, i):
        """Remove and return the character at ``i``."""
        if not 0 <= i < len(self._chars):
            raise IndexError(f"expected i < length, found: {i} >= {len(self._chars)}")
        return self._chars.pop(i)

    def readline(self, stream):
        """Replace the contents with the next line of ``stream``, newline included.

        The string is left empty at end of input.
        """
        self._chars.clear()
        self._chars.extend(stream.readline())

    def __len__(self):
        return len(self._chars)

    def __str__(self):
        return "".join(self._chars)

    def __eq__(self, other):
        if isinstance(other, Str):
            return self._chars == other._chars
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"Str({str(self)!r})"