"""A small growable container with fixed-slot semantics."""

from __future__ import annotations

from typing import Iterator


class Grouper:
    """Ordered collection with a capacity that grows one slot at a time."""

    def __init__(self, capacity=1):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._slots = [None] * capacity
        self._size = 0

    @property
    def capacity(self):
        return len(self._slots)

    def _grow(self):
        self._slots.append(None)

    def _position(self, index):
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for size {self._size}")
        return index

    def append(self, element):
        """Add an element at the end, growing capacity by one when full."""
        if self._size >= len(self._slots):
            self._grow()
        self._slots[self._size] = element
        self._size += 1

    def replace_first(self, element):
        """Overwrite the first slot without changing the size."""
        if not self._slots:
            self._grow()
        self._slots[0] = element

    def insert(self, index, element):
        """Insert before index; at the last position the element replaces it."""
        if self._size == 0 or not 0 <= index < self._size:
            raise IndexError(f"cannot insert at {index} into size {self._size}")
        if index == self._size - 1:
            self._slots[index] = element
            return
        if self._size >= len(self._slots):
            self._grow()
        self._slots.insert(index, element)
        self._slots.pop()
        self._size += 1

    def erase(self, index):
        """Remove the element at index; the only remaining element cannot go."""
        if self._size <= 1:
            raise IndexError("cannot erase from a collection of fewer than two")
        position = self._position(index)
        del self._slots[position]
        self._slots.append(None)
        self._size -= 1

    def first(self):
        if self._size == 0:
            raise IndexError("first() on an empty collection")
        return self._slots[0]

    def last(self):
        if self._size == 0:
            raise IndexError("last() on an empty collection")
        return self._slots[self._size - 1]

    def __getitem__(self, index):
        return self._slots[self._position(index)]

    def __setitem__(self, index, element):
        self._slots[self._position(index)] = element

    def __len__(self):
        return self._size

    def __iter__(self) -> Iterator:
        return iter(self._slots[: self._size])

    def __repr__(self):
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"


def _is_plain_value(value):
    return isinstance(value, (int, float, str)) and not isinstance(value, bool)


def sort_values(bag):
    """Sort a bag of plain numbers or characters ascending, in place.

    Returns False when the bag holds anything else. Bags of two or fewer
    elements are left untouched.
    """
    if not all(_is_plain_value(value) for value in bag):
        return False
    if len(bag) > 2:
        for position, value in enumerate(sorted(bag)):
            bag[position] = value
    return True