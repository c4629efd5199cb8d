"""A double-ended queue with a fixed capacity, kept in a circular array."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class FixedDeque:
    """A double-ended queue that holds at most ``size`` items.

    Items live in a circular array, so both ends wrap around. Pushing onto a
    full deque raises OverflowError; popping or peeking an empty one raises
    IndexError.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self._slots: list[Any] = [None] * size
        self._head = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        """The largest number of items the deque can hold."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._count):
            yield self._slots[self._index(offset)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={list(self)!r})"

    def _index(self, offset: int) -> int:
        return (self._head + offset) % len(self._slots)

    def is_empty(self) -> bool:
        """Tell whether the deque holds no items."""
        return self._count == 0

    def is_full(self) -> bool:
        """Tell whether the deque has reached its capacity."""
        return self._count == len(self._slots)

    def push_front(self, data: Any) -> None:
        """Put ``data`` at the front; raises OverflowError when full."""
        if self.is_full():
            raise OverflowError("deque is full")
        self._head = (self._head - 1) % len(self._slots)
        self._slots[self._head] = data
        self._count += 1

    def push_rear(self, data: Any) -> None:
        """Put ``data`` at the rear; raises OverflowError when full."""
        if self.is_full():
            raise OverflowError("deque is full")
        self._slots[self._index(self._count)] = data
        self._count += 1

    def pop_front(self) -> Any:
        """Remove and return the front item; raises IndexError when empty."""
        if self.is_empty():
            raise IndexError("pop from empty deque")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % len(self._slots)
        self._count -= 1
        return value

    def pop_rear(self) -> Any:
        """Remove and return the rear item; raises IndexError when empty."""
        if self.is_empty():
            raise IndexError("pop from empty deque")
        index = self._index(self._count - 1)
        value = self._slots[index]
        self._slots[index] = None
        self._count -= 1
        return value

    def front(self) -> Any:
        """Return the front item without removing it; raises IndexError when empty."""
        if self.is_empty():
            raise IndexError("front of empty deque")
        return self._slots[self._head]

    def rear(self) -> Any:
        """Return the rear item without removing it; raises IndexError when empty."""
        if self.is_empty():
            raise IndexError("rear of empty deque")
        return self._slots[self._index(self._count - 1)]