"""Stack containers and recursive-style stack and bracket utilities.

Stacks passed to the functions here are plain lists with the top at the end.
"""

from __future__ import annotations

from typing import Any


class ArrayStack:
    """A stack with a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={self._items!r})"

    def push(self, data: Any) -> None:
        """Put ``data`` on top; raises OverflowError when the stack is full."""
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the top item; raises IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top item without removing it; raises IndexError when empty."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the stack holds no items."""
        return not self._items

    def is_full(self) -> bool:
        """Tell whether the stack has reached its capacity."""
        return len(self._items) >= self.capacity


class TwoStacks:
    """Two stacks sharing one fixed array, growing towards each other.

    Stack 1 grows from the start of the array, stack 2 from its end. A
    freed slot is reset to 0.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._slots: list[Any] = [0] * size
        self._top1 = -1
        self._top2 = size

    def push1(self, data: Any) -> None:
        """Push onto stack 1; raises OverflowError when no slot is free."""
        if self._top2 - self._top1 <= 1:
            raise OverflowError("no space left for stack 1")
        self._top1 += 1
        self._slots[self._top1] = data

    def push2(self, data: Any) -> None:
        """Push onto stack 2; raises OverflowError when no slot is free."""
        if self._top2 - self._top1 <= 1:
            raise OverflowError("no space left for stack 2")
        self._top2 -= 1
        self._slots[self._top2] = data

    def pop1(self) -> Any:
        """Pop from stack 1 and return the value; raises IndexError when empty."""
        if self._top1 == -1:
            raise IndexError("stack 1 is empty")
        value = self._slots[self._top1]
        self._slots[self._top1] = 0
        self._top1 -= 1
        return value

    def pop2(self) -> Any:
        """Pop from stack 2 and return the value; raises IndexError when empty."""
        if self._top2 == len(self._slots):
            raise IndexError("stack 2 is empty")
        value = self._slots[self._top2]
        self._slots[self._top2] = 0
        self._top2 += 1
        return value

    def slots(self) -> list[Any]:
        """Return a copy of the shared array, slot by slot."""
        return list(self._slots)


def insert_at_bottom(stack: list[Any], item: Any) -> None:
    """Place ``item`` beneath every element of ``stack``, in place."""
    stack.insert(0, item)


def reverse_stack(stack: list[Any]) -> None:
    """Reverse the order of ``stack`` in place."""
    stack.reverse()


def sort_stack(stack: list[Any]) -> None:
    """Sort ``stack`` in place so that the smallest element is on top."""
    stack.sort(reverse=True)


def middle_of_stack(stack: list[Any]) -> Any:
    """Return the middle element of ``stack`` without changing it.

    For a stack of ``n`` items this is the item with ``n // 2`` items beneath
    it. Raises IndexError for an empty stack.
    """
    if not stack:
        raise IndexError("there is no middle element in an empty stack")
    return stack[len(stack) // 2]


def delete_middle(stack: list[Any], k: int) -> Any:
    """Remove and return the ``k``-th element counted from the top (1 is the top).

    Raises IndexError when the stack has no such element.
    """
    if not 1 <= k <= len(stack):
        raise IndexError(f"no element {k} from the top in a stack of {len(stack)}")
    return stack.pop(len(stack) - k)


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    pending = list(text)
    return "".join(pending.pop() for _ in range(len(pending)))


_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed by its match, in order.

    Any character that is not an opening bracket must close the most recent
    open one, so other characters make the string invalid.
    """
    opened: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            opened.append(ch)
        elif opened and _PAIRS.get(ch) == opened[-1]:
            opened.pop()
        else:
            return False
    return not opened


def min_reversals(s: str) -> int:
    """Return the fewest brace flips needed to balance ``s``.

    Every character other than ``{`` counts as a closing brace. Raises
    ValueError when ``s`` has odd length, which no flips can balance.
    """
    if len(s) % 2:
        raise ValueError("a string of odd length cannot be balanced")
    pending: list[str] = []
    for ch in s:
        if ch != "{" and pending and pending[-1] == "{":
            pending.pop()
        else:
            pending.append(ch)
    count = 0
    while pending:
        a = pending.pop()
        b = pending.pop()
        count += 1 if a == b else 2
    return count