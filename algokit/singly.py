"""Singly linked list: a head/tail list class and node-level operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Any, Optional

from .nodes import ListNode, iter_nodes, length


class LinkedList:
    """A singly linked list that keeps track of both ends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        self.tail: Optional[ListNode] = None
        for value in values:
            self.insert_at_tail(value)

    def __iter__(self) -> Iterator[Any]:
        for node in iter_nodes(self.head):
            yield node.val

    def __len__(self) -> int:
        return length(self.head)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, index: int) -> ListNode:
        return next(islice(iter_nodes(self.head), index, None))

    def insert_at_head(self, data: Any) -> None:
        """Put ``data`` in front of the list."""
        node = ListNode(data, self.head)
        self.head = node
        if self.tail is None:
            self.tail = node

    def insert_at_tail(self, data: Any) -> None:
        """Append ``data`` to the end of the list."""
        node = ListNode(data)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node

    def insert_at(self, pos: int, data: Any) -> None:
        """Insert ``data`` by position.

        An empty list simply receives the value. Position 0 prepends and a
        position equal to the length appends. Any other position places the
        value right after node ``pos - 1`` (counting from 1); positions 1 and
        2 both put it directly after the head.
        """
        if self.head is None:
            self.insert_at_head(data)
            return
        size = len(self)
        if pos == 0:
            self.insert_at_head(data)
            return
        if pos == size:
            self.insert_at_tail(data)
            return
        if not 0 < pos < size:
            raise IndexError(f"position {pos} out of range for list of length {size}")
        prev = self._node_at(max(pos - 2, 0))
        prev.next = ListNode(data, prev.next)

    def delete_at(self, pos: int) -> Any:
        """Remove the node at 1-based ``pos`` and return its value."""
        size = len(self)
        if not 1 <= pos <= size:
            raise IndexError(f"position {pos} out of range for list of length {size}")
        if pos == 1:
            node = self.head
            self.head = node.next
            if self.head is None:
                self.tail = None
            return node.val
        prev = self._node_at(pos - 2)
        node = prev.next
        prev.next = node.next
        if node is self.tail:
            self.tail = prev
        node.next = None
        return node.val


def _nth_node(head: Optional[ListNode], index: int) -> Optional[ListNode]:
    """Return the node at 0-based ``index``, or ``None`` past the end."""
    return next(islice(iter_nodes(head), index, None), None)


def insert_at_head(head: Optional[ListNode], val: Any) -> ListNode:
    """Return a new head holding ``val`` in front of ``head``."""
    return ListNode(val, head)


def insert_at_tail(head: Optional[ListNode], val: Any) -> ListNode:
    """Append ``val`` and return the (possibly new) head."""
    node = ListNode(val)
    if head is None:
        return node
    last = head
    while last.next is not None:
        last = last.next
    last.next = node
    return head


def insert_at_position(head: Optional[ListNode], val: Any, pos: int) -> ListNode:
    """Insert ``val`` so that it becomes the ``pos``-th node (1-based).

    A position past the end appends. Raises IndexError when the list is
    empty and ``pos`` is greater than 1, or when ``pos`` is below 1.
    """
    if pos < 1:
        raise IndexError(f"insertion not possible at position {pos}")
    if head is None:
        if pos > 1:
            raise IndexError("insertion not possible: list is empty")
        return ListNode(val)
    if pos == 1:
        return ListNode(val, head)
    prev = head
    for _ in range(pos - 2):
        if prev.next is None:
            break
        prev = prev.next
    prev.next = ListNode(val, prev.next)
    return head


def delete_head(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop the first node and return the new head."""
    if head is None:
        return None
    new_head = head.next
    head.next = None
    return new_head


def delete_tail(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop the last node and return the head."""
    if head is None or head.next is None:
        return None
    prev = head
    while prev.next.next is not None:
        prev = prev.next
    prev.next = None
    return head


def delete_at_position(head: Optional[ListNode], pos: int) -> Optional[ListNode]:
    """Remove the node at 1-based ``pos`` and return the head."""
    if head is None:
        raise IndexError("deletion not possible: list is empty")
    if pos < 1:
        raise IndexError(f"deletion not possible at position {pos}")
    if pos == 1:
        return delete_head(head)
    prev = _nth_node(head, pos - 2)
    if prev is None or prev.next is None:
        raise IndexError(f"deletion not possible at position {pos}")
    node = prev.next
    prev.next = node.next
    node.next = None
    return head


def delete_after_position(head: Optional[ListNode], pos: int) -> Optional[ListNode]:
    """Remove the node that follows the 1-based ``pos``-th node."""
    if head is None:
        raise IndexError("deletion not possible: list is empty")
    if pos < 1:
        raise IndexError(f"deletion not possible after position {pos}")
    anchor = _nth_node(head, pos - 1)
    if anchor is None or anchor.next is None:
        raise IndexError(f"deletion not possible after position {pos}")
    node = anchor.next
    anchor.next = node.next
    node.next = None
    return head


def delete_before_position(head: Optional[ListNode], pos: int) -> Optional[ListNode]:
    """Remove the node just before the 1-based ``pos``-th node."""
    if head is None:
        raise IndexError("deletion not possible: list is empty")
    if pos == 2 and head.next is not None:
        return delete_head(head)
    if pos < 2 or head.next is None:
        raise IndexError(f"deletion not possible before position {pos}")
    prev = _nth_node(head, pos - 3)
    if prev is None or prev.next is None:
        raise IndexError(f"deletion not possible before position {pos}")
    node = prev.next
    prev.next = node.next
    node.next = None
    return head


def delete_value(head: Optional[ListNode], value: Any) -> Optional[ListNode]:
    """Remove the first node holding ``value`` and return the head.

    Raises ValueError when no node holds ``value``.
    """
    if head is None:
        raise ValueError(f"{value!r} not in list")
    if head.val == value:
        return delete_head(head)
    prev = head
    while prev.next is not None and prev.next.val != value:
        prev = prev.next
    if prev.next is None:
        raise ValueError(f"{value!r} not in list")
    node = prev.next
    prev.next = node.next
    node.next = None
    return head


def reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    prev = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def remove_sorted_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Collapse runs of equal values in a sorted list, in place."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def remove_nth_from_end(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Remove the ``k``-th node counted from the end (1 is the last).

    ``k`` of 0 leaves the list unchanged.
    """
    size = length(head)
    if k == 0:
        return head
    if not 0 < k <= size:
        raise IndexError(f"cannot remove node {k} from the end of a list of length {size}")
    if k == size:
        return delete_head(head)
    prev = _nth_node(head, size - k - 1)
    node = prev.next
    prev.next = node.next
    node.next = None
    return head