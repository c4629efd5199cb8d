"""Doubly linked list: a head/tail list class and node-level operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Any, Optional

from .nodes import DoublyNode, iter_nodes, length


def _last(head: DoublyNode) -> DoublyNode:
    node = head
    while node.next is not None:
        node = node.next
    return node


def _nth(head: Optional[DoublyNode], index: int) -> Optional[DoublyNode]:
    """Return the node at 0-based ``index``, or ``None`` past the end."""
    return next(islice(iter_nodes(head), index, None), None)


def _unlink(head: DoublyNode, node: DoublyNode) -> Optional[DoublyNode]:
    """Detach ``node`` from the list starting at ``head``; return the new head."""
    back, front = node.prev, node.next
    if back is not None:
        back.next = front
    if front is not None:
        front.prev = back
    node.prev = node.next = None
    return front if node is head else head


def _link_before(node: DoublyNode, new: DoublyNode) -> None:
    """Place ``new`` directly in front of ``node``."""
    new.prev = node.prev
    new.next = node
    if node.prev is not None:
        node.prev.next = new
    node.prev = new


class DoublyLinkedList:
    """A doubly linked list that keeps track of both ends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[DoublyNode] = None
        self.tail: Optional[DoublyNode] = None
        for value in values:
            self.insert_at_tail(value)

    def __iter__(self) -> Iterator[Any]:
        for node in iter_nodes(self.head):
            yield node.val

    def __len__(self) -> int:
        return length(self.head)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.val
            node = node.prev

    def insert_at_head(self, data: Any) -> None:
        """Put ``data`` in front of the list."""
        node = DoublyNode(data, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node

    def insert_at_tail(self, data: Any) -> None:
        """Append ``data`` to the end of the list."""
        node = DoublyNode(data, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node

    def insert_at(self, pos: int, data: Any) -> None:
        """Insert ``data`` so that it becomes the ``pos``-th node (1-based).

        An empty list simply receives the value; a position past the end
        appends. Raises IndexError for a position below 1.
        """
        if self.head is None:
            self.insert_at_head(data)
            return
        if pos < 1:
            raise IndexError(f"insertion not possible at position {pos}")
        if pos == 1:
            self.insert_at_head(data)
            return
        if pos > len(self):
            self.insert_at_tail(data)
            return
        _link_before(_nth(self.head, pos - 1), DoublyNode(data))

    def delete_at(self, pos: int) -> Any:
        """Remove the ``pos``-th node (1-based) and return its value.

        A position at or past the end removes the last node. Raises
        IndexError for a position below 1 or an empty list.
        """
        if pos < 1:
            raise IndexError(f"deletion not possible at position {pos}")
        if self.head is None:
            raise IndexError("deletion not possible: list is empty")
        if pos == 1:
            node = self.head
        elif pos >= len(self):
            node = self.tail
        else:
            node = _nth(self.head, pos - 1)
        if node is self.tail:
            self.tail = node.prev
        self.head = _unlink(self.head, node)
        return node.val


def insert_head(head: Optional[DoublyNode], val: Any) -> DoublyNode:
    """Return a new head holding ``val`` in front of ``head``."""
    node = DoublyNode(val, next=head)
    if head is not None:
        head.prev = node
    return node


def insert_tail(head: Optional[DoublyNode], val: Any) -> DoublyNode:
    """Append ``val`` and return the (possibly new) head."""
    if head is None:
        return DoublyNode(val)
    last = _last(head)
    last.next = DoublyNode(val, prev=last)
    return head


def insert_before_tail(head: Optional[DoublyNode], val: Any) -> DoublyNode:
    """Insert ``val`` just in front of the last node and return the head.

    Raises IndexError on an empty list, which has no last node.
    """
    if head is None:
        raise IndexError("insertion not possible: list is empty")
    node = DoublyNode(val)
    _link_before(_last(head), node)
    return node if node.prev is None else head


def insert_before_position(head: Optional[DoublyNode], pos: int, val: Any) -> DoublyNode:
    """Insert ``val`` in front of the ``pos``-th node (1-based).

    An empty list accepts position 1 only. Raises IndexError when there
    is no ``pos``-th node.
    """
    if head is None:
        if pos == 1:
            return DoublyNode(val)
        raise IndexError("insertion not possible: list is empty")
    if pos < 1:
        raise IndexError(f"insertion not possible at position {pos}")
    target = _nth(head, pos - 1)
    if target is None:
        raise IndexError(f"insertion not possible at position {pos}")
    node = DoublyNode(val)
    _link_before(target, node)
    return node if target is head else head


def delete_head(head: Optional[DoublyNode]) -> Optional[DoublyNode]:
    """Drop the first node and return the new head."""
    if head is None:
        return None
    return _unlink(head, head)


def delete_tail(head: Optional[DoublyNode]) -> Optional[DoublyNode]:
    """Drop the last node and return the head."""
    if head is None:
        return None
    return _unlink(head, _last(head))


def delete_at(head: Optional[DoublyNode], pos: int) -> Optional[DoublyNode]:
    """Remove the ``pos``-th node (1-based) and return the head.

    Raises IndexError on an empty list or when there is no such node.
    """
    if head is None:
        raise IndexError("deletion not possible: list is empty")
    if pos < 1:
        raise IndexError(f"deletion not possible at position {pos}")
    node = _nth(head, pos - 1)
    if node is None:
        raise IndexError(f"deletion not possible at position {pos}")
    return _unlink(head, node)


def delete_value(head: Optional[DoublyNode], val: Any) -> Optional[DoublyNode]:
    """Remove the first node holding ``val``; an absent value changes nothing."""
    node = next((n for n in iter_nodes(head) if n.val == val), None)
    if node is None:
        return head
    return _unlink(head, node)


def reverse_values(head: Optional[DoublyNode]) -> Optional[DoublyNode]:
    """Reverse the order of the values in place, keeping the nodes."""
    nodes = list(iter_nodes(head))
    for node, value in zip(nodes, reversed([n.val for n in nodes])):
        node.val = value
    return head