"""Node types for linked lists and helpers to build and read them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: Optional[ListNode] = field(default=None, repr=False)


@dataclass(eq=False)
class DoublyNode:
    """A node of a doubly linked list."""

    val: Any = 0
    prev: Optional[DoublyNode] = field(default=None, repr=False)
    next: Optional[DoublyNode] = field(default=None, repr=False)


Node = Union[ListNode, DoublyNode]


def iter_nodes(head: Optional[Node]) -> Iterator[Node]:
    """Yield every node reachable from ``head`` by following ``next``.

    The chain must be finite; a cycle makes this generator endless.
    """
    node = head
    while node is not None:
        yield node
        node = node.next


def length(head: Optional[Node]) -> int:
    """Return the number of nodes in the chain starting at ``head``."""
    return sum(1 for _ in iter_nodes(head))


def from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a singly linked list holding ``values`` in order.

    Returns the head, or ``None`` when ``values`` is empty.
    """
    sentinel = ListNode()
    tail = sentinel
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return sentinel.next


def to_values(head: Optional[Node]) -> list[Any]:
    """Return the values of the chain starting at ``head`` as a list."""
    return [node.val for node in iter_nodes(head)]


def doubly_from_values(values: Iterable[Any]) -> Optional[DoublyNode]:
    """Build a doubly linked list holding ``values`` in order.

    Returns the head, or ``None`` when ``values`` is empty.
    """
    head: Optional[DoublyNode] = None
    tail: Optional[DoublyNode] = None
    for value in values:
        node = DoublyNode(value, prev=tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def doubly_to_values(head: Optional[DoublyNode]) -> list[Any]:
    """Return the values of a doubly linked list, walking forward."""
    return to_values(head)