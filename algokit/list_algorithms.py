"""Classic algorithms over singly linked lists built from ``ListNode``."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional

from .nodes import ListNode, from_values, iter_nodes, length, to_values
from .singly import reverse


def _first_middle(head: ListNode) -> ListNode:
    """Return the middle node, taking the first of the two for even lengths."""
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow


def middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; for an even length, the second of the two."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the values read the same both ways.

    The second half is reversed for the comparison and restored afterwards,
    so the list is left as it was.
    """
    if head is None or head.next is None:
        return True
    mid = _first_middle(head)
    second = reverse(mid.next)
    mid.next = second
    try:
        return all(a.val == b.val for a, b in zip(iter_nodes(head), iter_nodes(second)))
    finally:
        mid.next = reverse(second)


def add_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored one decimal digit per node, most significant first.

    Returns a new list holding the sum in the same layout; the inputs are
    not changed. Two empty lists give ``None``.
    """
    out: list[int] = []
    carry = 0
    for x, y in zip_longest(reversed(to_values(l1)), reversed(to_values(l2)), fillvalue=0):
        carry, digit = divmod(x + y + carry, 10)
        out.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        out.append(digit)
    return from_values(reversed(out))


def find_cycle_start(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a cycle begins, or ``None`` if the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            slow = head
            while slow is not fast:
                slow = slow.next
                fast = fast.next
            return slow
    return None


def remove_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Break the cycle in the list, if any, and return its starting node.

    Returns ``None`` and leaves the list alone when there is no cycle.
    """
    start = find_cycle_start(head)
    if start is None:
        return None
    node = start
    while node.next is not start:
        node = node.next
    node.next = None
    return start


def intersection(head_a: Optional[ListNode], head_b: Optional[ListNode]) -> Optional[ListNode]:
    """Return the first node shared by both lists, or ``None``."""
    len_a, len_b = length(head_a), length(head_b)
    a = next(islice(iter_nodes(head_a), max(len_a - len_b, 0), None), None)
    b = next(islice(iter_nodes(head_b), max(len_b - len_a, 0), None), None)
    while a is not b:
        a = a.next
        b = b.next
    return a


def merge_sorted(left: Optional[ListNode], right: Optional[ListNode]) -> Optional[ListNode]:
    """Merge two sorted lists by relinking their nodes; ties take ``left`` first."""
    sentinel = ListNode()
    tail = sentinel
    while left is not None and right is not None:
        if left.val <= right.val:
            tail.next, left = left, left.next
        else:
            tail.next, right = right, right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return sentinel.next


def reverse_in_groups(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse every full run of ``k`` nodes; a shorter remainder stays as is."""
    if k < 1:
        raise ValueError(f"group size must be positive, got {k}")
    sentinel = ListNode(next=head)
    group_prev = sentinel
    while True:
        kth = next(islice(iter_nodes(group_prev), k, None), None)
        if kth is None:
            break
        group_next = kth.next
        first = group_prev.next
        prev, node = group_next, first
        while node is not group_next:
            node.next, prev, node = prev, node, node.next
        group_prev.next = kth
        group_prev = first
    return sentinel.next


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list ``k`` places to the right and return the new head.

    A negative ``k`` rotates to the left.
    """
    if head is None:
        return None
    size = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        size += 1
    steps = size - k % size
    tail.next = head
    for _ in range(steps):
        tail = tail.next
    new_head = tail.next
    tail.next = None
    return new_head


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list with merge sort, relinking nodes, and return the new head."""
    if head is None or head.next is None:
        return head
    mid = _first_middle(head)
    right = mid.next
    mid.next = None
    return merge_sorted(sort_list(head), sort_list(right))