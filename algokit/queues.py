"""Queue algorithms: sliding windows, interleaving and reversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Any


def first_negative_in_windows(values: Iterable[int], k: int) -> list[int]:
    """Return the first negative number in every window of ``k`` values.

    A window with no negative number contributes 0. Raises ValueError when
    ``k`` is below 1; a ``k`` larger than the input gives no windows.
    """
    if k < 1:
        raise ValueError(f"window size must be positive, got {k}")
    values = list(values)
    negatives: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(values):
        if value < 0:
            negatives.append(i)
        while negatives and negatives[0] <= i - k:
            negatives.popleft()
        if i >= k - 1:
            result.append(values[negatives[0]] if negatives else 0)
    return result


def interleave_halves(values: Iterable[Any]) -> list[Any]:
    """Interleave the first half of ``values`` with the second half.

    For an odd count the second half is the longer one, and its last item
    ends the result.
    """
    values = list(values)
    half = len(values) // 2
    first, second = values[:half], values[half:]
    result: list[Any] = []
    for a, b in zip(first, second):
        result.extend((a, b))
    result.extend(second[len(first):])
    return result


def reverse_first_k(queue: deque, k: int) -> None:
    """Reverse the first ``k`` items of ``queue`` in place, keeping the rest.

    Raises ValueError when ``k`` is negative or larger than the queue.
    """
    if not 0 <= k <= len(queue):
        raise ValueError(f"cannot reverse {k} items of a queue of {len(queue)}")
    front = [queue.popleft() for _ in range(k)]
    queue.extendleft(front)


def reverse_queue(queue: deque) -> None:
    """Reverse ``queue`` in place."""
    queue.reverse()