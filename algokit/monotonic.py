"""Monotonic-stack algorithms over sequences.

Where an element has no answer, the result holds ``None`` in its place.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Optional


def _nearest(
    values: Sequence[Any],
    order: Iterable[int],
    keep: Callable[[Any, Any], bool],
) -> list[Optional[int]]:
    """For each index visited in ``order``, find the closest earlier-visited
    index whose value ``v`` satisfies ``keep(v, current)``."""
    result: list[Optional[int]] = [None] * len(values)
    stack: list[int] = []
    for i in order:
        while stack and not keep(values[stack[-1]], values[i]):
            stack.pop()
        result[i] = stack[-1] if stack else None
        stack.append(i)
    return result


def _values_at(values: Sequence[Any], indices: list[Optional[int]]) -> list[Any]:
    return [None if j is None else values[j] for j in indices]


def nearest_smaller_right(values: Iterable[Any]) -> list[Optional[int]]:
    """Index of the nearest strictly smaller element to the right of each one."""
    values = list(values)
    return _nearest(values, reversed(range(len(values))), operator.lt)


def nearest_smaller_left(values: Iterable[Any]) -> list[Optional[int]]:
    """Index of the nearest strictly smaller element to the left of each one."""
    values = list(values)
    return _nearest(values, range(len(values)), operator.lt)


def next_greater_right(values: Iterable[Any]) -> list[Any]:
    """Value of the nearest strictly greater element to the right of each one."""
    values = list(values)
    return _values_at(values, _nearest(values, reversed(range(len(values))), operator.gt))


def next_greater_circular(values: Iterable[Any]) -> list[Any]:
    """Next strictly greater value for each element, wrapping past the end."""
    values = list(values)
    n = len(values)
    result: list[Any] = [None] * n
    stack: list[Any] = []
    for i in reversed(range(2 * n)):
        current = values[i % n]
        while stack and stack[-1] <= current:
            stack.pop()
        if i < n:
            result[i] = stack[-1] if stack else None
        stack.append(current)
    return result


def next_smaller_values(values: Iterable[Any]) -> list[Any]:
    """Value of the nearest strictly smaller element to the right of each one."""
    values = list(values)
    return _values_at(values, _nearest(values, reversed(range(len(values))), operator.lt))


def previous_smaller_values(values: Iterable[Any]) -> list[Any]:
    """Value of the nearest strictly smaller element to the left of each one."""
    values = list(values)
    return _values_at(values, _nearest(values, range(len(values)), operator.lt))


def stock_span(prices: Iterable[Any]) -> list[int]:
    """For each day, count the consecutive days ending there whose price
    is not above that day's price."""
    prices = list(prices)
    spans: list[int] = []
    stack: list[int] = []
    for i, price in enumerate(prices):
        while stack and prices[stack[-1]] <= price:
            stack.pop()
        spans.append(i - stack[-1] if stack else i + 1)
        stack.append(i)
    return spans


def largest_rectangle(heights: Iterable[int]) -> int:
    """Area of the largest rectangle that fits under a histogram.

    An empty histogram has area 0.
    """
    heights = list(heights)
    n = len(heights)
    left = nearest_smaller_left(heights)
    right = nearest_smaller_right(heights)
    return max(
        (
            height * ((n if r is None else r) - (-1 if l is None else l) - 1)
            for height, l, r in zip(heights, left, right)
        ),
        default=0,
    )