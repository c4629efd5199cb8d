"""Small recursive-style algorithms over numbers, sequences and strings."""

from __future__ import annotations

from bisect import insort
from collections.abc import Iterable, Sequence
from itertools import groupby, product
from typing import Any, Optional


def add_strings(a: str, b: str) -> int:
    """Return the sum of two integers written as decimal strings."""
    return int(a) + int(b)


def stream_averages(values: Iterable[int]) -> list[int]:
    """Return the running average after each value, truncated toward zero."""
    result: list[int] = []
    total = 0
    for count, value in enumerate(values, start=1):
        total += value
        quotient = abs(total) // count
        result.append(-quotient if total < 0 else quotient)
    return result


def binary_search(values: Sequence[Any], key: Any) -> Optional[int]:
    """Return an index of ``key`` in the sorted ``values``, or ``None``."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == key:
            return mid
        if key > values[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return None


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from one buy followed by one later sell; 0 if none gains."""
    best = 0
    lowest: Optional[int] = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        best = max(best, price - lowest)
    return best


def is_sorted(values: Sequence[Any]) -> bool:
    """Tell whether ``values`` is in non-decreasing order."""
    return all(a <= b for a, b in zip(values, values[1:]))


def find_all(text: str, key: str) -> list[int]:
    """Return every index at which the character ``key`` occurs in ``text``."""
    return [i for i, ch in enumerate(text) if ch == key]


def find_max(values: Iterable[Any]) -> Any:
    """Return the largest value; raises ValueError for an empty input."""
    iterator = iter(values)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError("find_max() of an empty sequence") from None
    for value in iterator:
        if value > best:
            best = value
    return best


def balanced_parentheses(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses.

    At each step a closing bracket is tried before an opening one.
    """
    if n < 0:
        raise ValueError(f"number of pairs must not be negative, got {n}")
    found: list[str] = []

    def build(prefix: str, opens: int, closes: int) -> None:
        if opens == 0 and closes == 0:
            found.append(prefix)
            return
        if closes > opens:
            build(prefix + ")", opens, closes - 1)
        if opens > 0:
            build(prefix + "(", opens - 1, closes)

    build("", n, n)
    return found


def rob(nums: Iterable[int]) -> int:
    """Largest sum of values taken so that no two are adjacent."""
    take, skip = 0, 0
    for value in nums:
        take, skip = skip + value, max(take, skip)
    return max(take, skip)


_ROMAN = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)


def int_to_roman(num: int) -> str:
    """Write ``num`` in Roman numerals; 0 gives an empty string."""
    if num < 0:
        raise ValueError(f"cannot write a negative number in Roman numerals: {num}")
    parts: list[str] = []
    for value, symbol in _ROMAN:
        count, num = divmod(num, value)
        parts.append(symbol * count)
    return "".join(parts)


def last_occurrence(text: str, ch: str) -> int:
    """Return the last index of ``ch`` in ``text``, or -1 if it is absent."""
    for i in reversed(range(len(text))):
        if text[i] == ch:
            return i
    return -1


def _choices(text: str, variants) -> list[str]:
    return ["".join(parts) for parts in product(*(variants(ch) for ch in text))]


def letter_case_permutations(text: str) -> list[str]:
    """Every string formed by writing each letter upper- or lower-case.

    Characters without case are kept as they are; upper case comes first.
    """
    return _choices(
        text,
        lambda ch: (ch.upper(), ch.lower()) if ch.upper() != ch.lower() else (ch,),
    )


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same both ways, character for character."""
    return all(text[i] == text[-1 - i] for i in range(len(text) // 2))


def case_change_permutations(text: str) -> list[str]:
    """Every string formed by upper-casing or keeping each character.

    The upper-case choice comes first at each position.
    """
    return _choices(text, lambda ch: (ch.upper(), ch) if ch.upper() != ch else (ch,))


def space_permutations(text: str) -> list[str]:
    """Every way of putting ``_`` between the characters of ``text``.

    Splitting comes before joining at each gap.
    """
    if len(text) <= 1:
        return [text]
    return [text[0] + rest for rest in _choices(text[1:], lambda ch: ("_" + ch, ch))]


def digits(n: int) -> list[int]:
    """Decimal digits of the non-negative ``n``, most significant first."""
    if n < 0:
        raise ValueError(f"expected a non-negative number, got {n}")
    return [int(d) for d in str(n)]


def remove_adjacent_duplicates(text: str) -> str:
    """Collapse every run of a repeated character into a single one."""
    return "".join(ch for ch, _ in groupby(text))


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def reverse_sequence(values: Iterable[Any]) -> list[Any]:
    """Return the items of ``values`` in reverse order as a new list."""
    return list(values)[::-1]


def sort_values(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list built by inserting each value in place.

    Equal values keep their original order.
    """
    result: list[Any] = []
    for value in values:
        insort(result, value)
    return result


def subsequences(text: str) -> list[str]:
    """Every subsequence of ``text``, including the empty one.

    Subsequences without the first character come before those with it.
    """
    result = [""]
    for ch in reversed(text):
        result = result + [ch + rest for rest in result]
    return result