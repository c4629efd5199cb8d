"""Prefix trees over characters and over the bits of integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional

_BITS = 32


@dataclass(eq=False)
class _CharNode:
    children: dict[str, _CharNode] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """A set of words that answers exact and prefix lookups."""

    def __init__(self) -> None:
        self._root = _CharNode()

    def _walk(self, text: str) -> Optional[_CharNode]:
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _CharNode())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Tell whether ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Tell whether some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None


@dataclass(eq=False)
class _CountingNode:
    children: dict[str, _CountingNode] = field(default_factory=dict)
    starts_with: int = 0
    ends_with: int = 0


class CountingTrie:
    """A trie that counts how many words pass through and end at each node."""

    def __init__(self) -> None:
        self._root = _CountingNode()

    def insert(self, word: str) -> None:
        """Add one occurrence of ``word``."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _CountingNode())
            node.starts_with += 1
        node.ends_with += 1

    def longest_prefix(self, word: str) -> Optional[str]:
        """Follow ``word`` down the trie up to the first shared node.

        Characters are taken while they are present; the walk stops right
        after reaching a node that more than one inserted word passes
        through, that character included. Returns ``None`` when the word
        leaves the trie before such a node is reached.
        """
        node = self._root
        taken: list[str] = []
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return None
            taken.append(ch)
            node = child
            if node.starts_with > 1:
                break
        return "".join(taken)

    def is_complete(self, word: str) -> bool:
        """Tell whether every non-empty prefix of ``word`` is an inserted word."""
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None or node.ends_with == 0:
                return False
        return True


def best_prefix(words: Iterable[str]) -> str:
    """Longest of the words' ``longest_prefix`` results over one shared trie.

    Ties go to the lexicographically larger prefix; words whose walk fails
    are skipped. An empty input gives an empty string.
    """
    words = list(words)
    trie = CountingTrie()
    for word in words:
        trie.insert(word)
    best = ""
    for word in words:
        prefix = trie.longest_prefix(word)
        if prefix is None:
            continue
        if len(prefix) > len(best) or (len(prefix) == len(best) and best < prefix):
            best = prefix
    return best


def count_distinct_substrings(text: str) -> int:
    """Number of distinct substrings of ``text``, the empty one included."""
    root: dict[str, dict] = {}
    count = 0
    for start in range(len(text)):
        node = root
        for ch in text[start:]:
            if ch not in node:
                node[ch] = {}
                count += 1
            node = node[ch]
    return count + 1


@dataclass(eq=False)
class _BitNode:
    children: list[Optional[_BitNode]] = field(default_factory=lambda: [None, None])


def _check_word(num: int) -> None:
    if not 0 <= num < 1 << _BITS:
        raise ValueError(f"expected an unsigned {_BITS}-bit number, got {num}")


class BitTrie:
    """A trie over the 32 bits of unsigned integers, for XOR maximisation."""

    def __init__(self) -> None:
        self._root = _BitNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, num: int) -> None:
        """Add ``num``; it must fit in 32 unsigned bits."""
        _check_word(num)
        node = self._root
        for shift in reversed(range(_BITS)):
            bit = (num >> shift) & 1
            child = node.children[bit]
            if child is None:
                child = node.children[bit] = _BitNode()
            node = child
        self._size += 1

    def max_xor(self, num: int) -> int:
        """Largest ``num ^ x`` over the inserted numbers ``x``.

        Raises ValueError when nothing has been inserted.
        """
        _check_word(num)
        if self._size == 0:
            raise ValueError("max_xor() on an empty trie")
        node = self._root
        best = 0
        for shift in reversed(range(_BITS)):
            bit = (num >> shift) & 1
            opposite = node.children[1 - bit]
            if opposite is not None:
                best |= 1 << shift
                node = opposite
            else:
                node = node.children[bit]
        return best


def max_xor_with_limit(nums: Iterable[int], queries: Iterable[Sequence[int]]) -> list[int]:
    """Answer ``(x, limit)`` queries with the largest ``x ^ a`` over ``a <= limit``.

    Answers come in query order; a query with no number at or below its
    limit gets -1.
    """
    values = sorted(nums)
    pairs = [(int(q[0]), int(q[1])) for q in queries]
    answers = [-1] * len(pairs)
    trie = BitTrie()
    pending = iter(values)
    upcoming = next(pending, None)
    for index in sorted(range(len(pairs)), key=lambda i: pairs[i][1]):
        x, limit = pairs[index]
        while upcoming is not None and upcoming <= limit:
            trie.insert(upcoming)
            upcoming = next(pending, None)
        if len(trie):
            answers[index] = trie.max_xor(x)
    return answers