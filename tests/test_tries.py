import pytest

from algokit.tries import (
    BitTrie,
    CountingTrie,
    Trie,
    best_prefix,
    count_distinct_substrings,
    max_xor_with_limit,
)


def test_trie_search_and_prefix():
    trie = Trie()
    trie.insert("apple")
    assert trie.search("app") is False
    assert trie.starts_with("app") is True
    assert trie.search("apple") is True


def test_trie_missing_prefix():
    trie = Trie()
    trie.insert("apple")
    assert trie.starts_with("apz") is False
    assert trie.search("apples") is False


def test_trie_empty_string_is_prefix_but_not_word():
    trie = Trie()
    trie.insert("cat")
    assert trie.starts_with("") is True
    assert trie.search("") is False


def test_trie_prefix_becomes_word_after_insert():
    trie = Trie()
    trie.insert("apple")
    trie.insert("app")
    assert trie.search("app") is True


def test_longest_prefix_stops_at_shared_node():
    trie = CountingTrie()
    for word in ["abc", "abs", "afd"]:
        trie.insert(word)
    assert trie.longest_prefix("abc") == "a"


def test_longest_prefix_single_word_walks_whole_word():
    trie = CountingTrie()
    trie.insert("hello")
    assert trie.longest_prefix("hello") == "hello"


def test_longest_prefix_absent_word():
    trie = CountingTrie()
    trie.insert("hello")
    assert trie.longest_prefix("xyz") is None


def test_is_complete():
    trie = CountingTrie()
    for word in ["n", "ni", "nin", "ninj", "ninja", "ninga"]:
        trie.insert(word)
    assert trie.is_complete("ninja") is True
    assert trie.is_complete("ninga") is False
    assert trie.is_complete("nx") is False


def test_best_prefix_source_example():
    assert best_prefix(["abc", "abs", "afd"]) == "a"


def test_best_prefix_empty():
    assert best_prefix([]) == ""


def test_count_distinct_substrings_repeated_char():
    assert count_distinct_substrings("aaa") == 4


def test_count_distinct_substrings_empty():
    assert count_distinct_substrings("") == 1


def test_count_distinct_substrings_grows_with_suffix():
    assert count_distinct_substrings("abcad") > count_distinct_substrings("abca")


def test_bit_trie_same_numbers():
    trie = BitTrie()
    trie.insert(3)
    trie.insert(3)
    assert trie.max_xor(3) == 0


def test_bit_trie_result_comes_from_inserted_number():
    nums = [3, 10, 5, 25, 2, 8]
    trie = BitTrie()
    for n in nums:
        trie.insert(n)
    for n in nums:
        assert trie.max_xor(n) ^ n in nums


def test_bit_trie_known_maximum():
    trie = BitTrie()
    for n in [3, 10, 5, 25, 2, 8]:
        trie.insert(n)
    assert trie.max_xor(5) == 28


def test_bit_trie_empty_raises():
    with pytest.raises(ValueError):
        BitTrie().max_xor(1)


def test_bit_trie_rejects_negative():
    with pytest.raises(ValueError):
        BitTrie().insert(-1)


def test_max_xor_with_limit_example():
    assert max_xor_with_limit([0, 1, 2, 3, 4], [[3, 1], [1, 3], [5, 6]]) == [3, 3, 7]


def test_max_xor_with_limit_no_candidate():
    assert max_xor_with_limit([5, 6], [[1, 2]]) == [-1]