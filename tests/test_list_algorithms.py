import pytest

from algokit.list_algorithms import (
    add_numbers,
    find_cycle_start,
    intersection,
    is_palindrome,
    merge_sorted,
    middle,
    remove_cycle,
    reverse_in_groups,
    rotate_right,
    sort_list,
)
from algokit.nodes import from_values, iter_nodes, to_values


def _nodes(head):
    return list(iter_nodes(head))


def test_middle_of_two_is_second():
    head = from_values([1, 2])
    assert middle(head).val == 2


def test_middle_odd_length():
    head = from_values([1, 1, 1, 2, 3, 4, 5])
    assert middle(head) is _nodes(head)[3]


def test_middle_even_length_index():
    head = from_values([10, 20, 30, 40, 50, 60])
    assert middle(head) is _nodes(head)[3]


def test_middle_empty():
    assert middle(None) is None


@pytest.mark.parametrize(
    "values",
    [[], [7], [1, 2, 1], [1, 2, 3, 3, 2, 1], [4, 4], [1, 2, 3, 2, 1]],
)
def test_palindromes(values):
    head = from_values(values)
    assert is_palindrome(head) is True
    assert to_values(head) == values


@pytest.mark.parametrize("values", [[1, 2], [1, 2, 3], [1, 2, 2, 3], [1, 2, 3, 1]])
def test_not_palindromes_and_list_restored(values):
    head = from_values(values)
    assert is_palindrome(head) is False
    assert to_values(head) == values


def _as_int(head):
    return int("".join(str(d) for d in to_values(head)))


@pytest.mark.parametrize(
    "a, b",
    [([2, 4, 3], [6, 6, 4]), ([9, 9, 9], [1]), ([5], [5]), ([1, 0, 0], [9, 0, 0])],
)
def test_add_numbers_matches_integer_sum(a, b):
    l1, l2 = from_values(a), from_values(b)
    result = add_numbers(l1, l2)
    assert _as_int(result) == int("".join(map(str, a))) + int("".join(map(str, b)))
    assert to_values(l1) == a
    assert to_values(l2) == b


def test_add_numbers_with_one_empty():
    assert to_values(add_numbers(from_values([4, 2]), None)) == [4, 2]
    assert add_numbers(None, None) is None


def _cyclic_list():
    head = from_values([1, 2, 3, 4, 5, 6, 7, 8])
    nodes = _nodes(head)
    nodes[6].next = nodes[3]
    return head, nodes


def test_find_cycle_start():
    head, nodes = _cyclic_list()
    assert find_cycle_start(head) is nodes[3]


def test_find_cycle_start_without_cycle():
    assert find_cycle_start(from_values([1, 2, 3])) is None
    assert find_cycle_start(None) is None


def test_find_cycle_whole_list_loop():
    head = from_values([1, 2, 3])
    _nodes(head)[2].next = head
    assert find_cycle_start(head) is head


def test_remove_cycle():
    head, nodes = _cyclic_list()
    start = remove_cycle(head)
    assert start is nodes[3]
    assert start.val == 4
    assert to_values(head) == [1, 2, 3, 4, 5, 6, 7]


def test_remove_cycle_without_cycle():
    head = from_values([1, 2, 3])
    assert remove_cycle(head) is None
    assert to_values(head) == [1, 2, 3]


def test_intersection():
    shared = from_values([8, 9, 10])
    a = from_values([1, 2, 3, 4, 5])
    _nodes(a)[-1].next = shared
    b = from_values([6, 7])
    _nodes(b)[-1].next = shared
    assert intersection(a, b) is shared
    assert intersection(b, a) is shared


def test_intersection_none():
    assert intersection(from_values([1, 2]), from_values([1, 2])) is None
    assert intersection(None, from_values([1])) is None


def test_intersection_same_head():
    head = from_values([1, 2, 3])
    assert intersection(head, head) is head


@pytest.mark.parametrize(
    "a, b",
    [([1, 2, 3, 4, 5], [6, 7, 8, 9, 10]), ([], [1, 2]), ([1, 3, 5], [2, 2, 4, 6]), ([], [])],
)
def test_merge_sorted(a, b):
    result = merge_sorted(from_values(a), from_values(b))
    assert to_values(result) == sorted(a + b)


def test_merge_sorted_ties_prefer_left():
    left = from_values([1, 2])
    right = from_values([1, 2])
    left_nodes = _nodes(left)
    result = _nodes(merge_sorted(left, right))
    assert result[0] is left_nodes[0]
    assert result[2] is left_nodes[1]


def test_reverse_whole_list_in_one_group():
    values = [10, 20, 30, 40, 50]
    assert to_values(reverse_in_groups(from_values(values), 5)) == values[::-1]


def test_reverse_in_groups_leaves_remainder():
    assert to_values(reverse_in_groups(from_values([1, 2, 3, 4, 5]), 2)) == [2, 1, 4, 3, 5]


def test_reverse_in_groups_k_larger_than_list():
    assert to_values(reverse_in_groups(from_values([1, 2, 3]), 4)) == [1, 2, 3]


def test_reverse_in_groups_k_one_and_empty():
    assert to_values(reverse_in_groups(from_values([1, 2, 3]), 1)) == [1, 2, 3]
    assert reverse_in_groups(None, 3) is None


def test_reverse_in_groups_rejects_bad_k():
    with pytest.raises(ValueError):
        reverse_in_groups(from_values([1, 2]), 0)


@pytest.mark.parametrize("k", [0, 1, 2, 5, 8, 10, 17])
def test_rotate_right(k):
    values = [1, 2, 3, 3, 5, 6, 7, 8]
    shift = k % len(values)
    expected = values[len(values) - shift:] + values[: len(values) - shift]
    assert to_values(rotate_right(from_values(values), k)) == expected


def test_rotate_right_inverse_of_left():
    values = [1, 2, 3, 4]
    head = rotate_right(from_values(values), 3)
    assert to_values(rotate_right(head, -3)) == values


def test_rotate_right_empty():
    assert rotate_right(None, 3) is None


@pytest.mark.parametrize(
    "values",
    [[1, 2, 3, 7, 1, 6, 2, 2], [], [5], [3, 2, 1], [4, 4, 4], [9, -1, 0, 5, -3]],
)
def test_sort_list(values):
    result = sort_list(from_values(values))
    assert to_values(result) == sorted(values)


def test_sort_list_keeps_nodes():
    head = from_values([3, 1, 2])
    original = set(map(id, _nodes(head)))
    result = sort_list(head)
    assert set(map(id, _nodes(result))) == original