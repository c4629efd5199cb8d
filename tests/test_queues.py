from collections import deque

import pytest

from algokit.queues import (
    first_negative_in_windows,
    interleave_halves,
    reverse_first_k,
    reverse_queue,
)


def test_first_negative_example():
    values = [2, -5, -7, 3, -9, 7, 0, 4]
    assert first_negative_in_windows(values, 3) == [-5, -5, -7, -9, -9, 0]


@pytest.mark.parametrize("k", [1, 2, 3, 8])
def test_first_negative_window_count(k):
    values = [2, -5, -7, 3, -9, 7, 0, 4]
    result = first_negative_in_windows(values, k)
    assert len(result) == len(values) - k + 1
    for start, found in enumerate(result):
        window = values[start : start + k]
        negatives = [v for v in window if v < 0]
        assert found == (negatives[0] if negatives else 0)


def test_first_negative_window_of_one_keeps_negatives():
    values = [3, -1, 4, -1, -5]
    assert first_negative_in_windows(values, 1) == [v if v < 0 else 0 for v in values]


def test_first_negative_all_positive():
    assert first_negative_in_windows([1, 2, 3, 4], 2) == [0, 0, 0]


def test_first_negative_window_too_large():
    assert first_negative_in_windows([1, -2], 3) == []


@pytest.mark.parametrize("k", [0, -1])
def test_first_negative_bad_window(k):
    with pytest.raises(ValueError):
        first_negative_in_windows([1, -2], k)


@pytest.mark.parametrize(
    "values",
    [
        [10, 20, 30, 40, 50, 60, 70, 80, 90, 100, 110],
        [1, 2, 3, 4, 5, 6],
        [1],
        [],
    ],
)
def test_interleave_halves(values):
    out = interleave_halves(values)
    half = len(values) // 2
    assert sorted(out) == sorted(values)
    assert out[0 : 2 * half : 2] == values[:half]
    assert out[1 : 2 * half : 2] == values[half : 2 * half]
    assert out[2 * half :] == values[2 * half :]


def test_interleave_odd_ends_with_last():
    values = [10, 20, 30, 40, 50, 60, 70, 80, 90, 100, 110]
    out = interleave_halves(values)
    assert out[-1] == 110
    assert out[:2] == [10, 60]


def test_reverse_first_k():
    values = [10, 20, 30, 40, 50]
    queue = deque(values)
    reverse_first_k(queue, 3)
    assert list(queue) == values[:3][::-1] + values[3:]


@pytest.mark.parametrize("k", [0, 1])
def test_reverse_first_k_trivial(k):
    values = [10, 20, 30]
    queue = deque(values)
    reverse_first_k(queue, k)
    assert list(queue) == values


def test_reverse_first_k_whole_queue():
    values = [1, 2, 3, 4]
    queue = deque(values)
    reverse_first_k(queue, len(values))
    assert list(queue) == values[::-1]


@pytest.mark.parametrize("k", [-1, 6])
def test_reverse_first_k_out_of_range(k):
    queue = deque([10, 20, 30, 40, 50])
    with pytest.raises(ValueError):
        reverse_first_k(queue, k)
    assert list(queue) == [10, 20, 30, 40, 50]


@pytest.mark.parametrize("values", [[10, 20, 30, 40, 50], [], [7]])
def test_reverse_queue(values):
    queue = deque(values)
    reverse_queue(queue)
    assert list(queue) == values[::-1]
    reverse_queue(queue)
    assert list(queue) == values