# algokit

Classic data-structure algorithms in plain Python: singly and doubly linked
lists, stacks, monotonic-stack problems, queues, a fixed-capacity circular
deque, tries and binary trees, plus a set of small algorithms over numbers,
sequences and strings. Nothing beyond the standard library is needed.

## Install

```
pip install .
```

## Modules

### `algokit.nodes`

`ListNode(val, next)` and `DoublyNode(val, prev, next)`, with helpers to
build and read chains of them: `from_values`, `to_values`,
`doubly_from_values`, `doubly_to_values`, `iter_nodes` and `length`.

### `algokit.singly`

- `LinkedList(values)`: a singly linked list keeping its head and tail,
  iterable and sized, with `insert_at_head`, `insert_at_tail`,
  `insert_at(pos, data)` and `delete_at(pos)` (1-based; returns the removed
  value).
- Functions over `ListNode` chains, each returning the (possibly new) head:
  `insert_at_head`, `insert_at_tail`, `insert_at_position`, `delete_head`,
  `delete_tail`, `delete_at_position`, `delete_after_position`,
  `delete_before_position`, `delete_value`, `reverse`,
  `remove_sorted_duplicates`, `remove_nth_from_end`.

Positions out of range raise `IndexError`; `delete_value` raises
`ValueError` when the value is absent.

### `algokit.doubly`

- `DoublyLinkedList(values)`: iterable forwards and with `reversed()`, with
  `insert_at_head`, `insert_at_tail`, `insert_at(pos, data)` and
  `delete_at(pos)`; a deletion position at or past the end removes the last
  node.
- Functions over `DoublyNode` chains: `insert_head`, `insert_tail`,
  `insert_before_tail`, `insert_before_position`, `delete_head`,
  `delete_tail`, `delete_at`, `delete_value` (an absent value changes
  nothing) and `reverse_values`, which reverses the values while keeping
  the nodes.

### `algokit.list_algorithms`

`middle`, `is_palindrome` (leaves the list as it was), `add_numbers` (one
decimal digit per node, most significant first), `find_cycle_start`,
`remove_cycle`, `intersection`, `merge_sorted`, `reverse_in_groups`,
`rotate_right` and `sort_list` (merge sort by relinking nodes).

### `algokit.stacks`

- `ArrayStack(capacity)`: `push`, `pop`, `top`, `is_empty`, `is_full`;
  pushing when full raises `OverflowError`, popping when empty raises
  `IndexError`.
- `TwoStacks(size)`: two stacks sharing one array and growing towards each
  other: `push1`, `push2`, `pop1`, `pop2`, and `slots()` for a copy of the
  array (freed slots read 0).
- Functions over stacks held as lists with the top at the end:
  `insert_at_bottom`, `reverse_stack`, `sort_stack` (smallest on top),
  `middle_of_stack`, `delete_middle(stack, k)`.
- `reverse_string`, `is_valid_parentheses` and `min_reversals` (raises
  `ValueError` for a string of odd length).

### `algokit.monotonic`

`nearest_smaller_right` and `nearest_smaller_left` (indices),
`next_greater_right`, `next_greater_circular`, `next_smaller_values`,
`previous_smaller_values` (values), `stock_span` and `largest_rectangle`.
Where an element has no answer, the result holds `None`.

### `algokit.queues`

`first_negative_in_windows(values, k)` (0 for a window with no negative),
`interleave_halves`, and in-place `reverse_first_k(queue, k)` and
`reverse_queue(queue)` on `collections.deque` objects.

### `algokit.deque`

`FixedDeque(size)`: a double-ended queue in a circular array with
`push_front`, `push_rear`, `pop_front`, `pop_rear`, `front`, `rear`,
`is_empty`, `is_full`, `capacity`, `len()` and iteration from front to rear.
Pushing onto a full deque raises `OverflowError`; popping or peeking an
empty one raises `IndexError`.

### `algokit.recursion`

`add_strings`, `stream_averages`, `binary_search`, `max_profit`,
`is_sorted`, `find_all`, `find_max`, `balanced_parentheses`, `rob`,
`int_to_roman`, `last_occurrence`, `letter_case_permutations`,
`is_palindrome`, `case_change_permutations`, `space_permutations`,
`digits`, `remove_adjacent_duplicates`, `reverse_string`,
`reverse_sequence`, `sort_values` and `subsequences`.

### `algokit.tries`

- `Trie`: `insert`, `search`, `starts_with`.
- `CountingTrie`: counts words passing through and ending at each node;
  `insert`, `longest_prefix`, `is_complete`. `best_prefix(words)` builds one
  over the words and picks the longest `longest_prefix` result.
- `count_distinct_substrings(text)`, the empty substring included.
- `BitTrie`: over 32-bit unsigned integers; `insert` and `max_xor`.
  `max_xor_with_limit(nums, queries)` answers `(x, limit)` queries with the
  largest `x ^ a` over `a <= limit`, or -1 when no such `a` exists.

### `algokit.trees`

`TreeNode(val, left, right)`, `build_tree(values)` from a pre-order listing
where `-1` or `None` marks a missing child, and `top_view(root)`.

## Example

```python
from algokit.nodes import from_values, to_values
from algokit.list_algorithms import sort_list
from algokit.monotonic import largest_rectangle
from algokit.recursion import int_to_roman
from algokit.trees import build_tree, top_view

head = sort_list(from_values([1, 2, 3, 7, 1, 6, 2, 2]))
print(to_values(head))                         # [1, 1, 2, 2, 2, 3, 6, 7]
print(largest_rectangle([2, 1, 5, 6, 2, 3]))   # 10
print(int_to_roman(1994))                      # MCMXCIV
print(top_view(build_tree([1, 2, -1, -1, 3, -1, -1])))  # [2, 1, 3]
```

## What it does not do

algokit is a library only. It has no command-line tool and reads nothing
from standard input; every input is passed to a function or class as a
Python value.

## Tests

```
pip install .[test]
pytest
```