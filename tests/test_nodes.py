import pytest

from algokit.nodes import (
    DoublyNode,
    ListNode,
    doubly_from_values,
    doubly_to_values,
    from_values,
    iter_nodes,
    length,
    to_values,
)

SAMPLE = [2, 4, 5, 7, 9, 0, 4]


def test_from_values_round_trip():
    assert to_values(from_values(SAMPLE)) == SAMPLE


def test_from_values_empty_gives_none():
    assert from_values([]) is None
    assert to_values(None) == []


def test_from_values_accepts_generator():
    assert to_values(from_values(x for x in SAMPLE)) == SAMPLE


def test_length_matches_input():
    assert length(from_values(SAMPLE)) == len(SAMPLE)
    assert length(None) == 0


def test_iter_nodes_yields_linked_nodes():
    head = from_values(SAMPLE)
    nodes = list(iter_nodes(head))
    assert nodes[0] is head
    for current, following in zip(nodes, nodes[1:]):
        assert current.next is following
    assert nodes[-1].next is None


def test_list_node_defaults():
    node = ListNode()
    assert node.val == 0
    assert node.next is None


def test_manual_chain():
    tail = ListNode(3)
    head = ListNode(1, ListNode(2, tail))
    assert to_values(head) == [1, 2, 3]


@pytest.mark.parametrize("values", [[3], [3, 4], [3, 4, 5, 6, 7, 8, 9]])
def test_doubly_round_trip(values):
    assert doubly_to_values(doubly_from_values(values)) == values


def test_doubly_links_are_consistent():
    head = doubly_from_values(SAMPLE)
    assert head.prev is None
    nodes = list(iter_nodes(head))
    for current, following in zip(nodes, nodes[1:]):
        assert following.prev is current
        assert current.next is following
    assert nodes[-1].next is None


def test_doubly_empty():
    assert doubly_from_values([]) is None
    assert doubly_to_values(None) == []


def test_doubly_backward_walk():
    head = doubly_from_values(SAMPLE)
    node = list(iter_nodes(head))[-1]
    backwards = []
    while node is not None:
        backwards.append(node.val)
        node = node.prev
    assert backwards == SAMPLE[::-1]


def test_repr_does_not_recurse_on_cycle():
    node = DoublyNode(1)
    node.next = node
    node.prev = node
    assert "1" in repr(node)