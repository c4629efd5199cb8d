"""Linked lists, stacks, queues, a fixed deque, tries, trees and small algorithms."""

__version__ = "0.1.0"

__all__ = [
    "nodes",
    "singly",
    "doubly",
    "list_algorithms",
    "stacks",
    "monotonic",
    "queues",
    "deque",
    "recursion",
    "tries",
    "trees",
]