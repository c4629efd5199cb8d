"""Binary trees: building from a pre-order listing and the top view."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Optional

_EMPTY = -1


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: Any = 0
    left: Optional[TreeNode] = field(default=None, repr=False)
    right: Optional[TreeNode] = field(default=None, repr=False)


def build_tree(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from its pre-order listing.

    Each node is followed by its left and then its right subtree; ``-1`` or
    ``None`` marks a missing child. Raises ValueError when the listing ends
    before the tree is complete.
    """
    items = iter(values)

    def build() -> Optional[TreeNode]:
        try:
            value = next(items)
        except StopIteration:
            raise ValueError("listing ended before the tree was complete") from None
        if value is None or value == _EMPTY:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def top_view(root: Optional[TreeNode]) -> list[Any]:
    """Values seen looking down on the tree, from leftmost column to rightmost.

    In each column the node reached first in level order is the one seen.
    """
    if root is None:
        return []
    seen: dict[int, Any] = {}
    queue: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    while queue:
        node, column = queue.popleft()
        seen.setdefault(column, node.val)
        if node.left is not None:
            queue.append((node.left, column - 1))
        if node.right is not None:
            queue.append((node.right, column + 1))
    return [seen[column] for column in sorted(seen)]