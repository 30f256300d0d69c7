"""Binary search tree queries."""

from __future__ import annotations

import math
from itertools import islice
from typing import Iterator, Optional

from algokit.trees import Node


def lca_bst(root: Optional[Node], l1: int, l2: int) -> Optional[Node]:
    """Lowest common ancestor of ``l1`` and ``l2`` in a binary search tree."""
    node = root
    while node is not None:
        if l1 > node.val and l2 > node.val:
            node = node.right
        elif l1 < node.val and l2 < node.val:
            node = node.left
        else:
            return node
    return None


def is_bst(root: Optional[Node]) -> bool:
    """True if every node is strictly between the values of its ancestors' bounds."""

    def within(node: Optional[Node], low: float, high: float) -> bool:
        if node is None:
            return True
        if node.val < low or node.val > high:
            return False
        return within(node.left, low, node.val - 1) and within(
            node.right, node.val + 1, high
        )

    return within(root, -math.inf, math.inf)


def _inorder(root: Optional[Node]) -> Iterator[int]:
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def kth_smallest(root: Optional[Node], k: int) -> int:
    """The ``k``-th smallest value (1-based) of a binary search tree."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    for val in islice(_inorder(root), k - 1, None):
        return val
    raise ValueError(f"tree has fewer than {k} nodes")