"""Binary tree algorithms: shape, views, traversals and serialization."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass, field
from itertools import pairwise
from typing import Iterable, Iterator, Optional

NULL_MARKER = -1
"""Value written by :func:`serialize` in place of a missing child."""


@dataclass(eq=False)
class Node:
    """A binary tree node. ``next_right`` is filled in by :func:`connect_nodes`."""

    val: int
    left: Optional[Node] = None
    right: Optional[Node] = None
    next_right: Optional[Node] = field(default=None, repr=False)


def height(root: Optional[Node]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def is_balanced(root: Optional[Node]) -> bool:
    """True if at every node the subtree heights differ by at most one."""

    def balanced_height(node: Optional[Node]) -> Optional[int]:
        if node is None:
            return 0
        left = balanced_height(node.left)
        if left is None:
            return None
        right = balanced_height(node.right)
        if right is None or abs(left - right) > 1:
            return None
        return 1 + max(left, right)

    return balanced_height(root) is not None


def diameter(root: Optional[Node]) -> int:
    """Number of nodes on the longest path between two leaves."""
    best = 0

    def depth(node: Optional[Node]) -> int:
        nonlocal best
        if node is None:
            return 0
        left, right = depth(node.left), depth(node.right)
        best = max(best, left + right + 1)
        return 1 + max(left, right)

    depth(root)
    return best


def is_identical(first: Optional[Node], second: Optional[Node]) -> bool:
    """True if both trees have the same shape and the same values."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return (
        first.val == second.val
        and is_identical(first.left, second.left)
        and is_identical(first.right, second.right)
    )


def leaf_count(root: Optional[Node]) -> int:
    """Number of nodes without children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return leaf_count(root.left) + leaf_count(root.right)


def left_view(root: Optional[Node]) -> list[int]:
    """Values of the first node met on each level, top to bottom."""
    view: list[int] = []

    def visit(node: Optional[Node], level: int) -> None:
        if node is None:
            return
        if level == len(view):
            view.append(node.val)
        visit(node.left, level + 1)
        visit(node.right, level + 1)

    visit(root, 0)
    return view


def spiral_level_order(root: Optional[Node]) -> list[int]:
    """Level order that alternates direction, starting with the root level."""
    if root is None:
        return []
    order: list[int] = []
    forward: list[Node] = [root]
    backward: list[Node] = []
    while forward or backward:
        while forward:
            node = forward.pop()
            order.append(node.val)
            backward.extend(child for child in (node.left, node.right) if child)
        while backward:
            node = backward.pop()
            order.append(node.val)
            forward.extend(child for child in (node.right, node.left) if child)
    return order


def max_path_sum(root: Optional[Node]) -> int:
    """Largest sum of values along a path between two nodes.

    The result never drops below zero, so a tree of negative values gives 0.
    """
    best = 0

    def straight(node: Optional[Node]) -> int:
        nonlocal best
        if node is None:
            return 0
        left, right = straight(node.left), straight(node.right)
        through = max(max(left, right) + node.val, node.val)
        best = max(best, through, left + right + node.val)
        return through

    straight(root)
    return best


def serialize(root: Optional[Node]) -> list[int]:
    """Preorder values with :data:`NULL_MARKER` for every missing child."""
    out: list[int] = []

    def visit(node: Optional[Node]) -> None:
        if node is None:
            out.append(NULL_MARKER)
            return
        out.append(node.val)
        visit(node.left)
        visit(node.right)

    visit(root)
    return out


def deserialize(values: Iterable[int]) -> Optional[Node]:
    """Rebuild a tree from the output of :func:`serialize`.

    Input that ends early is read as if padded with null markers.
    """
    stream = iter(values)

    def build() -> Optional[Node]:
        val = next(stream, NULL_MARKER)
        if val == NULL_MARKER:
            return None
        node = Node(val)
        node.left = build()
        node.right = build()
        return node

    return build()


def _with_distance(root: Optional[Node]) -> Iterator[tuple[int, Node]]:
    """Level order traversal yielding each node with its horizontal distance."""
    if root is None:
        return
    queue: deque[tuple[int, Node]] = deque([(0, root)])
    while queue:
        distance, node = queue.popleft()
        yield distance, node
        if node.left:
            queue.append((distance - 1, node.left))
        if node.right:
            queue.append((distance + 1, node.right))


def vertical_traversal(root: Optional[Node]) -> list[int]:
    """Values column by column from left to right, level order within a column."""
    columns: defaultdict[int, list[int]] = defaultdict(list)
    for distance, node in _with_distance(root):
        columns[distance].append(node.val)
    return [val for distance in sorted(columns) for val in columns[distance]]


def bottom_view(root: Optional[Node]) -> list[int]:
    """The last node in level order of each column, from left to right."""
    bottom: dict[int, int] = {}
    for distance, node in _with_distance(root):
        bottom[distance] = node.val
    return [bottom[distance] for distance in sorted(bottom)]


def connect_nodes(root: Optional[Node]) -> None:
    """Point each node's ``next_right`` at its right neighbour on the same level."""
    levels: defaultdict[int, list[Node]] = defaultdict(list)

    def collect(node: Optional[Node], level: int) -> None:
        if node is None:
            return
        levels[level].append(node)
        collect(node.left, level + 1)
        collect(node.right, level + 1)

    collect(root, 0)
    for nodes in levels.values():
        for current, following in pairwise(nodes):
            current.next_right = following
        nodes[-1].next_right = None


def mirror(root: Optional[Node]) -> Optional[Node]:
    """Swap left and right children throughout the tree, in place."""
    if root is None:
        return None
    mirror(root.left)
    mirror(root.right)
    root.left, root.right = root.right, root.left
    return root


def lca(root: Optional[Node], n1: int, n2: int) -> Optional[Node]:
    """Lowest common ancestor of the nodes holding ``n1`` and ``n2``."""
    if root is None:
        return None
    if root.val in (n1, n2):
        return root
    left = lca(root.left, n1, n2)
    right = lca(root.right, n1, n2)
    if left and right:
        return root
    return left or right