"""Traversals and cycle detection on graphs given as adjacency lists."""

from __future__ import annotations

from collections import deque
from enum import Enum, auto
from typing import Iterator, Sequence

Adjacency = Sequence[Sequence[int]]


def bfs(adjacency: Adjacency) -> list[int]:
    """Breadth-first order of the vertices reachable from vertex 0."""
    if not adjacency:
        return []
    order: list[int] = []
    seen = {0}
    queue: deque[int] = deque([0])
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour in adjacency[vertex]:
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(adjacency: Adjacency, start: int) -> list[int]:
    """Depth-first preorder of the vertices reachable from ``start``."""
    if not 0 <= start < len(adjacency):
        raise ValueError(f"start vertex {start} is not in the graph")
    visited: set[int] = set()
    order: list[int] = []
    stack = [start]
    while stack:
        vertex = stack.pop()
        if vertex in visited:
            continue
        visited.add(vertex)
        order.append(vertex)
        stack.extend(n for n in reversed(adjacency[vertex]) if n not in visited)
    return order


class _State(Enum):
    UNSEEN = auto()
    ON_PATH = auto()
    DONE = auto()


def is_cyclic(adjacency: Adjacency) -> bool:
    """True if the directed graph contains a cycle, self-loops included."""
    state = [_State.UNSEEN] * len(adjacency)
    for root in range(len(adjacency)):
        if state[root] is not _State.UNSEEN:
            continue
        state[root] = _State.ON_PATH
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(adjacency[root]))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour in neighbours:
                if state[neighbour] is _State.ON_PATH:
                    return True
                if state[neighbour] is _State.UNSEEN:
                    state[neighbour] = _State.ON_PATH
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                state[vertex] = _State.DONE
                stack.pop()
    return False