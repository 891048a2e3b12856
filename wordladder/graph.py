"""Undirected graph with breadth-first shortest paths."""

from __future__ import annotations

from collections import deque
from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


class Graph(Generic[T]):
    """An undirected graph stored as an adjacency mapping.

    Neighbours are visited in sorted order, so shortest paths are
    deterministic when several of equal length exist.
    """

    def __init__(self) -> None:
        self._adjacency: dict[T, set[T]] = {}

    def add_node(self, node: T) -> None:
        """Add ``node``; adding an existing node has no effect."""
        self._adjacency.setdefault(node, set())

    def add_edge(self, node1: T, node2: T) -> None:
        """Connect two nodes, adding either one if it is missing."""
        self.add_node(node1)
        self.add_node(node2)
        self._adjacency[node1].add(node2)
        self._adjacency[node2].add(node1)

    def contains(self, node: T) -> bool:
        """Return whether ``node`` is in the graph."""
        return node in self._adjacency

    __contains__ = contains

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self):
        return iter(sorted(self._adjacency))

    def neighbors(self, node: T) -> frozenset[T]:
        """Return the neighbours of ``node``, empty if it is unknown."""
        return frozenset(self._adjacency.get(node, ()))

    def shortest_path(self, start: T, end: T) -> list[T]:
        """Return the shortest path from ``start`` to ``end``, or ``[]`` if none."""
        parent: dict[T, T] = {start: start}
        queue: deque[T] = deque([start])

        while queue:
            current = queue.popleft()
            if current == end:
                path = [end]
                while path[-1] != start:
                    path.append(parent[path[-1]])
                path.reverse()
                return path
            for neighbor in sorted(self._adjacency.get(current, ())):
                if neighbor not in parent:
                    parent[neighbor] = current
                    queue.append(neighbor)

        return []