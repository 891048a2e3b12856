"""Shortest ladders and hints over a word graph."""

from __future__ import annotations

from dataclasses import dataclass

from .graph import Graph


@dataclass(frozen=True)
class Hint:
    """The next word on an optimal ladder and the position that changes."""

    word: str
    position: int


class Solver:
    """Answers ladder queries against a prebuilt word graph."""

    def __init__(self, graph: Graph[str]) -> None:
        self.graph = graph

    def find_shortest_path(self, start: str, end: str) -> list[str]:
        """Return the shortest ladder between two words, ``[]`` if none.

        Words are compared in upper case.
        """
        start, end = start.upper(), end.upper()
        if not (self.graph.contains(start) and self.graph.contains(end)):
            return []
        return self.graph.shortest_path(start, end)

    def get_hint(self, current: str, target: str) -> Hint | None:
        """Return the next step from ``current`` towards ``target``, or None."""
        path = self.find_shortest_path(current, target)
        if len(path) < 2:
            return None
        next_word = path[1]
        for position, (a, b) in enumerate(zip(current.upper(), next_word)):
            if a != b:
                return Hint(next_word, position)
        return None