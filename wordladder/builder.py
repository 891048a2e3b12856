"""Dictionary loading and word-graph construction."""

from __future__ import annotations

import os
from collections import defaultdict
from collections.abc import Iterable
from itertools import combinations

from .graph import Graph


def load_dictionary(filename: str | os.PathLike[str], word_length: int = 0) -> list[str]:
    """Read whitespace-separated words from ``filename`` in upper case.

    Only words of ``word_length`` characters are kept unless it is 0.
    Raises ``OSError`` if the file cannot be opened.
    """
    with open(filename, encoding="utf-8") as handle:
        text = handle.read()
    return [
        word.upper()
        for word in text.split()
        if word_length == 0 or len(word) == word_length
    ]


class GraphBuilder:
    """Builds graphs whose edges join words differing in one letter.

    The wildcard pattern index is kept between calls, so later graphs
    also link to words given in earlier calls.
    """

    def __init__(self) -> None:
        self._patterns: defaultdict[str, set[str]] = defaultdict(set)

    def _index(self, words: Iterable[str]) -> None:
        for word in words:
            for i in range(len(word)):
                self._patterns[word[:i] + "*" + word[i + 1:]].add(word)

    def build_graph(self, words: Iterable[str]) -> Graph[str]:
        """Return a graph of ``words`` linked by one-letter differences.

        Words with no such neighbour are not added to the graph.
        """
        self._index(words)
        graph: Graph[str] = Graph()
        for pattern in sorted(self._patterns):
            for first, second in combinations(sorted(self._patterns[pattern]), 2):
                graph.add_edge(first, second)
        return graph