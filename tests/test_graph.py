import pytest

from wordladder.graph import Graph


@pytest.fixture
def chain():
    graph = Graph()
    graph.add_edge("A", "B")
    graph.add_edge("B", "C")
    graph.add_edge("C", "D")
    return graph


def test_add_node_is_idempotent():
    graph = Graph()
    graph.add_node("X")
    graph.add_node("X")
    assert len(graph) == 1
    assert graph.neighbors("X") == frozenset()


def test_add_edge_is_symmetric():
    graph = Graph()
    graph.add_edge("A", "B")
    assert graph.contains("A")
    assert "B" in graph
    assert graph.neighbors("A") == {"B"}
    assert graph.neighbors("B") == {"A"}


def test_add_edge_keeps_existing_neighbours():
    graph = Graph()
    graph.add_edge("A", "B")
    graph.add_edge("A", "C")
    assert graph.neighbors("A") == {"B", "C"}


def test_neighbors_of_unknown_node_is_empty():
    graph = Graph()
    assert graph.neighbors("missing") == frozenset()
    assert not graph.contains("missing")


def test_shortest_path_along_chain(chain):
    assert chain.shortest_path("A", "D") == ["A", "B", "C", "D"]
    assert chain.shortest_path("D", "A") == ["D", "C", "B", "A"]


def test_shortest_path_to_self(chain):
    assert chain.shortest_path("B", "B") == ["B"]


def test_no_path_between_components(chain):
    chain.add_edge("X", "Y")
    assert chain.shortest_path("A", "Y") == []


def test_no_path_from_unknown_node(chain):
    assert chain.shortest_path("Z", "A") == []


def test_path_steps_are_edges():
    graph = Graph()
    edges = [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D"), ("D", "E"), ("C", "F"), ("F", "E")]
    for a, b in edges:
        graph.add_edge(a, b)
    path = graph.shortest_path("A", "E")
    assert path[0] == "A" and path[-1] == "E"
    assert len(path) == 4
    for a, b in zip(path, path[1:]):
        assert b in graph.neighbors(a)


def test_ties_break_in_sorted_order():
    graph = Graph()
    graph.add_edge("A", "C")
    graph.add_edge("A", "B")
    graph.add_edge("C", "D")
    graph.add_edge("B", "D")
    assert graph.shortest_path("A", "D") == ["A", "B", "D"]