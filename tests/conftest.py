import pytest

from klbisect.graph import Graph


def build_graph(vertices, edges):
    graph = Graph(vertices)
    for first, second, weight in edges:
        graph.add_edge(first, second, weight)
    return graph


@pytest.fixture
def square_graph():
    # enumeration order A, B, C, D
    return build_graph("ABCD", [("A", "B", 1), ("A", "C", 3), ("B", "D", 2), ("C", "D", 4), ("A", "D", 0),
                                ("B", "C", 0)])


@pytest.fixture
def make_graph():
    return build_graph
