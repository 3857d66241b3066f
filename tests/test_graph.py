import networkx as nx
import pytest

from klbisect.error import InvalidInputError
from klbisect.graph import Graph
from klbisect.types import Edge


def test_enumeration_order_is_insertion_order():
    graph = Graph("DBCA")
    graph.add_edge("D", "A", 2)
    graph.add_edge("B", "C", 1)

    assert graph.vertices == ["D", "B", "C", "A"]
    assert graph.edges == [Edge("D", "A", 2), Edge("B", "C", 1)]
    assert len(graph) == 4


def test_find_edge_is_symmetric(square_graph):
    edge = square_graph.find_edge("C", "A")

    assert edge == Edge("A", "C", 3)
    assert square_graph.find_edge("A", "C") is edge
    assert square_graph.endpoints(edge) == ("A", "C")
    assert square_graph.weight("D", "C") == 4


def test_missing_edge():
    graph = Graph("AB")

    assert graph.find_edge("A", "B") is None
    assert graph.weight("A", "B") == 0
    assert graph.neighbors("A") == []


def test_incident_edges(square_graph):
    incident = dict(square_graph.incident_edges("D"))

    assert incident == {"B": Edge("B", "D", 2), "C": Edge("C", "D", 4), "A": Edge("A", "D", 0)}


def test_neighbors(square_graph):
    assert sorted(square_graph.neighbors("A")) == ["B", "C", "D"]
    assert "A" in square_graph
    assert "Z" not in square_graph


@pytest.mark.parametrize(
    "first,second,weight",
    [("A", "Z", 1), ("A", "A", 1), ("A", "B", -1), ("A", "B", 1.5), ("A", "B", True)],
)
def test_invalid_edges(first, second, weight):
    graph = Graph("AB")

    with pytest.raises(InvalidInputError):
        graph.add_edge(first, second, weight)


def test_no_parallel_edges():
    graph = Graph("AB")
    graph.add_edge("A", "B", 1)

    with pytest.raises(InvalidInputError):
        graph.add_edge("B", "A", 2)


def test_duplicate_vertex():
    with pytest.raises(InvalidInputError):
        Graph("ABA")


def test_networkx_round_trip(square_graph):
    nx_graph = square_graph.to_networkx()

    assert nx_graph["A"]["C"]["weight"] == 3
    assert nx_graph.number_of_edges() == 6

    back = Graph.from_networkx(nx_graph)
    assert back.vertices == square_graph.vertices
    assert back.weight("B", "D") == 2


def test_from_networkx_default_weight():
    nx_graph = nx.path_graph(4)

    graph = Graph.from_networkx(nx_graph)

    assert graph.weight(1, 2) == 1


def test_from_networkx_rejects_directed():
    with pytest.raises(InvalidInputError):
        Graph.from_networkx(nx.DiGraph([(0, 1)]))
