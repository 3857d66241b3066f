from typing import Iterable, Optional

import networkx as nx

from klbisect.error import InvalidInputError
from klbisect.types import Edge, Vertex


class Graph:
    """Undirected graph with integer edge weights. Vertices and edges are enumerated in insertion order, so
    results computed from the same input are reproducible."""

    def __init__(self, vertices: Iterable[Vertex] = ()):
        self._vertices: list[Vertex] = []
        self._edges: list[Edge] = []
        # adjacency[v][w] is the edge between v and w
        self._adjacency: dict[Vertex, dict[Vertex, Edge]] = {}

        for v in vertices:
            self.add_vertex(v)

    def __len__(self):
        return len(self._vertices)

    def __contains__(self, v: Vertex):
        return v in self._adjacency

    def add_vertex(self, v: Vertex):
        if v in self._adjacency:
            raise InvalidInputError(f"Vertex {v} already exists!")
        self._vertices.append(v)
        self._adjacency[v] = {}

    def add_edge(self, first: Vertex, second: Vertex, weight: int) -> Edge:
        for v in (first, second):
            if v not in self._adjacency:
                raise InvalidInputError(f"Unknown vertex {v}!")
        if first == second:
            raise InvalidInputError(f"Self-loop on {first} is not allowed.")
        if second in self._adjacency[first]:
            raise InvalidInputError(f"Edge {first}{second} already exists!")
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
            raise InvalidInputError(f"Edge weight must be a non-negative integer, got {weight!r}.")

        edge = Edge(first, second, weight)
        self._edges.append(edge)
        self._adjacency[first][second] = edge
        self._adjacency[second][first] = edge

        return edge

    @property
    def vertices(self) -> list[Vertex]:
        return list(self._vertices)

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges)

    def find_edge(self, v: Vertex, w: Vertex) -> Optional[Edge]:
        return self._adjacency[v].get(w)

    def weight(self, v: Vertex, w: Vertex) -> int:
        """Weight of the edge between v and w, 0 if they are not connected."""
        edge = self.find_edge(v, w)
        return edge.weight if edge is not None else 0

    def neighbors(self, v: Vertex) -> list[Vertex]:
        return list(self._adjacency[v])

    def incident_edges(self, v: Vertex) -> list[tuple[Vertex, Edge]]:
        """(neighbor, edge) pairs of all edges at v."""
        return list(self._adjacency[v].items())

    @staticmethod
    def endpoints(edge: Edge) -> tuple[Vertex, Vertex]:
        return edge.first, edge.second

    @classmethod
    def from_networkx(cls, nx_graph: nx.Graph, weight="weight") -> "Graph":
        """Edges without the weight attribute get weight 1, like networkx itself does."""
        if nx_graph.is_directed() or nx_graph.is_multigraph():
            raise InvalidInputError("Only simple undirected graphs can be bisected.")

        graph = cls(nx_graph.nodes)
        for u, v, w in nx_graph.edges(data=weight, default=1):
            graph.add_edge(u, v, w)

        return graph

    def to_networkx(self, weight="weight") -> nx.Graph:
        nx_graph = nx.Graph()
        nx_graph.add_nodes_from(self._vertices)
        nx_graph.add_weighted_edges_from(((e.first, e.second, e.weight) for e in self._edges), weight=weight)

        return nx_graph
