import numpy as np

from klbisect.error import InvalidInputError, InvariantViolationError
from klbisect.graph import Graph
from klbisect.types import Vertex


class PartitionState:
    """Assignment of every vertex of a graph to group A or group B, plus the vertices of each group that have not
    been swapped yet in the current pass.

    Membership is a boolean table indexed by the position of the vertex in the graph enumeration. The table holds
    indices only, the vertices themselves stay owned by the graph."""

    def __init__(self, graph: Graph):
        vertices = graph.vertices
        n_vertices = len(vertices)
        if n_vertices % 2 != 0:
            raise InvalidInputError(f"odd vertex count ({n_vertices}), cannot split into two equal groups")

        self.partition_size = n_vertices // 2
        self._vertices = vertices
        self._index = {v: i for i, v in enumerate(vertices)}

        # first half of the enumeration goes to A, second half to B
        self._in_a = np.zeros(n_vertices, dtype=bool)
        self._in_a[: self.partition_size] = True
        # vertices not swapped yet in this pass, fixed to the initial groups
        self._unswapped_a = self._in_a.copy()
        self._unswapped_b = ~self._in_a

    def in_a(self, v: Vertex) -> bool:
        return bool(self._in_a[self._index[v]])

    def _members(self, mask: np.ndarray) -> list[Vertex]:
        return [self._vertices[i] for i in np.flatnonzero(mask)]

    @property
    def group_a(self) -> list[Vertex]:
        return self._members(self._in_a)

    @property
    def group_b(self) -> list[Vertex]:
        return self._members(~self._in_a)

    def unswapped_a_idx(self) -> np.ndarray:
        """Indices of the vertices of the initial A that were not swapped yet, in enumeration order."""
        return np.flatnonzero(self._unswapped_a)

    def unswapped_b_idx(self) -> np.ndarray:
        return np.flatnonzero(self._unswapped_b)

    @property
    def unswapped_a(self) -> list[Vertex]:
        return [self._vertices[i] for i in self.unswapped_a_idx()]

    @property
    def unswapped_b(self) -> list[Vertex]:
        return [self._vertices[i] for i in self.unswapped_b_idx()]

    def swap(self, vertex_in_a: Vertex, vertex_in_b: Vertex):
        """Moves vertex_in_a to B and vertex_in_b to A. swap(x, y) is undone by swap(y, x).

        RAISES InvariantViolationError if the vertices are not in the expected groups."""
        i_a = self._index.get(vertex_in_a)
        i_b = self._index.get(vertex_in_b)
        if i_a is None or i_b is None or not self._in_a[i_a] or self._in_a[i_b]:
            raise InvariantViolationError(f"Invalid swap of {vertex_in_a} (expected in A) and {vertex_in_b} "
                                          f"(expected in B)")

        self._in_a[i_a] = False
        self._in_a[i_b] = True

    def mark_swapped(self, vertex_a: Vertex, vertex_b: Vertex):
        """Removes vertex_a from unswapped A and vertex_b from unswapped B. Group membership is not touched."""
        self._unswapped_a[self._index[vertex_a]] = False
        self._unswapped_b[self._index[vertex_b]] = False

    def membership(self) -> np.ndarray:
        """Copy of the membership table, True for vertices in A."""
        return self._in_a.copy()

    def cut_cost(self, graph: Graph) -> int:
        """Sum of the weights of all edges between A and B."""
        cost = 0
        for edge in graph.edges:
            first, second = graph.endpoints(edge)
            # external
            if self._in_a[self._index[first]] != self._in_a[self._index[second]]:
                cost += edge.weight

        return cost
