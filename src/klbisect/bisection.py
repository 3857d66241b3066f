"""An implementation of the Kernighan-Lin heuristic for splitting a graph into two equal groups such that the total
weight of the edges between the groups (the cut cost) is minimized.

A single pass is performed: |V|/2 greedy swaps, after which the swaps are unwound back to the point with the lowest
cut cost seen during the pass."""

from typing import Optional

import numpy as np

from klbisect.graph import Graph
from klbisect.partition import PartitionState
from klbisect.types import SwapRecord, Vertex


def vertex_cost(graph: Graph, state: PartitionState, v: Vertex) -> int:
    """Difference of external and internal cost of this vertex. When moving a vertex to the other group, all its
    internal edges become external edges and vice versa."""
    cost = 0
    v_in_a = state.in_a(v)

    for nb, edge in graph.incident_edges(v):
        if state.in_a(nb) != v_in_a:  # external
            cost += edge.weight
        else:
            cost -= edge.weight

    return cost


def gain_matrix(graph: Graph, state: PartitionState, a_idx: np.ndarray, b_idx: np.ndarray) -> np.ndarray:
    """gains[i, j] is the decrease in cut cost when swapping unswapped A vertex a_idx[i] with unswapped B vertex
    b_idx[j].

    The D values and pair weights are gathered per vertex, only the final sum is broadcast. Entries are Python ints
    (object dtype) since weights are unbounded and int64 would wrap around."""
    vertices = graph.vertices
    a_vertices = [vertices[i] for i in a_idx]
    b_vertices = [vertices[j] for j in b_idx]
    b_pos = {v: j for j, v in enumerate(b_vertices)}

    d_a = np.array([vertex_cost(graph, state, v) for v in a_vertices], dtype=object)
    d_b = np.array([vertex_cost(graph, state, v) for v in b_vertices], dtype=object)

    edge_costs = np.zeros((len(a_vertices), len(b_vertices)), dtype=object)
    for i, v_a in enumerate(a_vertices):
        for nb, edge in graph.incident_edges(v_a):
            j = b_pos.get(nb)
            if j is not None:
                edge_costs[i, j] = edge.weight

    # subtract 2*edge_cost because the edge between the pair stays external after swapping
    return d_a[:, np.newaxis] + d_b[np.newaxis, :] - 2 * edge_costs


def best_swap(graph: Graph, state: PartitionState) -> Optional[tuple[SwapRecord, int]]:
    """Returns the pair with maximal gain and its gain, or None if nothing is left to swap. Ties go to the first
    pair in (unswapped A) x (unswapped B) enumeration order, which is what argmax gives on the row-major matrix."""
    a_idx = state.unswapped_a_idx()
    b_idx = state.unswapped_b_idx()
    if a_idx.size == 0 or b_idx.size == 0:
        return None

    gains = gain_matrix(graph, state, a_idx, b_idx)
    i, j = np.unravel_index(np.argmax(gains), gains.shape)

    vertices = graph.vertices
    return (vertices[a_idx[i]], vertices[b_idx[j]]), int(gains[i, j])


class KernighanLin:
    """Runs one full pass on construction. The graph is only read."""

    def __init__(self, graph: Graph, verbose=False):
        self.graph = graph
        self.verbose = verbose
        # RAISES InvalidInputError for odd vertex counts
        self.state = PartitionState(graph)
        self.partition_size = self.state.partition_size

        # applied swaps, most recent last
        self.swaps: list[SwapRecord] = []
        # cut cost after each swap of the pass, before unwinding
        self.costs: list[int] = []
        self.best_index = -1

        self._do_all_swaps()

    @classmethod
    def process(cls, graph: Graph, verbose=False) -> "KernighanLin":
        return cls(graph, verbose=verbose)

    def _do_single_swap(self) -> Optional[int]:
        """Chooses the best swap and performs it. Returns the new cut cost."""
        chosen = best_swap(self.graph, self.state)
        if chosen is None:
            return None
        (v_a, v_b), gain = chosen

        self.state.swap(v_a, v_b)
        self.state.mark_swapped(v_a, v_b)
        self.swaps.append((v_a, v_b))

        cost = self.state.cut_cost(self.graph)
        if self.verbose:
            print(f"Swap {len(self.swaps)}: {v_a} <-> {v_b}, gain {gain}, cut cost {cost}")

        return cost

    def _do_all_swaps(self):
        """Performs |V|/2 swaps and keeps the prefix with the least cut cost."""
        for _ in range(self.partition_size):
            cost = self._do_single_swap()
            if cost is None:
                break
            self.costs.append(cost)

        if not self.costs:
            return

        # first minimum, so fewer swaps win ties
        self.best_index = self.costs.index(min(self.costs))

        # unwind swaps
        while len(self.swaps) - 1 > self.best_index:
            v_a, v_b = self.swaps.pop()
            # v_a is now in B and v_b in A
            self.state.swap(v_b, v_a)

        if self.verbose:
            print(f"Kept {len(self.swaps)} of {len(self.costs)} swaps, cut cost {self.costs[self.best_index]}")

    @property
    def group_a(self) -> list[Vertex]:
        return self.state.group_a

    @property
    def group_b(self) -> list[Vertex]:
        return self.state.group_b

    @property
    def cut_cost(self) -> int:
        return self.state.cut_cost(self.graph)


def process(graph: Graph, verbose=False) -> KernighanLin:
    return KernighanLin.process(graph, verbose=verbose)
