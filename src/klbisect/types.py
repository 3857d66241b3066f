from dataclasses import dataclass
from typing import Hashable

# Vertices are opaque labels (single letters in the text format). Only equality and hashing are used.
Vertex = Hashable

# (vertex formerly in A, vertex formerly in B). Undoing it means swap(second, first).
SwapRecord = tuple[Vertex, Vertex]


@dataclass(frozen=True)
class Edge:
    first: Vertex
    second: Vertex
    weight: int
