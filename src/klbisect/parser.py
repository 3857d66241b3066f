import re
from pathlib import Path

from klbisect.error import GraphFormatError
from klbisect.graph import Graph
from klbisect.resources import res_path

VERTICES_HEADER = "vertices:"
EDGES_HEADER = "edges:"

VERTEX_PATTERN = re.compile(r"[A-Z]")
# e.g. AB(3)
EDGE_PATTERN = re.compile(r"([A-Z])([A-Z])\(([0-9]+)\)")


def get_path(graph_path: str):
    base_path = Path(graph_path)

    if base_path.exists():
        return base_path

    from_res_path = res_path.joinpath(graph_path)

    if from_res_path.exists():
        return from_res_path

    raise FileNotFoundError(f"Could not find graph path. Looked at path {graph_path} and {from_res_path}")


def get_graph(graph_path: str) -> tuple[Graph, str]:
    path = get_path(graph_path)

    return parse_graph(read_graph_to_lines(path)), path.stem


def read_graph_to_lines(graph_path: Path) -> list[str]:
    with open(graph_path, "r") as f:
        lines = f.readlines()

    return lines


def strip_header(ln: str, header: str) -> str:
    if not ln.startswith(header):
        raise GraphFormatError(f"Expected line starting with '{header}', got '{ln}'")
    return ln[len(header):]


def parse_graph(lines: list[str]) -> Graph:
    """Parses the two line format

        vertices: ABCD
        edges: AB(1) AC(3) BD(2)

    Vertices are enumerated in the order they are listed."""
    content = [ln.strip() for ln in lines if ln.strip()]
    if len(content) < 2:
        raise GraphFormatError("Graph needs a 'vertices:' line followed by an 'edges:' line.")

    graph = Graph()
    for name in VERTEX_PATTERN.findall(strip_header(content[0], VERTICES_HEADER)):
        if name in graph:
            raise GraphFormatError(f"Vertex {name} is listed twice.")
        graph.add_vertex(name)

    edge_text = strip_header(content[1], EDGES_HEADER)
    for first, second, weight in EDGE_PATTERN.findall(edge_text):
        if first not in graph or second not in graph:
            raise GraphFormatError(f"Edge {first}{second} uses an undeclared vertex.")
        if first == second or graph.find_edge(first, second) is not None:
            raise GraphFormatError(f"Edge {first}{second} is a self-loop or listed twice.")
        graph.add_edge(first, second, int(weight))

    return graph
