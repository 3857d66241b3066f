import argparse
import sys
from time import perf_counter_ns

from klbisect.bisection import KernighanLin
from klbisect.error import KLError
from klbisect.parser import get_graph

DEFAULT_GRAPH = "graph.txt"


def format_group(name: str, vertices: list) -> str:
    return f"Group {name}: " + "".join(str(v) for v in vertices)


def cli(argv=None):
    parser = argparse.ArgumentParser(description="Kernighan-Lin graph bisection.")

    parser.add_argument(
        "graph_path",
        help="Path to graph file.",
        nargs="?",
        default=DEFAULT_GRAPH,
    )
    parser.add_argument("--show-time", action="store_true", help="Print the time taken by the bisection.")
    parser.add_argument("--verbose", action="store_true", help="Print every swap of the pass.")

    args = parser.parse_args(argv)

    try:
        graph, graph_name = get_graph(args.graph_path)

        if args.verbose:
            print(f"Bisecting graph: {graph_name}")
        start = perf_counter_ns()
        k = KernighanLin.process(graph, verbose=args.verbose)
        opt_time = (perf_counter_ns() - start) / 1e9
    except (KLError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_group("A", k.group_a))
    print(format_group("B", k.group_b))
    print(f"Cut cost: {k.cut_cost}")
    if args.show_time:
        print(f"Took {opt_time} s.")

    return 0


def run():
    sys.exit(cli())


if __name__ == "__main__":
    run()
