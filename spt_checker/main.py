import argparse
import logging
import sys
from pathlib import Path

import matplotlib.pyplot as plt
import networkx as nx

from spt_checker.certificate import verify_shortest_path_tree, Verdict
from spt_checker.config import Config, WEIGHT_TYPES
from spt_checker.graph import GraphError, WeightedGraph, load_graph

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_REJECTED = 1
EXIT_LOAD_ERROR = 2


# Draws G with the candidate tree's edges highlighted
def plot_tree_over_graph(G: WeightedGraph, T: WeightedGraph, root: int, verdict: Verdict, path: Path) -> Path:
    D = G.to_networkx()
    pos = nx.circular_layout(D)
    tree_edges = [(u, v) for u, v, _ in T.edges() if D.has_edge(u, v)]
    in_tree = set(tree_edges)
    other_edges = [e for e in D.edges if e not in in_tree]

    fig, ax = plt.subplots(figsize=(7, 7))
    node_colors = ["tab:red" if n == root else "tab:blue" for n in D.nodes]
    nx.draw_networkx_nodes(D, pos, ax=ax, node_color=node_colors, node_size=500)
    nx.draw_networkx_labels(D, pos, ax=ax, font_color="white")
    nx.draw_networkx_edges(D, pos, ax=ax, edgelist=other_edges, edge_color="lightgray", arrows=True)
    nx.draw_networkx_edges(D, pos, ax=ax, edgelist=tree_edges, edge_color="tab:green", width=2.5, arrows=True)
    nx.draw_networkx_edge_labels(D, pos, ax=ax, edge_labels=nx.get_edge_attributes(D, "weight"), font_size=8)

    if verdict.distances is not None:
        ax.set_xlabel("distances: " + ", ".join(f"{v}={d}" for v, d in enumerate(verdict.distances)))
    ax.set_title(f"Root {root}: {verdict}")
    ax.set_axis_off()

    path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout(); plt.savefig(path, dpi=200); plt.close(fig)
    return path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spt-check",
        description="Check that a candidate tree is a shortest-path tree of a weighted directed graph.",
    )
    parser.add_argument("graph", help="edge-list file for the graph G")
    parser.add_argument("tree", help="edge-list file for the candidate tree T")
    parser.add_argument("--root", type=int, default=Config.DEFAULT_ROOT, help="root vertex of T")
    parser.add_argument("--weight-type", choices=sorted(WEIGHT_TYPES), default=Config.WEIGHT_TYPE)
    parser.add_argument("--plot", action="store_true", help=f"save a figure under {Config.PLOT_DIR}")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every stage decision")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else Config.LOG_LEVEL)
    # argparse does not check a default taken from SPT_WEIGHT_TYPE against choices
    if args.weight_type not in WEIGHT_TYPES:
        parser.error(f"unknown weight type {args.weight_type!r}, choose from {', '.join(sorted(WEIGHT_TYPES))}")
    weight_type = WEIGHT_TYPES[args.weight_type]

    try:
        G = load_graph(args.graph, weight_type=weight_type)
        T = load_graph(args.tree, weight_type=weight_type)
    except GraphError as exc:
        logger.error(f"Invalid edge list: {exc}")
        print(f"Could not load input graphs: {exc}", file=sys.stderr)
        return EXIT_LOAD_ERROR
    if G is None or T is None:
        print("Could not load input graphs", file=sys.stderr)
        return EXIT_LOAD_ERROR
    if not 0 <= args.root < T.vertex_count():
        print(f"Root {args.root} is not a vertex of the tree (it has {T.vertex_count()} vertices)", file=sys.stderr)
        return EXIT_LOAD_ERROR

    print(f"Graph G ({G.vertex_count()} vertices, {G.edge_count()} edges):")
    print(G, end="")
    print(f"\nCandidate tree T ({T.vertex_count()} vertices, {T.edge_count()} edges), root {args.root}:")
    print(T, end="")

    verdict = verify_shortest_path_tree(G, T, args.root)
    print(f"\nResult: {verdict}")
    if verdict.distances is not None:
        print("Distances from root:")
        for v, d in enumerate(verdict.distances):
            print(f"  {v}: {d}")

    if args.plot:
        out = Path(Config.PLOT_DIR) / f"{Path(args.tree).stem}_root{args.root}.png"
        plot_tree_over_graph(G, T, args.root, verdict, out)
        print(f"Plot saved to {out}")

    return EXIT_VALID if verdict else EXIT_REJECTED


if __name__ == "__main__":
    sys.exit(main())
