"""Command-line interface for inspecting graphs and shortest paths."""

from __future__ import annotations

import argparse
import json
import math
import sys
import traceback
from typing import Any, Dict, List, Optional

from .dijkstra import DijkstraConfig, DijkstraSolver
from .exceptions import (
    ConfigError,
    DigraphError,
    EdgeAlreadyExistsError,
    EdgeNotFoundError,
    VertexAlreadyExistsError,
    VertexNotFoundError,
)
from .generator import GRAPH_TYPES, WEIGHT_DISTS, generate_graph
from .graph import Digraph
from .logger import StdLogger

EXAMPLE_VERTICES = [(0, "A"), (1, "B"), (2, "C"), (3, "D"), (4, "E")]
EXAMPLE_EDGES = [(0, 1, 1.0), (1, 2, 2.0), (0, 2, 5.0), (2, 3, 1.0)]

INPUT_ERRORS = (
    ConfigError,
    VertexNotFoundError,
    VertexAlreadyExistsError,
    EdgeNotFoundError,
    EdgeAlreadyExistsError,
)


def build_example_graph() -> Digraph[str, float]:
    """Return the small demo graph: A->B->C->D beats the direct A->C edge."""
    return Digraph.from_edges(EXAMPLE_VERTICES, EXAMPLE_EDGES)


def _finite(x: float) -> Optional[float]:
    return x if math.isfinite(x) else None


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``digraph`` command-line tool."""
    examples = (
        "Examples:\n"
        "  digraph --example --target 3\n"
        "  digraph --random --n 100 --m 500 --source 0\n"
        "  digraph --random --type grid --n 25 --frontier indexed\n"
    )
    p = argparse.ArgumentParser(
        prog="digraph",
        description="Directed graph connectivity and Dijkstra runner",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--example", action="store_true", help="Use the built-in five-vertex graph")
    src.add_argument("--random", action="store_true", help="Use a random graph")

    p.add_argument("--type", choices=GRAPH_TYPES, default="erdos_renyi", help="Random graph family")
    p.add_argument("--weights", choices=WEIGHT_DISTS, default="uniform", help="Weight distribution")
    p.add_argument("--n", type=int, default=10, help="Vertices (random mode)")
    p.add_argument("--m", type=int, default=None, help="Edges (random mode)")
    p.add_argument("--seed", type=int, default=0, help="Seed controlling random graph generation")

    p.add_argument("--source", type=int, default=0, help="Source vertex id")
    p.add_argument("--target", type=int, default=None, help="Target vertex id for path output")
    p.add_argument("--frontier", choices=["heap", "indexed"], default="heap")
    p.add_argument("--draw", type=str, default=None, help="Save a PNG of the shortest-path tree")

    args = p.parse_args(argv)

    try:
        if args.example:
            G: Digraph[Any, float] = build_example_graph()
        else:
            G = generate_graph(
                n=args.n,
                m=args.m,
                graph_type=args.type,
                weight_dist=args.weights,
                seed=args.seed,
            )

        logger = StdLogger(
            level=args.log_level,
            json_fmt=args.log_json,
            stream=sys.stderr,
        )
        if args.verbose:
            sys.stderr.write(
                f"config: n={G.vertex_count()} m={G.edge_count()} "
                f"frontier={args.frontier} seed={args.seed} source={args.source}\n"
            )

        solver = DijkstraSolver(
            G,
            args.source,
            float,
            config=DijkstraConfig(frontier=args.frontier),
            logger=logger,
        )
        res = solver.solve()

        out: Dict[str, Any] = {
            "vertices": G.vertex_count(),
            "edges": G.edge_count(),
            "strongly_connected": G.is_strongly_connected(),
            "source": args.source,
            "predecessors": res.predecessors,
            "distances": {v: _finite(d) for v, d in res.distances.items()},
        }
        if args.target is not None:
            out["target"] = args.target
            out["path"] = solver.path(args.target)

        if args.draw:
            import matplotlib.pyplot as plt

            from .visualize import draw_digraph

            fig = draw_digraph(G, predecessors=res.predecessors, source=args.source)
            try:
                fig.savefig(args.draw)
            finally:
                plt.close(fig)

        logger.info("run", **solver.summary())
        print(json.dumps(out))
        return 0

    except INPUT_ERRORS as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return 64
    except DigraphError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return 70
    except Exception as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return 70


if __name__ == "__main__":
    sys.exit(main())
