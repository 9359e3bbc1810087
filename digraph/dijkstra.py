"""Single-source shortest paths with Dijkstra's algorithm."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Set

from .exceptions import AlgorithmError, ConfigError, VertexNotFoundError
from .frontier import FrontierProtocol, HeapFrontier, IndexedFrontier
from .graph import Digraph, Vertex
from .logger import Logger, NoopLogger
from .path import reconstruct_path

Float = float
WeightFn = Callable[[Any], Float]


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and predecessors produced by the solver.

    Attributes:
        start: Vertex the search started from.
        distances: Total weight of the best path to each vertex, ``math.inf``
            for vertices the search never reached.
        predecessors: Previous vertex on the best path. The start vertex and
            unreached vertices map to themselves.
    """

    start: Vertex
    distances: Dict[Vertex, Float]
    predecessors: Dict[Vertex, Vertex]

    def reached(self, vertex: Vertex) -> bool:
        return self.distances[vertex] < math.inf


@dataclass(frozen=True)
class DijkstraConfig:
    """Configuration knobs for the solver.

    Attributes:
        frontier: ``"heap"`` for a binary heap with lazy deletion of stale
            entries, or ``"indexed"`` for an addressable heap with
            decrease-key. Both produce the same distances.
    """

    frontier: str = "heap"


class DijkstraSolver:
    """Dijkstra's algorithm over a :class:`~digraph.graph.Digraph`.

    Edge weights come from ``weight_fn`` applied to each edge payload. They
    must be non-negative; this is assumed, not checked.
    """

    def __init__(
        self,
        G: Digraph[Any, Any],
        start: Vertex,
        weight_fn: WeightFn,
        config: Optional[DijkstraConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        """Initialize the solver.

        Args:
            G: Input graph. It is only read.
            start: Source vertex key.
            weight_fn: Maps an edge payload to a non-negative weight.
            config: Optional solver configuration.
            logger: Optional event logger.

        Raises:
            VertexNotFoundError: If ``start`` is not a vertex of ``G``.
            ConfigError: If the configured frontier is unknown.
        """
        if start not in G:
            raise VertexNotFoundError(start)
        self.G = G
        self.start = start
        self.weight_fn = weight_fn
        self.cfg = config or DijkstraConfig()
        self.logger = logger or NoopLogger()
        self._make_frontier()  # validate early
        self.counters: Dict[str, int] = {
            "pops": 0,
            "stale_pops": 0,
            "edges_relaxed": 0,
            "improvements": 0,
            "max_frontier_size": 0,
        }
        self._result: Optional[ShortestPaths] = None

    def _make_frontier(self) -> FrontierProtocol:
        if self.cfg.frontier == "heap":
            return HeapFrontier()
        if self.cfg.frontier == "indexed":
            return IndexedFrontier()
        raise ConfigError(f"unknown frontier '{self.cfg.frontier}'")

    def solve(self) -> ShortestPaths:
        """Run the search and return distances and predecessors."""
        self.logger.debug(
            "dijkstra.start",
            start=self.start,
            n=self.G.vertex_count(),
            m=self.G.edge_count(),
            frontier=self.cfg.frontier,
        )
        dist: Dict[Vertex, Float] = {v: math.inf for v in self.G.vertices()}
        pred: Dict[Vertex, Vertex] = {v: v for v in dist}
        settled: Set[Vertex] = set()
        dist[self.start] = 0.0

        pq = self._make_frontier()
        pq.push(self.start, 0.0)
        counters = self.counters
        while pq:
            counters["max_frontier_size"] = max(counters["max_frontier_size"], len(pq))
            d_u, u = pq.pop()
            counters["pops"] += 1
            # lazy deletion
            if u in settled:
                counters["stale_pops"] += 1
                continue
            settled.add(u)
            for v, info in self.G.successors(u):
                counters["edges_relaxed"] += 1
                nd = d_u + self.weight_fn(info)
                if nd < dist[v]:
                    counters["improvements"] += 1
                    dist[v] = nd
                    pred[v] = u
                    pq.push(v, nd)

        self._result = ShortestPaths(start=self.start, distances=dist, predecessors=pred)
        self.logger.info("dijkstra.done", start=self.start, settled=len(settled), **counters)
        return self._result

    def path(self, target: Vertex) -> List[Vertex]:
        """Return the best path from the start to ``target``.

        Returns:
            Vertex keys from start to target inclusive, or an empty list if
            ``target`` is unreachable. ``solve`` must be called beforehand.

        Raises:
            AlgorithmError: If ``solve`` has not run yet.
            VertexNotFoundError: If ``target`` was not a vertex when solving.
        """
        if self._result is None:
            raise AlgorithmError("Call solve() before requesting paths.")
        if target not in self._result.predecessors:
            raise VertexNotFoundError(target)
        return reconstruct_path(self._result.predecessors, self.start, target)

    def summary(self) -> Dict[str, int]:
        """Return a copy of internal counter values."""
        return dict(self.counters)


def find_shortest_paths(
    G: Digraph[Any, Any],
    start: Vertex,
    weight_fn: WeightFn,
    config: Optional[DijkstraConfig] = None,
    logger: Logger | None = None,
) -> Dict[Vertex, Vertex]:
    """Return the Dijkstra predecessor map of ``G`` from ``start``.

    Every vertex of ``G`` appears as a key. ``start`` and vertices that
    cannot be reached from it map to themselves.

    Args:
        G: Input graph with non-negative edge weights.
        start: Source vertex key.
        weight_fn: Maps an edge payload to its weight.
        config: Optional solver configuration.
        logger: Optional event logger.

    Raises:
        VertexNotFoundError: If ``start`` is not a vertex of ``G``.

    Examples:
        ```python
        >>> g = Digraph.from_edges([(1, None), (2, None)], [(1, 2, 3.0)])
        >>> find_shortest_paths(g, 1, float)
        {1: 1, 2: 1}
        ```
    """
    solver = DijkstraSolver(G, start, weight_fn, config=config, logger=logger)
    return solver.solve().predecessors


__all__ = [
    "DijkstraConfig",
    "DijkstraSolver",
    "ShortestPaths",
    "find_shortest_paths",
]
