"""Seeded random graph families for demos, benchmarks and tests.

SUPPORTED GRAPH TYPES
---------------------
1. erdos_renyi
   Uniformly sampled directed edges on top of an optional backbone chain.
2. dag
   Edges only from lower- to higher-numbered vertices (never strongly
   connected once there are two vertices).
3. grid
   Near-square grid with edges in both directions between neighbours
   (always strongly connected).
4. cycle
   The ring ``0 -> 1 -> ... -> n-1 -> 0`` plus optional random chords
   (always strongly connected).

WEIGHT DISTRIBUTIONS
--------------------
- uniform: evenly distributed integer weights in ``[w_min, w_max]``
- small_int: many equal weights, concentrated near ``w_min``
- exp: many small weights with an occasional large one

Every weight is non-negative, so generated graphs are safe for Dijkstra.
Vertex payloads are ``None``; each edge payload is its weight as a float.
"""

from __future__ import annotations

import math
import random
from typing import Literal, Optional, Set, Tuple

from .exceptions import ConfigError
from .graph import Digraph

WeightDist = Literal["uniform", "small_int", "exp"]
GraphType = Literal["erdos_renyi", "dag", "grid", "cycle"]

GRAPH_TYPES = ("erdos_renyi", "dag", "grid", "cycle")
WEIGHT_DISTS = ("uniform", "small_int", "exp")


def _sample_weight(rng: random.Random, dist: str, w_min: int, w_max: int) -> float:
    if dist == "uniform":
        return float(rng.randint(w_min, w_max))

    if dist == "small_int":
        return float(rng.randint(w_min, min(w_max, w_min + 10)))

    if dist == "exp":
        if w_max == w_min:
            return float(w_min)
        lam = 1.0 / max(1.0, (w_max - w_min) / 4.0)
        x = rng.expovariate(lam)
        return float(w_min + min(w_max - w_min, round(x)))

    raise ConfigError(f"unknown weight distribution: {dist}")


def generate_graph(
    *,
    n: int,
    m: Optional[int] = None,
    graph_type: GraphType = "erdos_renyi",
    weight_dist: WeightDist = "uniform",
    w_min: int = 1,
    w_max: int = 100,
    seed: Optional[int] = 0,
    allow_self_loops: bool = False,
    backbone: bool = True,
) -> Digraph[None, float]:
    """Generate a directed weighted graph on vertices ``0 .. n-1``.

    Args:
        n: Number of vertices (``n >= 0``).
        m: Target edge count. Defaults to ``4 * n`` (capped at the number of
            possible edges) for random families; for ``grid`` and ``cycle``
            it only adds random extra edges up to ``m``.
        graph_type: One of :data:`GRAPH_TYPES`.
        weight_dist: One of :data:`WEIGHT_DISTS`.
        w_min: Smallest weight (``>= 0``).
        w_max: Largest weight (``>= w_min``).
        seed: Seed for :class:`random.Random`; ``None`` for nondeterminism.
        allow_self_loops: Permit ``u -> u`` edges in random sampling.
        backbone: For ``erdos_renyi`` and ``dag``, add the chain
            ``i -> i+1`` first so the graph is weakly connected.

    Returns:
        A :class:`~digraph.graph.Digraph` with float edge payloads.

    Raises:
        ConfigError: If any parameter is out of range.
    """
    if n < 0:
        raise ConfigError("n must be >= 0.")
    if m is not None and m < 0:
        raise ConfigError("m must be >= 0.")
    if w_min < 0:
        raise ConfigError("w_min must be >= 0 for Dijkstra-safe graphs.")
    if w_max < w_min:
        raise ConfigError("w_max must be >= w_min.")
    if graph_type not in GRAPH_TYPES:
        raise ConfigError(f"unknown graph_type: {graph_type}")
    if weight_dist not in WEIGHT_DISTS:
        raise ConfigError(f"unknown weight distribution: {weight_dist}")

    rng = random.Random(seed)
    g: Digraph[None, float] = Digraph()
    for v in range(n):
        g.add_vertex(v, None)

    max_edges = n * n if allow_self_loops else n * (n - 1)
    if graph_type == "dag":
        max_edges = n * (n - 1) // 2
    if m is None:
        m = min(n * 4, max_edges) if graph_type in ("erdos_renyi", "dag") else 0
    target_m = min(m, max_edges)
    seen: Set[Tuple[int, int]] = set()

    def add_edge(u: int, v: int) -> None:
        if (u == v and not allow_self_loops) or (u, v) in seen:
            return
        seen.add((u, v))
        g.add_edge(u, v, _sample_weight(rng, weight_dist, w_min, w_max))

    if backbone and graph_type in ("erdos_renyi", "dag"):
        for i in range(n - 1):
            add_edge(i, i + 1)

    if graph_type == "grid" and n > 0:
        rows = max(1, math.isqrt(n))
        cols = (n + rows - 1) // rows
        for u in range(n):
            r, c = divmod(u, cols)
            right = u + 1
            down = u + cols
            if c + 1 < cols and right < n:
                add_edge(u, right)
                add_edge(right, u)
            if r + 1 < rows and down < n:
                add_edge(u, down)
                add_edge(down, u)
    elif graph_type == "cycle" and n > 1:
        for i in range(n):
            add_edge(i, (i + 1) % n)

    while g.edge_count() < target_m:
        u = rng.randrange(n)
        v = rng.randrange(n)
        if graph_type == "dag":
            if u == v:
                continue
            if u > v:
                u, v = v, u
        add_edge(u, v)

    return g


__all__ = ["GRAPH_TYPES", "WEIGHT_DISTS", "generate_graph"]
