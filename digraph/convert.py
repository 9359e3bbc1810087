"""Conversions to and from NetworkX graphs and NumPy matrices."""

from __future__ import annotations

from typing import Any, Callable, List, Tuple

import networkx as nx
import numpy as np
import numpy.typing as npt

from .exceptions import ConfigError
from .graph import Digraph, Vertex


def to_networkx(G: Digraph[Any, Any], attr: str = "info") -> nx.DiGraph:
    """Return a :class:`networkx.DiGraph` mirroring ``G``.

    Vertex and edge payloads are stored under the ``attr`` attribute. The
    payload objects are shared, not copied.
    """
    out = nx.DiGraph()
    for v in G.vertices():
        out.add_node(v, **{attr: G.vertex_info(v)})
    for v in G.vertices():
        for w, info in G.successors(v):
            out.add_edge(v, w, **{attr: info})
    return out


def from_networkx(nxg: nx.DiGraph, attr: str = "info") -> Digraph[Any, Any]:
    """Build a :class:`~digraph.graph.Digraph` from a NetworkX directed graph.

    Payloads are read from the ``attr`` attribute (``None`` when missing).

    Raises:
        ConfigError: If ``nxg`` is undirected or a multigraph.
    """
    if not nxg.is_directed() or nxg.is_multigraph():
        raise ConfigError("only simple directed NetworkX graphs can be converted")
    g: Digraph[Any, Any] = Digraph()
    for v, data in nxg.nodes(data=True):
        g.add_vertex(v, data.get(attr))
    for u, v, data in nxg.edges(data=True):
        g.add_edge(u, v, data.get(attr))
    return g


def adjacency_matrix(
    G: Digraph[Any, Any], weight_fn: Callable[[Any], float]
) -> Tuple[List[Vertex], npt.NDArray[np.float64]]:
    """Return the weighted adjacency matrix of ``G``.

    Row and column ``i`` correspond to ``keys[i]`` in sorted key order.
    Missing edges are ``inf`` and the diagonal is ``0`` unless a self loop
    supplies its own weight.

    Returns:
        A tuple ``(keys, matrix)``.
    """
    keys = sorted(G.vertices())
    index = {k: i for i, k in enumerate(keys)}
    mat = np.full((len(keys), len(keys)), np.inf, dtype=np.float64)
    np.fill_diagonal(mat, 0.0)
    for u, v in G.edges():
        mat[index[u], index[v]] = float(weight_fn(G.edge_info(u, v)))
    return keys, mat


__all__ = ["to_networkx", "from_networkx", "adjacency_matrix"]
