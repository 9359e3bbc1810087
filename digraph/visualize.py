"""Draw a graph, optionally highlighting a shortest-path tree.

Example usage::

    from digraph.generator import generate_graph
    from digraph.visualize import draw_digraph

    g = generate_graph(n=20, seed=3)
    preds = g.find_shortest_paths(0, float)
    draw_digraph(g, predecessors=preds, source=0).savefig("tree.png")
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

import matplotlib.pyplot as plt
import networkx as nx
from matplotlib.figure import Figure

from .convert import to_networkx
from .exceptions import ConfigError
from .graph import Digraph, Vertex

LAYOUTS = ("spring", "kamada_kawai", "shell", "circular")


def _layout(G: nx.DiGraph, layout: str, seed: int) -> dict:
    if layout == "spring":
        return nx.spring_layout(G, seed=seed)
    if layout == "kamada_kawai":
        return nx.kamada_kawai_layout(G)
    if layout == "shell":
        return nx.shell_layout(G)
    if layout == "circular":
        return nx.circular_layout(G)
    raise ConfigError(f"Unknown layout: {layout}")


def draw_digraph(
    G: Digraph[Any, Any],
    *,
    predecessors: Optional[Mapping[Vertex, Vertex]] = None,
    source: Optional[Vertex] = None,
    edge_label: Optional[Callable[[Any], Any]] = None,
    layout: str = "spring",
    node_size: int = 300,
    seed: int = 42,
    title: str = "Directed Graph",
) -> Figure:
    """Render ``G`` with NetworkX + Matplotlib and return the figure.

    Edges ``predecessors[v] -> v`` (the shortest-path tree) are drawn in red;
    the ``source`` vertex is highlighted. ``edge_label`` maps an edge payload
    to the text shown on the edge.
    """
    nxg = to_networkx(G)
    pos = _layout(nxg, layout, seed)

    fig, ax = plt.subplots(figsize=(12, 10))

    node_colors = ["tab:red" if node == source else "tab:blue" for node in nxg.nodes]
    nx.draw_networkx_nodes(nxg, pos, ax=ax, node_color=node_colors, node_size=node_size, alpha=0.9)

    tree = set()
    if predecessors is not None:
        tree = {(p, v) for v, p in predecessors.items() if p != v and nxg.has_edge(p, v)}
    other = [e for e in nxg.edges if e not in tree]
    nx.draw_networkx_edges(
        nxg, pos, ax=ax, edgelist=other, arrowstyle="->", arrowsize=12, width=1.2, alpha=0.6
    )
    if tree:
        nx.draw_networkx_edges(
            nxg,
            pos,
            ax=ax,
            edgelist=sorted(tree),
            arrowstyle="->",
            arrowsize=14,
            width=2.4,
            edge_color="tab:red",
        )

    nx.draw_networkx_labels(nxg, pos, ax=ax, font_size=8, font_color="black")

    if edge_label is not None:
        labels = {(u, v): edge_label(G.edge_info(u, v)) for u, v in G.edges()}
        nx.draw_networkx_edge_labels(nxg, pos, ax=ax, edge_labels=labels, font_size=7)

    ax.set_title(title, fontsize=14)
    ax.axis("off")
    fig.tight_layout()
    return fig


__all__ = ["LAYOUTS", "draw_digraph"]
