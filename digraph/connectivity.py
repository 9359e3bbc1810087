"""Reachability and strong-connectivity queries."""

from __future__ import annotations

from typing import Any, List, Set

from .exceptions import VertexNotFoundError
from .graph import Digraph, Vertex


def reachable_from(G: Digraph[Any, Any], start: Vertex) -> Set[Vertex]:
    """Return every vertex reachable from ``start`` along outgoing edges.

    The traversal is depth-first with an explicit stack, so its depth is
    bounded by memory rather than the interpreter's recursion limit.

    Args:
        G: Graph to traverse.
        start: Vertex the traversal begins at. It is always included.

    Returns:
        The set of visited vertex keys.

    Raises:
        VertexNotFoundError: If ``start`` is not a vertex of ``G``.
    """
    if start not in G:
        raise VertexNotFoundError(start)
    visited: Set[Vertex] = {start}
    stack: List[Vertex] = [start]
    while stack:
        u = stack.pop()
        for v, _info in G.successors(u):
            if v not in visited:
                visited.add(v)
                stack.append(v)
    return visited


def is_strongly_connected(G: Digraph[Any, Any]) -> bool:
    """Return ``True`` if every vertex of ``G`` reaches every other vertex.

    Runs one traversal per vertex and stops at the first one whose reachable
    set is smaller than the graph. The empty graph and a lone vertex are
    strongly connected.
    """
    n = G.vertex_count()
    for v in G.vertices():
        if len(reachable_from(G, v)) != n:
            return False
    return True


__all__ = ["reachable_from", "is_strongly_connected"]
