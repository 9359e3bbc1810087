"""Rebuild concrete paths from a predecessor map."""

from __future__ import annotations

from typing import List, Mapping, Set

Vertex = int


def reconstruct_path(
    predecessors: Mapping[Vertex, Vertex],
    start: Vertex,
    target: Vertex,
) -> List[Vertex]:
    """Return the vertices from ``start`` to ``target`` inclusive.

    Args:
        predecessors: Map in which a vertex without a real predecessor (the
            start, or anything unreached) maps to itself.
        start: Vertex the map was computed from.
        target: Vertex the path should end at.

    Returns:
        The path as a list of vertex keys, or an empty list if ``target`` was
        not reached from ``start``.

    Raises:
        KeyError: If ``start`` or ``target`` is missing from ``predecessors``.

    Examples:
        ```python
        >>> reconstruct_path({1: 1, 2: 1, 3: 2}, 1, 3)
        [1, 2, 3]
        >>> reconstruct_path({1: 1, 2: 2}, 1, 2)
        []
        ```
    """
    if start not in predecessors:
        raise KeyError(start)
    if target not in predecessors:
        raise KeyError(target)
    if start == target:
        return [start]

    chain: List[Vertex] = [target]
    seen: Set[Vertex] = {target}
    cur = target
    while True:
        prev = predecessors[cur]
        if prev == cur:
            # Hit a self-mapped vertex other than start: unreached.
            return []
        chain.append(prev)
        if prev == start:
            chain.reverse()
            return chain
        if prev in seen:
            return []
        seen.add(prev)
        cur = prev


__all__ = ["reconstruct_path"]
