"""Generic directed graph with caller-defined vertex and edge payloads."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    Tuple,
    TypeVar,
)

from .exceptions import (
    EdgeAlreadyExistsError,
    EdgeNotFoundError,
    VertexAlreadyExistsError,
    VertexNotFoundError,
)

Vertex = int
EdgePair = Tuple[Vertex, Vertex]
VI = TypeVar("VI")
EI = TypeVar("EI")


@dataclass
class _VertexRecord(Generic[VI, EI]):
    """Payload of one vertex plus its outgoing edges keyed by destination."""

    info: VI
    out: Dict[Vertex, EI] = field(default_factory=dict)


class Digraph(Generic[VI, EI]):
    """Directed graph keyed by vertex number, stored as adjacency maps.

    Vertex keys are unique but need not be contiguous or zero-based. Each
    vertex carries one ``VI`` payload and each edge one ``EI`` payload. At
    most one edge exists per ordered ``(source, target)`` pair.

    Every mutating method validates its arguments before touching storage,
    so a call that raises leaves the graph exactly as it was.

    Examples:
        ```python
        >>> g = Digraph()
        >>> g.add_vertex(1, "a")
        >>> g.add_vertex(2, "b")
        >>> g.add_edge(1, 2, 4.0)
        >>> g.edges()
        [(1, 2)]
        >>> g.edge_info(1, 2)
        4.0
        ```
    """

    def __init__(self) -> None:
        """Create an empty graph."""
        self._vertices: Dict[Vertex, _VertexRecord[VI, EI]] = {}
        # Reverse index: target -> set of sources with an edge into it.
        self._incoming: Dict[Vertex, Set[Vertex]] = {}
        self._edge_count = 0

    @classmethod
    def from_edges(
        cls,
        vertices: Iterable[Tuple[Vertex, VI]],
        edges: Iterable[Tuple[Vertex, Vertex, EI]] = (),
    ) -> "Digraph[VI, EI]":
        """Create a graph from ``(key, info)`` vertices and ``(u, v, info)`` edges.

        Args:
            vertices: Iterable of vertex keys paired with their payloads.
            edges: Iterable of ``(source, target, info)`` tuples.

        Returns:
            A graph populated with the provided vertices and edges.
        """
        g: Digraph[VI, EI] = cls()
        for key, info in vertices:
            g.add_vertex(key, info)
        for u, v, info in edges:
            g.add_edge(u, v, info)
        return g

    # ---------- internals -------------------------------------------------

    def _record(self, vertex: Vertex) -> _VertexRecord[VI, EI]:
        try:
            return self._vertices[vertex]
        except KeyError:
            raise VertexNotFoundError(vertex) from None

    def _require_endpoints(self, u: Vertex, v: Vertex) -> _VertexRecord[VI, EI]:
        rec = self._record(u)
        if v not in self._vertices:
            raise VertexNotFoundError(v)
        return rec

    def _clone_storage(
        self, memo: Optional[Dict[int, Any]] = None
    ) -> Tuple[Dict[Vertex, _VertexRecord[VI, EI]], Dict[Vertex, Set[Vertex]]]:
        """Deep copy the storage into fresh local containers.

        Nothing is installed anywhere; if a payload fails to copy the
        partial result is simply dropped with the exception. One memo spans
        the whole copy so payloads shared in ``self`` stay shared.
        """
        if memo is None:
            memo = {}
        vertices: Dict[Vertex, _VertexRecord[VI, EI]] = {}
        for key, rec in self._vertices.items():
            out = {dst: copy.deepcopy(info, memo) for dst, info in rec.out.items()}
            vertices[key] = _VertexRecord(copy.deepcopy(rec.info, memo), out)
        incoming = {key: set(sources) for key, sources in self._incoming.items()}
        return vertices, incoming

    def _install(
        self,
        vertices: Dict[Vertex, _VertexRecord[VI, EI]],
        incoming: Dict[Vertex, Set[Vertex]],
        edge_count: int,
    ) -> None:
        self._vertices = vertices
        self._incoming = incoming
        self._edge_count = edge_count

    # ---------- queries ---------------------------------------------------

    def vertices(self) -> List[Vertex]:
        """Return every vertex key in insertion order."""
        return list(self._vertices)

    def edges(self, vertex: Optional[Vertex] = None) -> List[EdgePair]:
        """Return ``(source, target)`` pairs.

        Args:
            vertex: When given, only edges leaving this vertex are returned.

        Raises:
            VertexNotFoundError: If ``vertex`` is given but absent.
        """
        if vertex is not None:
            return [(vertex, dst) for dst in self._record(vertex).out]
        return [(src, dst) for src, rec in self._vertices.items() for dst in rec.out]

    def successors(self, vertex: Vertex) -> List[Tuple[Vertex, EI]]:
        """Return ``(target, info)`` for each edge leaving ``vertex``.

        Raises:
            VertexNotFoundError: If ``vertex`` is absent.
        """
        return list(self._record(vertex).out.items())

    def predecessors(self, vertex: Vertex) -> List[Vertex]:
        """Return the sources of every edge pointing at ``vertex``."""
        if vertex not in self._vertices:
            raise VertexNotFoundError(vertex)
        return sorted(self._incoming[vertex])

    def vertex_info(self, vertex: Vertex) -> VI:
        """Return the payload of ``vertex``.

        Raises:
            VertexNotFoundError: If ``vertex`` is absent.
        """
        return self._record(vertex).info

    def edge_info(self, u: Vertex, v: Vertex) -> EI:
        """Return the payload of the edge ``u -> v``.

        Raises:
            VertexNotFoundError: If either endpoint is absent.
            EdgeNotFoundError: If both endpoints exist but the edge does not.
        """
        rec = self._require_endpoints(u, v)
        try:
            return rec.out[v]
        except KeyError:
            raise EdgeNotFoundError(u, v) from None

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._vertices

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        rec = self._vertices.get(u)
        return rec is not None and v in rec.out

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        return len(self._vertices)

    def edge_count(self, vertex: Optional[Vertex] = None) -> int:
        """Return the total edge count, or the out-degree of ``vertex``.

        Raises:
            VertexNotFoundError: If ``vertex`` is given but absent.
        """
        if vertex is not None:
            return len(self._record(vertex).out)
        return self._edge_count

    # ---------- mutation --------------------------------------------------

    def add_vertex(self, vertex: Vertex, info: VI) -> None:
        """Insert a new vertex with payload ``info``.

        Raises:
            VertexAlreadyExistsError: If ``vertex`` is already present.
        """
        if vertex in self._vertices:
            raise VertexAlreadyExistsError(vertex)
        self._vertices[vertex] = _VertexRecord(info)
        self._incoming[vertex] = set()

    def add_edge(self, u: Vertex, v: Vertex, info: EI) -> None:
        """Insert the edge ``u -> v`` with payload ``info``.

        Self loops (``u == v``) are ordinary edges.

        Raises:
            VertexNotFoundError: If either endpoint is absent.
            EdgeAlreadyExistsError: If ``u -> v`` already exists.
        """
        rec = self._require_endpoints(u, v)
        if v in rec.out:
            raise EdgeAlreadyExistsError(u, v)
        rec.out[v] = info
        self._incoming[v].add(u)
        self._edge_count += 1

    def remove_vertex(self, vertex: Vertex) -> None:
        """Delete ``vertex`` together with every edge leaving or entering it.

        Raises:
            VertexNotFoundError: If ``vertex`` is absent.
        """
        rec = self._record(vertex)
        removed = len(rec.out)
        for dst in rec.out:
            if dst != vertex:
                self._incoming[dst].discard(vertex)
        for src in self._incoming[vertex]:
            if src != vertex:
                del self._vertices[src].out[vertex]
                removed += 1
        del self._vertices[vertex]
        del self._incoming[vertex]
        self._edge_count -= removed

    def remove_edge(self, u: Vertex, v: Vertex) -> None:
        """Delete the edge ``u -> v``.

        Raises:
            VertexNotFoundError: If either endpoint is absent.
            EdgeNotFoundError: If the edge does not exist.
        """
        rec = self._require_endpoints(u, v)
        if v not in rec.out:
            raise EdgeNotFoundError(u, v)
        del rec.out[v]
        self._incoming[v].discard(u)
        self._edge_count -= 1

    def clear(self) -> None:
        """Remove every vertex and edge."""
        self._install({}, {}, 0)

    # ---------- copy / move -----------------------------------------------

    def copy(self) -> "Digraph[VI, EI]":
        """Return an independent deep copy of this graph.

        The copy shares no storage with ``self``; payloads are copied with
        :func:`copy.deepcopy`.
        """
        vertices, incoming = self._clone_storage()
        g: Digraph[VI, EI] = type(self)()
        g._install(vertices, incoming, self._edge_count)
        return g

    def __copy__(self) -> "Digraph[VI, EI]":
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Digraph[VI, EI]":
        g: Digraph[VI, EI] = type(self)()
        memo[id(self)] = g
        vertices, incoming = self._clone_storage(memo)
        g._install(vertices, incoming, self._edge_count)
        return g

    def assign(self, other: "Digraph[VI, EI]") -> None:
        """Replace this graph's contents with a deep copy of ``other``.

        The copy is completed before anything in ``self`` changes, so a
        failure while copying leaves ``self`` untouched.
        """
        if other is self:
            return
        vertices, incoming = other._clone_storage()
        self._install(vertices, incoming, other._edge_count)

    def take(self) -> "Digraph[VI, EI]":
        """Move this graph's contents into a new graph and leave ``self`` empty."""
        g: Digraph[VI, EI] = type(self)()
        g._install(self._vertices, self._incoming, self._edge_count)
        self._install({}, {}, 0)
        return g

    # ---------- algorithms ------------------------------------------------

    def is_strongly_connected(self) -> bool:
        """Return ``True`` if every vertex can reach every other vertex."""
        from .connectivity import is_strongly_connected

        return is_strongly_connected(self)

    def find_shortest_paths(
        self, start: Vertex, weight_fn: Callable[[EI], float]
    ) -> Dict[Vertex, Vertex]:
        """Return Dijkstra predecessors from ``start``.

        See :func:`digraph.dijkstra.find_shortest_paths`.
        """
        from .dijkstra import find_shortest_paths

        return find_shortest_paths(self, start, weight_fn)

    # ---------- dunder ----------------------------------------------------

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._vertices

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self._vertices))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Digraph):
            return NotImplemented
        return self._vertices == other._vertices

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.vertex_count()}, "
            f"edges={self.edge_count()})"
        )


__all__ = ["Digraph", "Vertex", "EdgePair"]
