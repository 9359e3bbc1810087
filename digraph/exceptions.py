"""Custom exception types used across :mod:`digraph`."""

from __future__ import annotations

from typing import Hashable


class DigraphError(Exception):
    """Base class for all package-specific errors."""


class VertexNotFoundError(DigraphError, KeyError):
    """Raised when an operation references a vertex that is not in the graph."""

    def __init__(self, vertex: Hashable) -> None:
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"vertex {self.vertex!r} does not exist"


class VertexAlreadyExistsError(DigraphError, ValueError):
    """Raised by ``add_vertex`` when the key is already present."""

    def __init__(self, vertex: Hashable) -> None:
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"vertex {self.vertex!r} already exists"


class EdgeNotFoundError(DigraphError, KeyError):
    """Raised when both endpoints exist but the edge between them does not."""

    def __init__(self, source: Hashable, target: Hashable) -> None:
        super().__init__(source, target)
        self.source = source
        self.target = target

    def __str__(self) -> str:
        return f"edge ({self.source!r}, {self.target!r}) does not exist"


class EdgeAlreadyExistsError(DigraphError, ValueError):
    """Raised by ``add_edge`` when the ordered pair already has an edge."""

    def __init__(self, source: Hashable, target: Hashable) -> None:
        super().__init__(source, target)
        self.source = source
        self.target = target

    def __str__(self) -> str:
        return f"edge ({self.source!r}, {self.target!r}) already exists"


class ConfigError(DigraphError, ValueError):
    """Raised for invalid configuration options."""


class AlgorithmError(DigraphError, RuntimeError):
    """Raised when an algorithm object is used out of order."""


__all__ = [
    "DigraphError",
    "VertexNotFoundError",
    "VertexAlreadyExistsError",
    "EdgeNotFoundError",
    "EdgeAlreadyExistsError",
    "ConfigError",
    "AlgorithmError",
]
