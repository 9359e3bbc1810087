"""Public package exports for :mod:`digraph`."""

from __future__ import annotations

from .connectivity import is_strongly_connected, reachable_from
from .dijkstra import DijkstraConfig, DijkstraSolver, ShortestPaths, find_shortest_paths
from .exceptions import (
    AlgorithmError,
    ConfigError,
    DigraphError,
    EdgeAlreadyExistsError,
    EdgeNotFoundError,
    VertexAlreadyExistsError,
    VertexNotFoundError,
)
from .frontier import HeapFrontier, IndexedFrontier
from .generator import generate_graph
from .graph import Digraph
from .logger import Logger, NoopLogger, StdLogger
from .path import reconstruct_path

__version__ = "0.1.0"

__all__ = [
    "Digraph",
    "is_strongly_connected",
    "reachable_from",
    "find_shortest_paths",
    "DijkstraSolver",
    "DijkstraConfig",
    "ShortestPaths",
    "HeapFrontier",
    "IndexedFrontier",
    "reconstruct_path",
    "generate_graph",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "DigraphError",
    "VertexNotFoundError",
    "VertexAlreadyExistsError",
    "EdgeNotFoundError",
    "EdgeAlreadyExistsError",
    "ConfigError",
    "AlgorithmError",
]
