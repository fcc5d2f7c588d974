"""
Typed errors raised by the weighted graph and its algorithms.

Every error aborts only the failing call; mutating operations validate
before they mutate, so the graph keeps its last valid state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class GraphError(Exception):
    """Base error for graph construction and traversal.

    Attributes:
        message: Human-readable error description
    """

    message: str

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


@dataclass
class DuplicateVertexError(GraphError, ValueError):
    """The vertex is already present in the graph."""

    vertex: Any = None


@dataclass
class InvalidVertexError(GraphError, ValueError):
    """An edge endpoint or search endpoint is not in the graph."""

    vertex: Any = None


@dataclass
class InvalidWeightError(GraphError, ValueError):
    """The edge weight is not an int or is rejected by the weight policy."""

    weight: Any = None


@dataclass
class UnreachableVertexError(GraphError, LookupError):
    """No path leads from start to end.

    Attributes:
        start: Vertex the shortest-path run started from
        end: Vertex the path was requested for
    """

    start: Any = None
    end: Any = None
