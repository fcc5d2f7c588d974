"""
Directed, weighted graph abstraction.

Vertices are opaque, hashable application values.
Edges are directed: u -> v with int weight.
"""

from abc import ABC, abstractmethod
from typing import Hashable, Iterable, Mapping

# Any hashable, equality-comparable value can be a vertex.
Vertex = Hashable


class Graph(ABC):
    """Directed, weighted graph over opaque vertices."""

    @abstractmethod
    def vertices(self) -> Iterable[Vertex]:
        """Return all vertices in the graph, in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, vertex: Vertex) -> Mapping[Vertex, int]:
        """
        Outgoing neighbours and edge weights for a given vertex.

        Returns: dict[Vertex, int], in edge-insertion order.
        """
        raise NotImplementedError
