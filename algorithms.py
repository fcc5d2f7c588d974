"""
Algorithm interfaces for graph traversal.

Keeps the traversal algorithms separate from graph storage and observer
registration. Engines only see the read-only Graph interface plus the
observers to notify.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence, Tuple

from graph import Graph, Vertex
from observers import Cost, GraphAlgorithmObserver


class SearchEngine(ABC):
    """
    Interface for an unweighted start -> end search (BFS, DFS).
    """

    @abstractmethod
    def search(
        self,
        graph: Graph,
        start: Vertex,
        end: Vertex,
        observers: Sequence[GraphAlgorithmObserver] = (),
    ) -> bool:
        """
        Search from start until end is taken off the frontier.

        Returns:
            True if end was reached (search-over was notified), False if the
            frontier ran dry first.
        """
        raise NotImplementedError


class DijkstraEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_path_costs(
        self,
        graph: Graph,
        source: Vertex,
        observers: Sequence[GraphAlgorithmObserver] = (),
    ) -> Dict[Vertex, Cost]:
        """
        Compute shortest-path costs from source to every vertex.

        Returns:
            Mapping dest -> path_cost(source -> dest); math.inf if unreached.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self,
        graph: Graph,
        source: Vertex,
        observers: Sequence[GraphAlgorithmObserver] = (),
    ) -> Tuple[Dict[Vertex, Cost], Dict[Vertex, Vertex]]:
        """
        Compute shortest-path costs plus the predecessor chain for each dest.

        Returns:
            (cost, predecessor) where predecessor maps source to itself and
            omits every unreached vertex.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_path(
        self,
        graph: Graph,
        start: Vertex,
        end: Vertex,
        observers: Sequence[GraphAlgorithmObserver] = (),
    ) -> List[Vertex]:
        """
        Least-cost path from start to end, start first and end last.

        Raises:
            UnreachableVertexError: if end cannot be reached from start.
        """
        raise NotImplementedError
