"""
Frontier-based BFS and DFS engines.

Both searches share one contract and differ only in the frontier discipline:
FIFO for breadth-first, LIFO for depth-first.
"""

from abc import abstractmethod
from collections import deque
from typing import Deque, List, Sequence, Set
import logging

from algorithms import SearchEngine
from graph import Graph, Vertex
from observers import GraphAlgorithmObserver, notify_all

logger = logging.getLogger(__name__)


class FrontierSearchEngine(SearchEngine):
    """
    Shared search loop; subclasses supply the frontier and begun-callback.

    A vertex is checked against end when it comes off the frontier, not when
    it is pushed. The end vertex is never marked visited and never reported
    through on_visit.
    """

    begun_callback = ""
    name = ""

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_visited = 0
        self.last_frontier_pops = 0

    @abstractmethod
    def _new_frontier(self, start: Vertex):
        raise NotImplementedError

    @abstractmethod
    def _pop(self, frontier) -> Vertex:
        raise NotImplementedError

    def search(
        self,
        graph: Graph,
        start: Vertex,
        end: Vertex,
        observers: Sequence[GraphAlgorithmObserver] = (),
    ) -> bool:
        self.last_visited = 0
        self.last_frontier_pops = 0

        notify_all(observers, self.begun_callback)
        logger.debug("%s begun from %r towards %r", self.name, start, end)

        frontier = self._new_frontier(start)
        visited: Set[Vertex] = set()

        while frontier:
            vertex = self._pop(frontier)
            self.last_frontier_pops += 1

            # Duplicates are tolerated on the frontier; this is the real filter
            if vertex in visited:
                continue

            if vertex == end:
                notify_all(observers, "on_search_over")
                logger.info(
                    "%s reached %r after %d visits", self.name, end, self.last_visited
                )
                return True

            visited.add(vertex)
            self.last_visited += 1
            notify_all(observers, "on_visit", vertex)

            for neighbor in graph.outgoing(vertex):
                if neighbor not in visited:
                    frontier.append(neighbor)

        logger.warning(
            "%s exhausted the frontier without reaching %r (%d visits)",
            self.name,
            end,
            self.last_visited,
        )
        return False


class BreadthFirstSearchEngine(FrontierSearchEngine):
    """Level-order search over a FIFO queue."""

    begun_callback = "on_bfs_begun"
    name = "BFS"

    def _new_frontier(self, start: Vertex) -> Deque[Vertex]:
        return deque([start])

    def _pop(self, frontier: Deque[Vertex]) -> Vertex:
        return frontier.popleft()


class DepthFirstSearchEngine(FrontierSearchEngine):
    """Depth-first search over a LIFO stack."""

    begun_callback = "on_dfs_begun"
    name = "DFS"

    def _new_frontier(self, start: Vertex) -> List[Vertex]:
        return [start]

    def _pop(self, frontier: List[Vertex]) -> Vertex:
        return frontier.pop()
