"""
Observer interface for graph algorithm progress.

Observers are registered on a WeightedGraph and are notified synchronously,
in registration order, while BFS, DFS and Dijkstra run. Nothing flows back
from an observer into the graph.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Sequence, Tuple, Union

from graph import Vertex

logger = logging.getLogger(__name__)

Cost = Union[int, float]  # float only for math.inf on unreached vertices


class GraphAlgorithmObserver(ABC):
    """
    Callbacks fired by the graph algorithms.

    BFS/DFS fire begun, then visit per processed vertex, then search-over if
    the end vertex is reached. Dijkstra fires begun, then vertex-finished for
    every vertex, then over with the shortest path.
    """

    @abstractmethod
    def on_bfs_begun(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def on_dfs_begun(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def on_dijkstra_begun(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def on_visit(self, vertex: Vertex) -> None:
        """Called just after a BFS/DFS marks vertex as visited."""
        raise NotImplementedError

    @abstractmethod
    def on_dijkstra_vertex_finished(self, vertex: Vertex, cost: Cost) -> None:
        """Called when vertex joins the finished set with its optimal cost."""
        raise NotImplementedError

    @abstractmethod
    def on_search_over(self) -> None:
        """Called once when BFS/DFS takes the end vertex off its frontier."""
        raise NotImplementedError

    @abstractmethod
    def on_dijkstra_over(self, path: Sequence[Vertex]) -> None:
        """Called once with the least-cost path, start first and end last."""
        raise NotImplementedError


def notify_all(
    observers: Iterable[GraphAlgorithmObserver], callback: str, *args: Any
) -> None:
    """
    Invoke callback on every observer, in order.

    Exceptions raised by an observer propagate; later observers are skipped.
    """
    for observer in observers:
        getattr(observer, callback)(*args)


@dataclass(frozen=True)
class ObserverEvent:
    """One captured notification: callback name plus its arguments."""

    name: str
    args: Tuple[Any, ...] = ()


@dataclass
class RecordingObserver(GraphAlgorithmObserver):
    """
    Observer that keeps every notification in arrival order.
    """

    events: List[ObserverEvent] = field(default_factory=list)

    def on_bfs_begun(self) -> None:
        self.events.append(ObserverEvent("bfs_begun"))

    def on_dfs_begun(self) -> None:
        self.events.append(ObserverEvent("dfs_begun"))

    def on_dijkstra_begun(self) -> None:
        self.events.append(ObserverEvent("dijkstra_begun"))

    def on_visit(self, vertex: Vertex) -> None:
        self.events.append(ObserverEvent("visit", (vertex,)))

    def on_dijkstra_vertex_finished(self, vertex: Vertex, cost: Cost) -> None:
        self.events.append(ObserverEvent("dijkstra_vertex_finished", (vertex, cost)))

    def on_search_over(self) -> None:
        self.events.append(ObserverEvent("search_over"))

    def on_dijkstra_over(self, path: Sequence[Vertex]) -> None:
        self.events.append(ObserverEvent("dijkstra_over", (list(path),)))

    # --- Query helpers -------------------------------------------------------

    def names(self) -> List[str]:
        return [e.name for e in self.events]

    def visited(self) -> List[Vertex]:
        return [e.args[0] for e in self.events if e.name == "visit"]

    def finished(self) -> List[Tuple[Vertex, Cost]]:
        """(vertex, cost) pairs in the order Dijkstra finished them."""
        return [
            (e.args[0], e.args[1])
            for e in self.events
            if e.name == "dijkstra_vertex_finished"
        ]

    def clear(self) -> None:
        self.events.clear()


class LoggingObserver(GraphAlgorithmObserver):
    """
    Observer that writes each notification to a logger.
    """

    def __init__(
        self, log: logging.Logger | None = None, level: int = logging.INFO
    ) -> None:
        self._log = log if log is not None else logger
        self._level = level

    def on_bfs_begun(self) -> None:
        self._log.log(self._level, "BFS begun")

    def on_dfs_begun(self) -> None:
        self._log.log(self._level, "DFS begun")

    def on_dijkstra_begun(self) -> None:
        self._log.log(self._level, "Dijkstra begun")

    def on_visit(self, vertex: Vertex) -> None:
        self._log.log(self._level, "Visited %r", vertex)

    def on_dijkstra_vertex_finished(self, vertex: Vertex, cost: Cost) -> None:
        self._log.log(self._level, "Finished %r at cost %s", vertex, cost)

    def on_search_over(self) -> None:
        self._log.log(self._level, "Search over")

    def on_dijkstra_over(self, path: Sequence[Vertex]) -> None:
        self._log.log(self._level, "Dijkstra over, path %r", list(path))
