"""
Concrete directed, weighted graph with observable traversal algorithms.

Implements the Graph interface with a vertex -> (neighbour -> weight)
mapping and runs BFS, DFS and Dijkstra through the engines, notifying the
registered observers as they progress.
"""

from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Tuple
import logging

from algorithms import DijkstraEngine, SearchEngine
from dijkstra_engine import SimpleDijkstraEngine
from errors import DuplicateVertexError, InvalidVertexError, InvalidWeightError
from graph import Graph, Vertex
from observers import GraphAlgorithmObserver
from search_engine import BreadthFirstSearchEngine, DepthFirstSearchEngine

logger = logging.getLogger(__name__)


class WeightPolicy(Enum):
    """
    Which edge weights add_edge accepts.

    POSITIVE: weight > 0; zero-weight edges are rejected.
    NON_NEGATIVE: weight >= 0; zero-weight edges are allowed.
    """

    POSITIVE = "positive"
    NON_NEGATIVE = "non_negative"

    def accepts(self, weight: int) -> bool:
        if self is WeightPolicy.NON_NEGATIVE:
            return weight >= 0
        return weight > 0


# Policy used by graphs that do not pick one explicitly.
DEFAULT_WEIGHT_POLICY: WeightPolicy = WeightPolicy.POSITIVE


def set_default_weight_policy(policy: WeightPolicy) -> None:
    """Set the weight policy for graphs created without an explicit one."""
    global DEFAULT_WEIGHT_POLICY
    DEFAULT_WEIGHT_POLICY = policy


class WeightedGraph(Graph):
    """
    Directed, weighted graph that never stores duplicate vertices.

    Vertices and edges keep insertion order, which fixes the visit order of
    BFS/DFS and the tie-breaking of Dijkstra. The graph holds no traversal
    state between calls.
    """

    def __init__(
        self,
        weight_policy: Optional[WeightPolicy] = None,
        bfs_engine: Optional[SearchEngine] = None,
        dfs_engine: Optional[SearchEngine] = None,
        dijkstra_engine: Optional[DijkstraEngine] = None,
    ) -> None:
        self._adj: Dict[Vertex, Dict[Vertex, int]] = {}
        self._observers: List[GraphAlgorithmObserver] = []
        self._weight_policy = (
            weight_policy if weight_policy is not None else DEFAULT_WEIGHT_POLICY
        )
        self._bfs_engine = bfs_engine or BreadthFirstSearchEngine()
        self._dfs_engine = dfs_engine or DepthFirstSearchEngine()
        self._dijkstra_engine = dijkstra_engine or SimpleDijkstraEngine()

    @property
    def weight_policy(self) -> WeightPolicy:
        return self._weight_policy

    # --- Observers ------------------------------------------------------------

    def add_observer(self, observer: GraphAlgorithmObserver) -> None:
        """Register observer; notifications follow registration order."""
        self._observers.append(observer)

    @property
    def observers(self) -> Tuple[GraphAlgorithmObserver, ...]:
        return tuple(self._observers)

    # --- Mutation API ---------------------------------------------------------

    def add_vertex(self, vertex: Vertex) -> None:
        """
        Add vertex with no outgoing edges.

        Raises:
            DuplicateVertexError: if vertex is already in the graph.
        """
        if vertex in self._adj:
            raise DuplicateVertexError(
                f"Vertex already in graph: {vertex!r}", vertex=vertex
            )
        self._adj[vertex] = {}
        logger.debug("Added vertex %r", vertex)

    def contains_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._adj

    def add_edge(self, src: Vertex, dst: Vertex, weight: int) -> None:
        """
        Add or update the directed edge src -> dst.

        Both vertices must already be in the graph.

        Raises:
            InvalidVertexError: if src or dst is not in the graph.
            InvalidWeightError: if weight is not an int or the weight policy
                rejects it.
        """
        self._require_vertex(src)
        self._require_vertex(dst)
        if (
            isinstance(weight, bool)
            or not isinstance(weight, int)
            or not self._weight_policy.accepts(weight)
        ):
            raise InvalidWeightError(
                f"Invalid weight {weight!r} for edge {src!r} -> {dst!r} "
                f"under {self._weight_policy.value} policy",
                weight=weight,
            )
        self._adj[src][dst] = weight
        logger.debug("Added edge %r -> %r (%d)", src, dst, weight)

    def get_weight(self, src: Vertex, dst: Vertex) -> Optional[int]:
        """
        Weight of the edge src -> dst, or None if there is no such edge.

        Raises:
            InvalidVertexError: if src or dst is not in the graph.
        """
        self._require_vertex(src)
        self._require_vertex(dst)
        return self._adj[src].get(dst)

    def _require_vertex(self, vertex: Vertex) -> None:
        if vertex not in self._adj:
            raise InvalidVertexError(
                f"Vertex not in graph: {vertex!r}", vertex=vertex
            )

    # --- Graph interface ------------------------------------------------------

    def vertices(self) -> Iterable[Vertex]:
        return self._adj.keys()

    def outgoing(self, vertex: Vertex) -> Mapping[Vertex, int]:
        self._require_vertex(vertex)
        return dict(self._adj[vertex])

    def vertex_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self._adj.values())

    # --- Algorithms -----------------------------------------------------------

    def do_bfs(self, start: Vertex, end: Vertex) -> bool:
        """
        Breadth-first search from start, stopping once end is dequeued.

        Observers get on_bfs_begun, then on_visit for each visited vertex,
        then on_search_over if end is reached. If end is unreachable the
        search ends silently and returns False.
        """
        self._require_vertex(start)
        self._require_vertex(end)
        return self._bfs_engine.search(self, start, end, self.observers)

    def do_dfs(self, start: Vertex, end: Vertex) -> bool:
        """
        Depth-first search from start, stopping once end is popped.

        Same notifications and return value as do_bfs.
        """
        self._require_vertex(start)
        self._require_vertex(end)
        return self._dfs_engine.search(self, start, end, self.observers)

    def do_dijkstra(self, start: Vertex, end: Vertex) -> List[Vertex]:
        """
        Run Dijkstra from start over the whole graph.

        Observers get on_dijkstra_begun, on_dijkstra_vertex_finished for
        every vertex, then on_dijkstra_over with the least-cost path from
        start to end, which is also returned.

        Raises:
            InvalidVertexError: if start or end is not in the graph.
            UnreachableVertexError: if end cannot be reached from start;
                on_dijkstra_over is not sent in that case.
        """
        self._require_vertex(start)
        self._require_vertex(end)
        return self._dijkstra_engine.shortest_path(self, start, end, self.observers)
