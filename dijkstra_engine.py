"""
Linear-scan DijkstraEngine implementation.

Selects the next vertex to finish by scanning the graph's vertices in
insertion order, so ties go to the first-inserted vertex and paths are
reproducible. Runs over the whole graph; it never stops early at a target.
"""

from typing import Dict, List, Sequence, Set, Tuple
import logging
import math

from algorithms import DijkstraEngine
from errors import UnreachableVertexError
from graph import Graph, Vertex
from observers import Cost, GraphAlgorithmObserver, notify_all

logger = logging.getLogger(__name__)


def reconstruct_path(
    prev: Dict[Vertex, Vertex], start: Vertex, end: Vertex
) -> List[Vertex]:
    """
    Walk predecessors from end back to start and return the path start -> end.

    Raises:
        UnreachableVertexError: if the chain breaks before reaching start.
    """
    path = [end]
    vertex = end
    while vertex != start:
        if vertex not in prev:
            raise UnreachableVertexError(
                f"No path from {start!r} to {end!r}", start=start, end=end
            )
        vertex = prev[vertex]
        path.append(vertex)
    path.reverse()
    return path


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra with minimum selection by linear scan.

    Complexity:
        O(V^2 + E) over every vertex of the graph.
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_edges_examined = 0
        self.last_relaxed = 0

    def shortest_path_costs(
        self,
        graph: Graph,
        source: Vertex,
        observers: Sequence[GraphAlgorithmObserver] = (),
    ) -> Dict[Vertex, Cost]:
        """
        Compute only the cost map; unreached vertices keep math.inf.
        """
        cost, _ = self.shortest_paths(graph, source, observers)
        return cost

    def shortest_paths(
        self,
        graph: Graph,
        source: Vertex,
        observers: Sequence[GraphAlgorithmObserver] = (),
    ) -> Tuple[Dict[Vertex, Cost], Dict[Vertex, Vertex]]:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        Every vertex is finished exactly once, in non-decreasing cost order,
        and each finish is pushed to the observers with its final cost.
        Vertices the source cannot reach are finished last with cost
        math.inf; inf + weight stays inf, so they never relax anything.
        Neighbours that are already finished are not skipped during
        relaxation; their cost is already minimal so the comparison fails.
        """
        self.last_edges_examined = 0
        self.last_relaxed = 0

        notify_all(observers, "on_dijkstra_begun")

        vertices = list(graph.vertices())
        cost: Dict[Vertex, Cost] = {v: math.inf for v in vertices}
        cost[source] = 0
        prev: Dict[Vertex, Vertex] = {source: source}
        finished: Set[Vertex] = set()

        logger.debug("Dijkstra begun from %r over %d vertices", source, len(vertices))

        while len(finished) < len(vertices):
            u = None
            for v in vertices:
                if v in finished:
                    continue
                # Strict comparison: the first-encountered vertex wins ties
                if u is None or cost[v] < cost[u]:
                    u = v

            finished.add(u)
            notify_all(observers, "on_dijkstra_vertex_finished", u, cost[u])

            for v, w in graph.outgoing(u).items():
                self.last_edges_examined += 1
                alt = cost[u] + w
                if alt < cost[v]:
                    cost[v] = alt
                    prev[v] = u
                    self.last_relaxed += 1

        return cost, prev

    def shortest_path(
        self,
        graph: Graph,
        start: Vertex,
        end: Vertex,
        observers: Sequence[GraphAlgorithmObserver] = (),
    ) -> List[Vertex]:
        cost, prev = self.shortest_paths(graph, start, observers)
        path = reconstruct_path(prev, start, end)
        logger.debug("Dijkstra path %r at cost %s", path, cost[end])

        notify_all(observers, "on_dijkstra_over", path)
        logger.info(
            "Dijkstra found a %d-vertex path from %r to %r at cost %s",
            len(path),
            start,
            end,
            cost[end],
        )
        return path
