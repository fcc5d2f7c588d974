"""
Unit tests for the BFS and DFS engines, driven through WeightedGraph.
"""

import pytest

from observers import RecordingObserver
from search_engine import BreadthFirstSearchEngine, DepthFirstSearchEngine
from weighted_graph import WeightedGraph


def _diamond():
    """
    A -> B, A -> C, B -> D, C -> D, D -> E (all weight 1).
    """
    g = WeightedGraph()
    for v in "ABCDE":
        g.add_vertex(v)
    for u, v in [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D"), ("D", "E")]:
        g.add_edge(u, v, 1)
    return g


def _observed(g):
    rec = RecordingObserver()
    g.add_observer(rec)
    return rec


def test_bfs_visits_level_by_level_and_stops_at_end():
    g = _diamond()
    rec = _observed(g)

    assert g.do_bfs("A", "E") is True

    assert rec.visited() == ["A", "B", "C", "D"]
    assert rec.names() == ["bfs_begun"] + ["visit"] * 4 + ["search_over"]


def test_dfs_follows_last_pushed_neighbour_first():
    g = _diamond()
    rec = _observed(g)

    assert g.do_dfs("A", "E") is True

    # C was pushed after B, so it is explored first
    assert rec.visited() == ["A", "C", "D"]
    assert rec.names() == ["dfs_begun"] + ["visit"] * 3 + ["search_over"]


def test_end_vertex_is_never_reported_as_visited():
    g = _diamond()
    rec = _observed(g)

    g.do_bfs("A", "D")
    assert "D" not in rec.visited()
    assert rec.names()[-1] == "search_over"


@pytest.mark.parametrize("method, begun", [("do_bfs", "bfs_begun"), ("do_dfs", "dfs_begun")])
def test_start_equal_to_end_ends_without_visits(method, begun):
    g = _diamond()
    rec = _observed(g)

    assert getattr(g, method)("C", "C") is True
    assert rec.names() == [begun, "search_over"]


@pytest.mark.parametrize("method, begun", [("do_bfs", "bfs_begun"), ("do_dfs", "dfs_begun")])
def test_unreachable_end_returns_silently(method, begun):
    g = WeightedGraph()
    for v in "ABC":
        g.add_vertex(v)
    g.add_edge("A", "B", 1)
    g.add_edge("B", "A", 1)
    rec = _observed(g)

    assert getattr(g, method)("A", "C") is False

    assert rec.names() == [begun, "visit", "visit"]
    assert "search_over" not in rec.names()


def test_search_respects_edge_direction():
    g = WeightedGraph()
    g.add_vertex("A")
    g.add_vertex("B")
    g.add_edge("B", "A", 1)
    rec = _observed(g)

    assert g.do_dfs("A", "B") is False
    assert rec.visited() == ["A"]


def test_cycles_do_not_revisit():
    g = WeightedGraph()
    for v in "ABCD":
        g.add_vertex(v)
    for u, v in [("A", "B"), ("B", "C"), ("C", "A"), ("C", "B")]:
        g.add_edge(u, v, 1)
    rec = _observed(g)

    assert g.do_bfs("A", "D") is False
    assert rec.visited() == ["A", "B", "C"]


def test_search_is_reentrant():
    g = _diamond()
    rec = _observed(g)

    g.do_bfs("A", "E")
    first = list(rec.events)
    rec.clear()
    g.do_bfs("A", "E")

    assert rec.events == first


def test_search_over_notified_at_most_once_for_both_searches():
    g = _diamond()
    rec = _observed(g)

    g.do_bfs("A", "E")
    g.do_dfs("A", "E")

    names = rec.names()
    bfs_part = names[: names.index("dfs_begun")]
    dfs_part = names[names.index("dfs_begun"):]
    assert bfs_part.count("search_over") == 1
    assert dfs_part.count("search_over") == 1


def test_engine_counters():
    g = _diamond()
    engine = BreadthFirstSearchEngine()

    assert engine.search(g, "A", "E") is True
    assert engine.last_visited == 4
    # A, B, C, D, D (duplicate, skipped), E
    assert engine.last_frontier_pops == 6


def test_engines_work_without_observers():
    g = _diamond()
    assert DepthFirstSearchEngine().search(g, "A", "E") is True
    assert BreadthFirstSearchEngine().search(g, "E", "A") is False
