# tests/app/test_report.py
import math

from polypath.app.report import describe_path, format_stats, highlight_edges, path_edges
from polypath.domain.entities.geography import Edge
from polypath.search.engine import SearchResult


def test_path_edges_pairs_consecutive_nodes():
    assert path_edges([0, 9, 8, 1]) == [(0, 9), (9, 8), (8, 1)]
    assert path_edges([4]) == []
    assert path_edges([]) == []


def test_highlight_edges_matches_either_orientation():
    edges = [Edge(0, 1), Edge(9, 0), Edge(9, 8), Edge(8, 1), Edge(2, 1)]
    assert highlight_edges([0, 9, 8, 1], edges) == [Edge(9, 0), Edge(9, 8), Edge(8, 1)]


def test_describe_path():
    assert describe_path([0, 1, 2]) == "Path from 0 to 2: 0 -> 1 -> 2"
    assert describe_path([3]) is None
    assert describe_path([]) is None


def test_format_stats_reachable():
    r = SearchResult(path=[0, 1], cost=12.3456, nodes_explored=4, elapsed_ms=0.127)
    assert format_stats(r) == "Time: 0.13 ms\nNodes explored: 4\nTotal cost: 12.35"


def test_format_stats_unreachable_and_skipped():
    r = SearchResult(path=[], cost=math.inf, nodes_explored=2, elapsed_ms=1.0, skipped_edges=3)
    out = format_stats(r).splitlines()
    assert out[2] == "Total cost: unreachable"
    assert out[3] == "Skipped edges: 3"
