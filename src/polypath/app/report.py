# app/report.py
"""Plain-data views of a SearchResult for whatever draws the graph."""

from collections.abc import Iterable, Sequence

from polypath.domain.entities.geography import Edge
from polypath.search.engine import SearchResult


def path_edges(path: Sequence[int]) -> list[tuple[int, int]]:
    return list(zip(path, path[1:]))


def highlight_edges(path: Sequence[int], edges: Iterable[Edge]) -> list[Edge]:
    """Input edges lying on the path, in either orientation."""
    on_path = {frozenset(pair) for pair in path_edges(path)}
    return [e for e in edges if frozenset(e.endpoints()) in on_path]


def describe_path(path: Sequence[int]) -> str | None:
    if len(path) < 2:
        return None
    return f"Path from {path[0]} to {path[-1]}: " + " -> ".join(str(i) for i in path)


def format_stats(result: SearchResult) -> str:
    cost = f"{result.cost:.2f}" if result.reachable else "unreachable"
    lines = [
        f"Time: {result.elapsed_ms:.2f} ms",
        f"Nodes explored: {result.nodes_explored}",
        f"Total cost: {cost}",
    ]
    if result.skipped_edges:
        lines.append(f"Skipped edges: {result.skipped_edges}")
    return "\n".join(lines)
