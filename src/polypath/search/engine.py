# search/engine.py
import math
import time
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from polypath.domain.entities.geography import Edge, Graph, Neighbor, Point
from polypath.domain.metrics import DistanceFn
from polypath.errors import InvalidInputError
from polypath.search.frontier import PriorityQueue, QueueEntry
from polypath.search.hooks import NoopHooks, SearchHooks


@dataclass
class SearchResult:
    path: list[int] = field(default_factory=list)
    cost: float = math.inf
    nodes_explored: int = 0
    elapsed_ms: float = 0.0
    skipped_edges: int = 0  # edges dropped because an endpoint is unknown

    @property
    def reachable(self) -> bool:
        return math.isfinite(self.cost)

    def to_dict(self) -> dict:
        return {
            "path": list(self.path),
            "cost": self.cost if self.reachable else None,
            "reachable": self.reachable,
            "nodes_explored": self.nodes_explored,
            "elapsed_ms": self.elapsed_ms,
            "skipped_edges": self.skipped_edges,
        }


def build_adjacency(
    points: Sequence[Point],
    edges: Iterable[Edge],
    distance_fn: DistanceFn,
    *,
    hooks: SearchHooks | None = None,
) -> tuple[Graph, int]:
    """
    Undirected weighted adjacency for one query.

    Every point gets an entry, isolated ones included. Edges naming an id that
    is not among ``points`` are skipped and counted; they never raise.
    Returns (graph, skipped_edge_count).
    """
    hooks = hooks or NoopHooks()
    by_id = {p.id: p for p in points}
    graph: Graph = {p.id: [] for p in points}
    skipped = 0
    for e in edges:
        a, b = by_id.get(e.source), by_id.get(e.target)
        if a is None or b is None:
            skipped += 1
            missing = [i for i, p in ((e.source, a), (e.target, b)) if p is None]
            hooks.edge_skipped(e, missing=missing)
            continue
        w = distance_fn(a, b)
        # NaN fails both comparisons
        if not w >= 0:
            hooks.error(reason="bad_weight", source=e.source, target=e.target, weight=w)
            raise InvalidInputError(
                f"distance between {e.source} and {e.target} must be >= 0, got {w!r}"
            )
        graph[e.source].append(Neighbor(e.target, w))
        graph[e.target].append(Neighbor(e.source, w))
    return graph, skipped


class ShortestPathEngine:
    """Dijkstra over a fresh adjacency per call, early exit on the target."""

    def __init__(self, hooks: SearchHooks | None = None):
        self._hooks = hooks or NoopHooks()

    @property
    def hooks(self) -> SearchHooks:
        return self._hooks

    def find_shortest_path(
        self,
        start_id: int,
        end_id: int,
        points: Sequence[Point],
        edges: Iterable[Edge],
        distance_fn: DistanceFn,
    ) -> SearchResult:
        t0 = time.perf_counter()
        self._check_inputs(start_id, end_id, points)
        edges = list(edges)
        self._hooks.search_start(start_id=start_id, end_id=end_id, points=points, edges=edges)

        graph, skipped = build_adjacency(points, edges, distance_fn, hooks=self._hooks)

        distance = {pid: math.inf for pid in graph}
        previous: dict[int, int | None] = {pid: None for pid in graph}
        distance[start_id] = 0.0

        queue = PriorityQueue()
        queue.insert(QueueEntry(start_id, 0.0))
        visited: set[int] = set()
        explored = 0

        while not queue.is_empty():
            current = queue.extract_min()
            # target check comes before the visited check: start == end explores nothing
            if current.node_id == end_id:
                break
            if current.node_id in visited:
                continue  # stale entry
            visited.add(current.node_id)
            explored += 1

            base = distance[current.node_id]
            for nb in graph[current.node_id]:
                alt = base + nb.weight
                if alt < distance[nb.node_id]:
                    distance[nb.node_id] = alt
                    previous[nb.node_id] = current.node_id
                    queue.insert(QueueEntry(nb.node_id, alt))

        result = SearchResult(
            path=_reconstruct(previous, start_id, end_id, distance[end_id]),
            cost=distance[end_id],
            nodes_explored=explored,
            skipped_edges=skipped,
        )
        result.elapsed_ms = (time.perf_counter() - t0) * 1000
        self._hooks.search_end(result)
        return result

    def _check_inputs(self, start_id: int, end_id: int, points: Sequence[Point]) -> None:
        if not points:
            self._hooks.error(reason="no_points")
            raise InvalidInputError("point set is empty")
        ids = [p.id for p in points]
        known = set(ids)
        if len(known) != len(ids):
            dupes = sorted(i for i, n in Counter(ids).items() if n > 1)
            self._hooks.error(reason="duplicate_ids", ids=dupes)
            raise InvalidInputError(f"duplicate point ids: {dupes}")
        for role, pid in (("start", start_id), ("end", end_id)):
            if pid not in known:
                self._hooks.error(reason=f"unknown_{role}", id=pid)
                raise InvalidInputError(f"{role} id {pid!r} is not a known point")


def _reconstruct(previous: dict[int, int | None], start_id: int, end_id: int, cost: float):
    # Unreachable targets get an empty path rather than [end_id]
    if not math.isfinite(cost):
        return []
    path = [end_id]
    while path[-1] != start_id:
        path.append(previous[path[-1]])
    path.reverse()
    return path


_default_engine = ShortestPathEngine()


def find_shortest_path(
    start_id: int,
    end_id: int,
    points: Sequence[Point],
    edges: Iterable[Edge],
    distance_fn: DistanceFn,
) -> SearchResult:
    return _default_engine.find_shortest_path(start_id, end_id, points, edges, distance_fn)
