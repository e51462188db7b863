from dataclasses import dataclass


# Graph geometry types consumed by the search engine
@dataclass(frozen=True)
class Point:
    id: int
    x: float  # opaque to the engine, read only by distance functions
    y: float


@dataclass(frozen=True)
class Edge:
    source: int
    target: int

    def endpoints(self) -> tuple[int, int]:
        return self.source, self.target


@dataclass(frozen=True)
class Neighbor:
    node_id: int
    weight: float


Graph = dict[int, list[Neighbor]]
