import math
from collections.abc import Callable

from polypath.domain.entities.geography import Point

DistanceFn = Callable[[Point, Point], float]


def euclidean(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def manhattan(a: Point, b: Point) -> float:
    return abs(b.x - a.x) + abs(b.y - a.y)
