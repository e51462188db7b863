# io/synthetic.py
import numpy as np

from polypath.domain.entities.geography import Edge, Point
from polypath.io.poly_format import PolyGraph


def random_planar_graph(
    rng: np.random.Generator,
    n_points: int,
    radius: float,
    *,
    width: float = 1000.0,
    height: float = 1000.0,
) -> PolyGraph:
    """
    Uniform points in [0, width] x [0, height], joined when closer than ``radius``.
    Edges come out sorted by (source, target) with source < target.
    """
    if n_points < 1:
        raise ValueError("n_points must be >= 1")
    xy = rng.uniform((0.0, 0.0), (width, height), size=(n_points, 2))
    points = [Point(i, float(x), float(y)) for i, (x, y) in enumerate(xy)]

    diff = xy[:, None, :] - xy[None, :, :]
    d = np.hypot(diff[..., 0], diff[..., 1])
    src, dst = np.nonzero(np.triu(d < radius, k=1))
    edges = [Edge(int(a), int(b)) for a, b in zip(src, dst)]
    return PolyGraph(points=points, edges=edges)
