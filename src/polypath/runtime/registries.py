# runtime/registries.py
from collections.abc import Callable
from typing import Any

from polypath.config.models import (
    GraphFileModel,
    GraphSampleModel,
    GraphSourceUnion,
    GraphSyntheticModel,
    MetricEuclideanModel,
    MetricManhattanModel,
    MetricUnion,
)
from polypath.domain.metrics import DistanceFn, euclidean, manhattan
from polypath.io.poly_format import PolyGraph, read_poly, sample_graph
from polypath.io.synthetic import random_planar_graph
from polypath.sim.rng import RNGRegistry

MetricFactory = Callable[[MetricUnion], DistanceFn]
GraphFactory = Callable[[GraphSourceUnion, dict], PolyGraph]

_metric_registry: dict[str, MetricFactory] = {}
_graph_registry: dict[str, GraphFactory] = {}


# ------------------- Distance metrics ---------------------------


def register_metric(kind: str):
    def deco(fn: MetricFactory):
        _metric_registry[kind] = fn
        return fn

    return deco


def make_metric(cfg: MetricUnion) -> DistanceFn:
    try:
        factory = _metric_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown metric kind {cfg.kind!r}") from None
    return factory(cfg)


@register_metric("euclidean")
def _make_euclidean(cfg: MetricEuclideanModel):
    return euclidean


@register_metric("manhattan")
def _make_manhattan(cfg: MetricManhattanModel):
    return manhattan


# ------------------- Graph sources ---------------------------


def register_graph_source(by: str):
    def deco(fn: GraphFactory):
        _graph_registry[by] = fn
        return fn

    return deco


def load_graph(cfg: GraphSourceUnion, *, deps: dict[str, Any] | None = None) -> PolyGraph:
    """
    deps can include:
      - 'rng': RNGRegistry  # overrides the seeded registry for synthetic graphs
    """
    try:
        factory = _graph_registry[cfg.by]
    except KeyError:
        raise ValueError(f"Unknown graph source {cfg.by!r}") from None
    return factory(cfg, deps or {})


@register_graph_source("path")
def _load_file(cfg: GraphFileModel, deps):
    return read_poly(cfg.file, cfg.dialect)


@register_graph_source("sample")
def _load_sample(cfg: GraphSampleModel, deps):
    return sample_graph()


@register_graph_source("synthetic")
def _load_synthetic(cfg: GraphSyntheticModel, deps):
    reg = deps.get("rng") or RNGRegistry(cfg.seed, scenario="synthetic")
    return random_planar_graph(
        reg.stream("points"), cfg.n_points, cfg.radius, width=cfg.width, height=cfg.height
    )
