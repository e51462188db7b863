# polypath/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from polypath.config.models import AppModel
from polypath.domain.metrics import DistanceFn
from polypath.io.poly_format import PolyGraph
from polypath.io.search_logging import SearchLogging
from polypath.runtime.registries import load_graph, make_metric
from polypath.search.engine import SearchResult, ShortestPathEngine
from polypath.search.hooks import NoopHooks


@dataclass
class App:
    model: AppModel
    graph: PolyGraph
    metric: DistanceFn
    engine: ShortestPathEngine

    def query(self, start: int, end: int) -> SearchResult:
        return self.engine.find_shortest_path(
            start, end, self.graph.points, self.graph.edges, self.metric
        )

    def run(self) -> SearchResult:
        if self.model.query is None:
            raise ValueError("config has no query")
        return self.query(self.model.query.start, self.model.query.end)


def build(cfg: AppModel | Mapping, *, use_logging: bool = True, deps: dict | None = None) -> App:
    model = cfg if isinstance(cfg, AppModel) else AppModel.model_validate(cfg)

    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    return App(
        model=model,
        graph=load_graph(model.graph, deps=deps),
        metric=make_metric(model.metric),
        engine=ShortestPathEngine(hooks=hooks),
    )
