# io/search_logging.py
import json
import logging
import math
import sys

from polypath.search.hooks import NoopHooks


def _default_json_logger(name="polypath", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured JSON logs for shortest-path queries.
    Data-quality warnings (dangling edges) are sampled with ``sample_every``.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self._skipped = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # query lifecycle

    def search_start(self, *, start_id, end_id, points, edges):
        self._skipped = 0
        if self.debug:
            self._emit(
                "DEBUG",
                "search_start",
                start=start_id,
                end=end_id,
                points=len(points),
                edges=len(edges),
            )

    def edge_skipped(self, edge, *, missing):
        self._skipped += 1
        if (self._skipped - 1) % self.sample_every == 0:
            self._emit(
                "WARNING",
                "edge_skipped",
                source=edge.source,
                target=edge.target,
                missing=list(missing),
                skipped_so_far=self._skipped,
            )

    def search_end(self, result):
        self._emit(
            "INFO",
            "search_end",
            path=list(result.path),
            cost=result.cost if math.isfinite(result.cost) else None,
            reachable=math.isfinite(result.cost),
            nodes_explored=result.nodes_explored,
            elapsed_ms=round(result.elapsed_ms, 3),
            skipped_edges=result.skipped_edges,
        )

    def error(self, *, reason: str, **extra):
        self._emit("ERROR", "search_error", reason=reason, **extra)
