# search/hooks.py
from typing import Protocol

from polypath.domain.entities.geography import Edge


class SearchHooks(Protocol):
    def search_start(self, *, start_id, end_id, points, edges): ...
    def edge_skipped(self, edge: Edge, *, missing): ...
    def search_end(self, result): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def edge_skipped(self, *_, **__):
        pass

    def search_end(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
