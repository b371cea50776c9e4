# search/hooks.py
from collections.abc import Iterable
from typing import Protocol


class SearchHooks(Protocol):
    def ingest_end(self, *, points: int, duplicates: Iterable[str], source: str | None): ...
    def query_start(self, *, reference, radius, norm): ...
    def query_end(self, *, reference, radius, norm, matches: int, wall_ms: float): ...
    def error(self, *, op: str, exc: BaseException, **kw): ...


class NoopHooks:
    def ingest_end(self, **_):
        pass

    def query_start(self, **_):
        pass

    def query_end(self, **_):
        pass

    def error(self, **_):
        pass
