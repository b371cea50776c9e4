# city_search/domain/store.py
import math
import re
from collections import Counter
from collections.abc import Iterable

import numpy as np

from city_search.domain.entities.geography import City
from city_search.errors import FormatError
from city_search.search.hooks import NoopHooks, SearchHooks

_NUM = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
# The separator is the hyphen between two complete numbers, so "-1--2" is (-1, -2).
_COORDS = re.compile(rf"\s*(?P<x>{_NUM})\s*-\s*(?P<y>{_NUM})\s*")


def parse_coordinates(text: str, *, line_no: int = 0) -> tuple[float, float]:
    m = _COORDS.fullmatch(text)
    if m is None:
        raise FormatError("expected '<x>-<y>' coordinates", line_no=line_no, line=text)
    x, y = float(m["x"]), float(m["y"])
    if not (math.isfinite(x) and math.isfinite(y)):
        raise FormatError("coordinates must be finite", line_no=line_no, line=text)
    return x, y


def _records(lines: Iterable[str]) -> Iterable[City]:
    name, name_no = None, 0
    for no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if name is None:
            if not line:
                raise FormatError("empty city name", line_no=no, line=line)
            name, name_no = line, no
            continue
        x, y = parse_coordinates(line, line_no=no)
        yield City(name, x, y)
        name = None
    if name is not None:
        raise FormatError(
            f"incomplete record: no coordinates after {name!r}", line_no=name_no + 1
        )


class PointStore:
    """
    Ordered, read-only collection of cities, in the order they were ingested.

    Names are not required to be unique. find_by_name resolves to the first
    occurrence; duplicate_names lists the ambiguous ones.
    """

    def __init__(self, cities: Iterable[City] = ()):
        self._cities: tuple[City, ...] = tuple(cities)
        xs = np.fromiter((c.x for c in self._cities), dtype=np.float64, count=len(self._cities))
        ys = np.fromiter((c.y for c in self._cities), dtype=np.float64, count=len(self._cities))
        xs.flags.writeable = False
        ys.flags.writeable = False
        self._xs, self._ys = xs, ys

    @classmethod
    def ingest(
        cls,
        lines: Iterable[str],
        *,
        source: str | None = None,
        hooks: SearchHooks | None = None,
    ) -> "PointStore":
        """
        Build a store from alternating name / "<x>-<y>" lines.
        Any bad record raises FormatError and nothing is kept.
        """
        hooks = hooks or NoopHooks()
        try:
            store = cls(_records(lines))
        except FormatError as exc:
            hooks.error(op="ingest", exc=exc, source=source, line_no=exc.line_no)
            raise
        hooks.ingest_end(points=len(store), duplicates=store.duplicate_names, source=source)
        return store

    def __len__(self) -> int:
        return len(self._cities)

    def __iter__(self):
        return iter(self._cities)

    def snapshot(self) -> tuple[City, ...]:
        return self._cities

    def coordinates(self) -> tuple[np.ndarray, np.ndarray]:
        """Read-only (xs, ys) arrays aligned with snapshot()."""
        return self._xs, self._ys

    @property
    def duplicate_names(self) -> list[str]:
        counts = Counter(c.name for c in self._cities)
        return [n for n, k in counts.items() if k > 1]

    def find_by_name(self, name: str) -> City | None:
        for city in self._cities:
            if city.name == name:
                return city
        return None


def ingest(lines: Iterable[str], **kw) -> PointStore:
    return PointStore.ingest(lines, **kw)


def find_by_name(store: PointStore, name: str) -> City | None:
    return store.find_by_name(name)
