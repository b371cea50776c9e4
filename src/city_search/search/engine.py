# search/engine.py
import math
import time

import numpy as np

from city_search.app.protocols import Locatable
from city_search.domain.metrics import Norm, distance
from city_search.domain.results import Match, QueryResult
from city_search.domain.store import PointStore
from city_search.errors import InvalidArgument
from city_search.search.hooks import NoopHooks, SearchHooks


def _check_radius(radius) -> float:
    try:
        r = float(radius)
    except (TypeError, ValueError):
        raise InvalidArgument(f"radius must be a number, got {radius!r}") from None
    if math.isnan(r) or r < 0:
        raise InvalidArgument(f"radius must be >= 0, got {radius!r}")
    return r


class SearchEngine:
    """
    Stateless radius search over a PointStore.

    Every query scans the whole store; nothing is cached between calls, so the
    same query on the same store always gives the same result.
    """

    def __init__(self, hooks: SearchHooks | None = None):
        self._hooks = hooks or NoopHooks()

    def query(
        self, store: PointStore, reference: Locatable, radius: float, norm=Norm.L2
    ) -> QueryResult:
        try:
            r = _check_radius(radius)
            norm = Norm.coerce(norm)
        except InvalidArgument as exc:
            self._hooks.error(op="query", exc=exc, radius=radius, norm=norm)
            raise
        t0 = time.perf_counter()
        self._hooks.query_start(reference=reference, radius=r, norm=norm)

        cities = store.snapshot()
        xs, ys = store.coordinates()
        d = distance(norm, float(reference.x), float(reference.y), xs, ys)
        hits = np.flatnonzero(d <= r)
        # stable: equal distances stay in insertion order
        order = hits[np.argsort(d[hits], kind="stable")]
        result = QueryResult(tuple(Match(float(d[i]), cities[i]) for i in order))

        self._hooks.query_end(
            reference=reference,
            radius=r,
            norm=norm,
            matches=len(result),
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return result

    @staticmethod
    def count_north(results: QueryResult, reference: Locatable) -> int:
        """North is decreasing y."""
        return sum(1 for m in results if m.city.y < reference.y)
