# io/search_logging.py
import json
import logging
import sys

from city_search.search.hooks import NoopHooks


def _default_json_logger(name="city_search", level="INFO", stream=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stderr)

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
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.propagate = False
    logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured logs for ingestion and queries, one JSON object per line.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or _default_json_logger(level=level)
        self._queries = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    @staticmethod
    def _shape_ref(ref):
        base = {"x": getattr(ref, "x", None), "y": getattr(ref, "y", None)}
        if hasattr(ref, "name"):
            base["name"] = ref.name
        return base

    # --------------------------------------------------------

    def ingest_end(self, *, points, duplicates, source):
        self._emit("INFO", "ingest_end", points=points, source=source)
        for name in duplicates:
            # find_by_name silently resolves to the first one
            self._emit("WARNING", "duplicate_name", name=name, source=source)

    def query_start(self, *, reference, radius, norm):
        if self.debug:
            self._emit(
                "DEBUG", "query_start", ref=self._shape_ref(reference), radius=radius, norm=norm.name
            )

    def query_end(self, *, reference, radius, norm, matches, wall_ms):
        self._queries += 1
        self._emit(
            "INFO",
            "query_end",
            ref=self._shape_ref(reference),
            radius=radius,
            norm=norm.name,
            matches=matches,
            seq=self._queries,
            wall_ms=round(wall_ms, 3),
        )

    def error(self, *, op, exc, **extra):
        self._emit("ERROR", f"{op}_error", error=str(exc), kind=type(exc).__name__, **extra)
