import io
import json
import logging

import pytest

from city_search.domain.entities.geography import Point
from city_search.domain.store import PointStore
from city_search.errors import InvalidArgument
from city_search.io.search_logging import SearchLogging, _default_json_logger
from city_search.search.engine import SearchEngine


@pytest.fixture
def captured():
    buf = io.StringIO()
    name = "city_search.test"
    logging.getLogger(name).handlers.clear()
    logger = _default_json_logger(name=name, level="DEBUG", stream=buf)
    yield logger, buf
    logger.handlers.clear()


def _records(buf):
    return [json.loads(line) for line in buf.getvalue().splitlines()]


def test_ingest_and_query_logs_are_json(captured):
    logger, buf = captured
    hooks = SearchLogging(run_id="t-1", logger=logger)
    store = PointStore.ingest(["Oslo", "0-0", "Oslo", "1-1"], source="mem", hooks=hooks)
    SearchEngine(hooks=hooks).query(store, Point(0.0, 0.0), 2.0, 1)

    recs = _records(buf)
    assert [r["msg"] for r in recs] == ["ingest_end", "duplicate_name", "query_end"]
    assert recs[0]["points"] == 2 and recs[0]["run_id"] == "t-1"
    assert recs[1]["level"] == "WARNING" and recs[1]["name"] == "Oslo"
    assert recs[2]["norm"] == "LINF" and recs[2]["matches"] == 2 and recs[2]["seq"] == 1


def test_debug_adds_query_start(captured):
    logger, buf = captured
    hooks = SearchLogging(logger=logger, debug=True)
    SearchEngine(hooks=hooks).query(PointStore(), Point(1.0, 2.0), 1.0)
    assert [r["msg"] for r in _records(buf)] == ["query_start", "query_end"]


def test_errors_are_logged(captured):
    logger, buf = captured
    hooks = SearchLogging(logger=logger)
    with pytest.raises(InvalidArgument):
        SearchEngine(hooks=hooks).query(PointStore(), Point(0.0, 0.0), -1.0)
    (rec,) = _records(buf)
    assert rec["level"] == "ERROR" and rec["msg"] == "query_error"
    assert rec["kind"] == "InvalidArgument"
