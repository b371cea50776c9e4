# io/reader.py
from pathlib import Path

from city_search.domain.store import PointStore
from city_search.errors import DataSourceError
from city_search.search.hooks import SearchHooks


def load_store(
    path: str | Path, *, encoding: str = "utf-8", hooks: SearchHooks | None = None
) -> PointStore:
    """Read a two-lines-per-city data file. FormatError propagates unchanged."""
    try:
        f = open(path, encoding=encoding)
    except OSError as e:
        raise DataSourceError(f"Failed to open the file {str(path)!r}: {e.strerror}") from e
    with f:
        try:
            return PointStore.ingest(f, source=str(path), hooks=hooks)
        except UnicodeDecodeError as e:
            raise DataSourceError(f"Cannot decode {str(path)!r} as {encoding}: {e}") from e
