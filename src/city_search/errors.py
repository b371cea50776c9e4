# city_search/errors.py


class CitySearchError(Exception):
    """Base class for everything the library raises on purpose."""


class FormatError(CitySearchError):
    """
    A malformed or incomplete record in the ingestion source.
    line_no is 1-based; line is None when the source ended mid-record.
    """

    def __init__(self, reason: str, *, line_no: int, line: str | None = None):
        self.reason, self.line_no, self.line = reason, line_no, line
        where = f"line {line_no}"
        if line is not None:
            where += f" ({line!r})"
        super().__init__(f"{where}: {reason}")


class InvalidArgument(CitySearchError, ValueError):
    pass


class DataSourceError(CitySearchError):
    pass
