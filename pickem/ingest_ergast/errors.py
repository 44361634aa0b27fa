"""
Failure kinds raised by the race-data layer.

Every failure is classified and propagated; "no data yet" is never an
error and is signalled by an empty list or None instead.
"""


class RaceDataError(Exception):
    """Base class for all race-data failures."""


class TransportError(RaceDataError):
    """The request could not be sent or the connection failed."""


class RequestTimeoutError(TransportError):
    """The request was abandoned because its timeout expired."""


class UpstreamError(RaceDataError):
    """The upstream API answered with a non-success status."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"upstream returned HTTP {status_code} for {url}")


class DecodeError(RaceDataError):
    """The body is not JSON or does not have the expected shape."""


class ValidationError(RaceDataError):
    """Decoded data breaks a structural invariant (counts, ranges, formats)."""


class UnsupportedPaginationError(RaceDataError):
    """The schedule spans more than one page, which is not handled."""

    def __init__(self, season: str, total: int, limit: int) -> None:
        self.season = season
        self.total = total
        self.limit = limit
        super().__init__(
            f"paginated schedule for season {season} is not supported "
            f"(total={total}, limit={limit})"
        )
