"""
Date and timestamp parsing for upstream text fields.
Timestamps are only accepted when they carry a UTC offset.
"""
import re
from datetime import date, datetime


# YYYY-MM-DDTHH:MM:SS[.f...](Z|+HH:MM|-HH:MM)
_RFC3339 = re.compile(
    r"(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})",
    re.IGNORECASE | re.ASCII,
)
_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def parse_rfc3339(ts: str) -> datetime:
    """
    Parse an RFC 3339 timestamp such as '2022-03-20T15:00:00Z'.

    Fractions of a second may have any number of digits; anything past
    microseconds is truncated.

    Args:
        ts: Timestamp string.

    Returns:
        Timezone-aware datetime with the offset given in the string.

    Raises:
        ValueError: if the string is not a complete, offset-qualified timestamp.
    """
    match = _RFC3339.fullmatch(ts) if isinstance(ts, str) else None
    if match is None:
        raise ValueError(f"not an RFC 3339 timestamp: {ts!r}")
    seconds, fraction, offset = match.groups()
    if offset in ("Z", "z"):
        offset = "+00:00"
    fraction = (fraction or "0")[:6].ljust(6, "0")
    return datetime.fromisoformat(f"{seconds}.{fraction}{offset}")


def parse_calendar_date(value: str) -> date:
    """Parse a 'YYYY-MM-DD' calendar date, raising ValueError otherwise."""
    if not isinstance(value, str) or not _DATE.fullmatch(value):
        raise ValueError(f"not a calendar date: {value!r}")
    return date.fromisoformat(value)
