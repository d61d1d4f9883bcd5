"""Lenient date parsing and calendar-day helpers for time block queries."""

from datetime import date, datetime, time, timedelta

from src.thinktimer.core.exceptions import DateParseError
from src.thinktimer.models.base import to_local_naive

DATE_FORMAT = "%Y-%m-%d"
_DATE_LENGTH = len("YYYY-MM-DD")


def parse_date_string(value: str) -> datetime:
    """Parse a full timestamp or a bare date into a naive local datetime.

    Timestamps (e.g. ``2025-03-01T09:30:00Z``) are tried first; a bare
    ``YYYY-MM-DD`` parses to local midnight.

    Raises:
        DateParseError: If the value matches neither representation.
    """
    text = value.strip()
    if len(text) > _DATE_LENGTH:
        try:
            return to_local_naive(datetime.fromisoformat(text))
        except ValueError:
            pass
    try:
        return datetime.strptime(text, DATE_FORMAT)
    except ValueError as e:
        raise DateParseError(value) from e


def day_bounds(day: date | datetime) -> tuple[datetime, datetime]:
    """Return [start of the local calendar day, start of the next day)."""
    if isinstance(day, datetime):
        day = to_local_naive(day).date()
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def elapsed_seconds(start: datetime, end: datetime) -> int:
    """Whole seconds from start to end, floored.

    Either value may carry an offset (rows written by older releases store
    one); both are compared as naive local time.
    """
    return (to_local_naive(end) - to_local_naive(start)) // timedelta(seconds=1)
