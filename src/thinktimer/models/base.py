from datetime import datetime


def local_now() -> datetime:
    """Return current local wall-clock time as a naive datetime.

    Time blocks are grouped by the user's calendar day, so timestamps are
    stored as naive local time rather than UTC.
    """
    return datetime.now()


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
