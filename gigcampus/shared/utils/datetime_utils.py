"""Datetime utilities for timezone-aware operations.

Badge unlock timestamps are always timezone-aware UTC. Anything that stamps
a time goes through `utcnow()` or through a clock callable with the same
signature, so tests can pin the time.
"""

from collections.abc import Callable
from datetime import datetime, timezone

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    """Return current UTC time with timezone info.

    Returns:
        Current UTC datetime with tzinfo=timezone.utc

    Example:
        >>> from gigcampus.shared.utils.datetime_utils import utcnow
        >>> now = utcnow()
        >>> now.tzinfo is not None
        True
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """Ensure a datetime object is timezone-aware and in UTC.

    If the datetime is naive (no tzinfo), it's assumed to be UTC.
    If the datetime has a different timezone, it's converted to UTC.

    Args:
        dt: A datetime object (naive or aware)

    Returns:
        Timezone-aware datetime in UTC
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


__all__ = [
    "Clock",
    "ensure_utc",
    "utcnow",
]
