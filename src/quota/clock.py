"""Time source used by the quota ledger."""

from datetime import datetime, timedelta, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(instant: datetime) -> datetime:
    """Convert the instant to UTC, treating naive values as UTC already."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def next_midnight_utc(instant: datetime) -> datetime:
    """Return the first UTC midnight strictly after the given instant."""
    day = as_utc(instant).date() + timedelta(days=1)
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
