"""Shared pytest fixtures for unit and integration tests."""

from datetime import datetime, timedelta, timezone

import pytest


class FakeClock:
    """Manually driven clock to be injected into the quota ledger."""

    def __init__(self, now: datetime) -> None:
        """Initialize clock stopped at given instant."""
        self.now = now

    def __call__(self) -> datetime:
        """Return the instant the clock is stopped at."""
        return self.now

    def set(self, now: datetime) -> None:
        """Move the clock to given instant."""
        self.now = now

    def advance(self, **kwargs: float) -> None:
        """Move the clock forward, arguments are the same as for timedelta."""
        self.now += timedelta(**kwargs)


@pytest.fixture(name="fake_clock")
def fake_clock_fixture() -> FakeClock:
    """Clock stopped at 2025-06-15T14:00:00Z."""
    return FakeClock(datetime(2025, 6, 15, 14, 0, 0, tzinfo=timezone.utc))
