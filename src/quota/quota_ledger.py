"""In-memory ledger of access tokens and their daily word quota.

Every issued token owns a quota window. The window is created lazily on the
first reservation or usage query and ends at the UTC midnight that follows
its creation. Once the clock reaches the end of the window, the window is
replaced by a fresh one with zero words used.

A reservation is admitted when the words already used plus the requested
words do not exceed the daily limit. Rejected reservations do not change
the window and there is no partial admission.

State is guarded by a fixed number of lock shards. A token always maps to
the same shard, so concurrent reservations for one token are serialized,
while reservations for tokens living in different shards proceed in
parallel.
"""

from datetime import datetime
from threading import Lock
from typing import Optional

import constants
from log import get_logger
from models.quota import QuotaUsage, QuotaWindow, Reservation, TokenRecord
from quota.clock import Clock, as_utc, next_midnight_utc, utc_now
from utils.access_token import generate_access_token

logger = get_logger(__name__)


class QuotaLedger:
    """Token registry with per-token daily word quota."""

    def __init__(
        self,
        daily_word_limit: int = constants.DEFAULT_DAILY_WORD_LIMIT,
        clock: Clock = utc_now,
        lock_shards: int = constants.DEFAULT_LOCK_SHARDS,
    ) -> None:
        """Initialize empty ledger."""
        if daily_word_limit <= 0:
            raise ValueError("Daily word limit must be positive")
        if lock_shards <= 0:
            raise ValueError("Number of lock shards must be positive")
        self.daily_word_limit = daily_word_limit
        self._clock = clock
        self._locks = [Lock() for _ in range(lock_shards)]
        self._tokens: dict[str, TokenRecord] = {}
        self._windows: dict[str, QuotaWindow] = {}

    def __str__(self) -> str:
        """Return textual representation of ledger instance."""
        name = type(self).__name__
        return (
            f"{name}: daily word limit: {self.daily_word_limit} "
            f"lock shards: {len(self._locks)}"
        )

    def _now(self) -> datetime:
        return as_utc(self._clock())

    def _lock_for(self, token: str) -> Lock:
        return self._locks[hash(token) % len(self._locks)]

    def issue(self, owner: str) -> str:
        """Issue a new access token for the given owner."""
        token = generate_access_token()
        record = TokenRecord(owner=owner, created_at=self._now())
        with self._lock_for(token):
            self._tokens[token] = record
        logger.info("Issued new access token for %s", owner)
        return token

    def lookup(self, token: str) -> Optional[TokenRecord]:
        """Return the record of an issued token or None for unknown token."""
        return self._tokens.get(token)

    def _current_window(self, token: str) -> QuotaWindow:
        """Return the token's window, rolling it over when it has ended.

        Must be called with the token's shard lock held.
        """
        now = self._now()
        window = self._windows.get(token)
        if window is None or now >= window.resets_at:
            if window is not None:
                logger.debug(
                    "Quota window ended at %s, starting new one", window.resets_at
                )
            window = QuotaWindow(used=0, resets_at=next_midnight_utc(now))
            self._windows[token] = window
        return window

    def reserve(self, token: str, word_count: int) -> Reservation:
        """Reserve words from the token's daily quota or reject the request.

        Args:
            token: Access token the words are charged to.
            word_count: Number of words to reserve.

        Returns:
            Reservation telling whether the words were admitted and how many
            words remain available in the current window.
        """
        if word_count < 0:
            raise ValueError(f"Word count can not be negative: {word_count}")

        with self._lock_for(token):
            window = self._current_window(token)
            remaining = self.daily_word_limit - window.used

            if window.used + word_count > self.daily_word_limit:
                logger.info(
                    "Rejected reservation of %d words, %d words remaining",
                    word_count,
                    remaining,
                )
                return Reservation(admitted=False, remaining=max(0, remaining))

            window.used += word_count
            return Reservation(
                admitted=True, remaining=self.daily_word_limit - window.used
            )

    def usage(self, token: str) -> QuotaUsage:
        """Return snapshot of the token's quota in the current window."""
        with self._lock_for(token):
            used = self._current_window(token).used
        return QuotaUsage(
            used=used,
            limit=self.daily_word_limit,
            remaining=max(0, self.daily_word_limit - used),
        )
