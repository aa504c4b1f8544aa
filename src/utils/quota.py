"""Quota handling helper functions."""

from fastapi import Request

import constants
import metrics
from log import get_logger
from models.quota import Reservation
from quota.quota_exceed_error import QuotaExceedError
from quota.quota_ledger import QuotaLedger

logger = get_logger(__name__)


def get_quota_ledger(request: Request) -> QuotaLedger:
    """Return the quota ledger owned by the application serving the request.

    Args:
        request: Incoming request, its application holds the ledger in state.

    Returns:
        The application's quota ledger.
    """
    return request.app.state.quota_ledger


def quota_headers(remaining: int) -> dict[str, str]:
    """Build response headers announcing words left in the quota window."""
    return {constants.RATE_LIMIT_REMAINING_HEADER: str(remaining)}


def reserve_words(
    quota_ledger: QuotaLedger,
    token: str,
    owner: str,
    word_count: int,
) -> Reservation:
    """Reserve words from the daily quota of the access token.

    Args:
        quota_ledger: Ledger keeping the quota of all access tokens.
        token: Access token the words are charged to.
        owner: Owner of the access token, used in error reporting.
        word_count: Number of words to reserve.

    Returns:
        Admitted reservation with the number of remaining words.

    Raises:
        QuotaExceedError: When the reservation was rejected.
    """
    reservation = quota_ledger.reserve(token, word_count)
    if not reservation.admitted:
        metrics.quota_rejections_total.inc()
        e = QuotaExceedError(owner, word_count, reservation.remaining)
        logger.error("Quota exceed: %s", e)
        raise e
    metrics.words_reserved_total.inc(word_count)
    return reservation
