"""Unit tests for functions defined in utils.quota module."""

import pytest
from pytest_mock import MockerFixture

from quota.quota_exceed_error import QuotaExceedError
from quota.quota_ledger import QuotaLedger
from utils.quota import get_quota_ledger, quota_headers, reserve_words


def test_get_quota_ledger(mocker: MockerFixture) -> None:
    """Test that the ledger is taken from the application state."""
    quota_ledger = QuotaLedger()
    request = mocker.Mock()
    request.app.state.quota_ledger = quota_ledger

    assert get_quota_ledger(request) is quota_ledger


def test_quota_headers() -> None:
    """Test the header with number of remaining words."""
    assert quota_headers(42) == {"X-RateLimit-Remaining": "42"}
    assert quota_headers(0) == {"X-RateLimit-Remaining": "0"}


def test_reserve_words_admitted(mocker: MockerFixture, fake_clock) -> None:
    """Test that admitted reservation is returned and counted."""
    words_reserved = mocker.patch("metrics.words_reserved_total")
    rejections = mocker.patch("metrics.quota_rejections_total")

    quota_ledger = QuotaLedger(daily_word_limit=100, clock=fake_clock)
    token = quota_ledger.issue("foo@example.com")

    reservation = reserve_words(quota_ledger, token, "foo@example.com", 40)
    assert reservation.admitted
    assert reservation.remaining == 60

    words_reserved.inc.assert_called_once_with(40)
    rejections.inc.assert_not_called()


def test_reserve_words_rejected(mocker: MockerFixture, fake_clock) -> None:
    """Test that rejected reservation raises QuotaExceedError."""
    words_reserved = mocker.patch("metrics.words_reserved_total")
    rejections = mocker.patch("metrics.quota_rejections_total")

    quota_ledger = QuotaLedger(daily_word_limit=100, clock=fake_clock)
    token = quota_ledger.issue("foo@example.com")
    reserve_words(quota_ledger, token, "foo@example.com", 99)
    words_reserved.reset_mock()

    with pytest.raises(QuotaExceedError) as exc_info:
        reserve_words(quota_ledger, token, "foo@example.com", 2)

    assert exc_info.value.owner == "foo@example.com"
    assert exc_info.value.requested == 2
    assert exc_info.value.remaining == 1

    rejections.inc.assert_called_once()
    words_reserved.inc.assert_not_called()
    assert quota_ledger.usage(token).used == 99
