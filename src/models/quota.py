"""Models for access tokens and their daily word quota."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, NonNegativeInt


class TokenRecord(BaseModel):
    """Model representing an issued access token.

    Attributes:
        owner: Identity the token was issued to, typically an e-mail address.
        created_at: UTC instant of issuance.
    """

    model_config = ConfigDict(frozen=True)

    owner: str
    created_at: datetime


class QuotaWindow(BaseModel):
    """Daily accounting window of one access token.

    Attributes:
        used: Words admitted in this window so far.
        resets_at: Exclusive end of the window, always a UTC midnight.
    """

    used: NonNegativeInt = 0
    resets_at: datetime


class Reservation(BaseModel):
    """Outcome of a word reservation."""

    model_config = ConfigDict(frozen=True)

    admitted: bool
    remaining: int


class QuotaUsage(BaseModel):
    """Snapshot of the word quota of one access token."""

    model_config = ConfigDict(frozen=True)

    used: int
    limit: int
    remaining: int
