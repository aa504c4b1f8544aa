"""This package contains authentication code and modules."""

from authentication.interface import AuthInterface
from authentication.ledger_token import LedgerTokenAuthDependency


def get_auth_dependency() -> AuthInterface:
    """Select the authentication dependency interface."""
    return LedgerTokenAuthDependency()
