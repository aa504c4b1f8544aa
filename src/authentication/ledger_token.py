"""Manage authentication flow for FastAPI endpoints with ledger-issued tokens.

Behavior:
- Reads a bearer token from request headers via `authentication.utils.extract_user_token`.
- Refuses tokens that do not have the shape of an issued access token.
- Looks the token up in the quota ledger attached to the application.
- Returns a tuple: (token, owner) for known tokens, raises 401 otherwise.
"""

from fastapi import HTTPException, Request, status

from authentication.interface import AuthInterface, AuthTuple
from authentication.utils import extract_user_token
from log import get_logger
from models.responses import UnauthorizedResponse
from utils.access_token import check_access_token
from utils.quota import get_quota_ledger

logger = get_logger(__name__)


class LedgerTokenAuthDependency(
    AuthInterface
):  # pylint: disable=too-few-public-methods
    """AuthDependency class that accepts tokens issued by the quota ledger."""

    async def __call__(self, request: Request) -> AuthTuple:
        """Validate FastAPI Requests for authentication.

        Args:
            request: The FastAPI request object.

        Returns:
            The access token and its owner if authentication succeeds.
        """
        token = extract_user_token(request.headers)

        # malformed tokens can not be in the ledger
        record = None
        if check_access_token(token):
            record = get_quota_ledger(request).lookup(token)
        if record is None:
            logger.warning("Request with unknown access token refused")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=UnauthorizedResponse(
                    cause="Invalid or expired token"
                ).dump_detail(),
            )

        logger.debug("Authenticated request of %s", record.owner)
        return token, record.owner
