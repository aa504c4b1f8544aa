"""Handler for REST API call to retrieve daily word quota usage."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends

from authentication import get_auth_dependency
from authentication.interface import AuthTuple
from models.responses import UnauthorizedResponse, UsageResponse
from quota.quota_ledger import QuotaLedger
from utils.quota import get_quota_ledger

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["usage"])
auth_dependency = get_auth_dependency()


usage_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Word quota usage in the current window",
        "model": UsageResponse,
    },
    401: {
        "description": "Missing or invalid access token",
        "model": UnauthorizedResponse,
    },
}


@router.get("/usage", responses=usage_responses)
async def usage_endpoint_handler(
    auth: Annotated[AuthTuple, Depends(auth_dependency)],
    quota_ledger: Annotated[QuotaLedger, Depends(get_quota_ledger)],
) -> UsageResponse:
    """
    Handle request to the /usage endpoint.

    Returns:
        UsageResponse: Words used, daily limit and words remaining for the
        access token presented in the request.
    """
    token, owner = auth
    logger.info("Response to /api/usage endpoint for %s", owner)

    usage = quota_ledger.usage(token)
    return UsageResponse(
        used=usage.used, limit=usage.limit, remaining=usage.remaining
    )
