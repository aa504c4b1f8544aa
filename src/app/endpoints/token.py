"""Handler for REST API call to issue access tokens."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends

import metrics
from models.requests import TokenRequest
from models.responses import TokenResponse
from quota.quota_ledger import QuotaLedger
from utils.quota import get_quota_ledger

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["token"])


token_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Access token issued",
        "model": TokenResponse,
    },
    422: {
        "description": "E-mail address is missing or malformed",
    },
}


@router.post("/token", responses=token_responses)
async def token_endpoint_handler(
    token_request: TokenRequest,
    quota_ledger: Annotated[QuotaLedger, Depends(get_quota_ledger)],
) -> TokenResponse:
    """
    Handle request to the /token endpoint.

    Issue a new opaque access token bound to the e-mail address from the
    request. Every call issues a different token, even for the same address.

    Returns:
        TokenResponse: The newly issued access token.
    """
    logger.info("Response to /api/token endpoint")

    token = quota_ledger.issue(token_request.email)
    metrics.access_tokens_issued_total.inc()
    return TokenResponse(token=token)
