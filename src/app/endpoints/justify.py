"""Handler for REST API call to justify text."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

import constants
from authentication import get_auth_dependency
from authentication.interface import AuthTuple
from configuration import configuration
from justification.justifier import count_words, justify
from models.responses import (
    BadRequestResponse,
    QuotaExceededResponse,
    UnauthorizedResponse,
)
from quota.quota_exceed_error import QuotaExceedError
from quota.quota_ledger import QuotaLedger
from utils.quota import get_quota_ledger, quota_headers, reserve_words

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["justify"])
auth_dependency = get_auth_dependency()


justify_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Justified text",
        "content": {constants.TEXT_PLAIN_CONTENT_TYPE: {}},
    },
    400: {
        "description": "Request body is not usable text",
        "model": BadRequestResponse,
    },
    401: {
        "description": "Missing or invalid access token",
        "model": UnauthorizedResponse,
    },
    402: {
        "description": "Daily word limit exceeded",
        "model": QuotaExceededResponse,
    },
}

# the body is read from the raw request, describe it for /docs endpoint
text_request_body: dict[str, Any] = {
    "requestBody": {
        "required": True,
        "content": {
            constants.TEXT_PLAIN_CONTENT_TYPE: {
                "schema": {"type": "string"},
                "example": "Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
            }
        },
    }
}


async def read_text_body(request: Request) -> str:
    """Read the request body as UTF-8 text/plain.

    Raises:
        HTTPException: With status 400 if the body is empty, is not
            text/plain or is not valid UTF-8.
    """
    content_type = request.headers.get("Content-Type", "")
    media_type = content_type.split(";")[0].strip().lower()
    body = await request.body()

    if media_type != constants.TEXT_PLAIN_CONTENT_TYPE or not body:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=BadRequestResponse(
                "Request body must be non-empty text/plain"
            ).dump_detail(),
        )

    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=BadRequestResponse(
                "Request body is not valid UTF-8 text"
            ).dump_detail(),
        ) from e


@router.post(
    "/justify",
    response_class=PlainTextResponse,
    responses=justify_responses,
    openapi_extra=text_request_body,
)
async def justify_endpoint_handler(
    request: Request,
    auth: Annotated[AuthTuple, Depends(auth_dependency)],
    quota_ledger: Annotated[QuotaLedger, Depends(get_quota_ledger)],
) -> PlainTextResponse:
    """
    Handle request to the /justify endpoint.

    Words in the request body are charged to the daily quota of the access
    token. When the quota admits them, the text is justified to the
    configured line width. The number of words still available today is
    sent in the X-RateLimit-Remaining header in both cases.

    Returns:
        PlainTextResponse: The justified text.
    """
    token, owner = auth
    logger.info("Response to /api/justify endpoint for %s", owner)

    text = await read_text_body(request)
    word_count = count_words(text)
    if word_count == 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=BadRequestResponse("Request body contains no words").dump_detail(),
        )

    try:
        reservation = reserve_words(quota_ledger, token, owner, word_count)
    except QuotaExceedError as e:
        raise HTTPException(
            status_code=status.HTTP_402_PAYMENT_REQUIRED,
            detail=QuotaExceededResponse(
                daily_limit=quota_ledger.daily_word_limit,
                remaining_words=e.remaining,
                requested_words=word_count,
            ).dump_detail(),
            headers=quota_headers(e.remaining),
        ) from e

    line_width = configuration.justification_configuration.line_width
    logger.debug("Justifying %d words to width %d", word_count, line_width)
    return PlainTextResponse(
        justify(text, line_width),
        headers=quota_headers(reservation.remaining),
    )
