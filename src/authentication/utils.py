"""Authentication utility functions."""

from fastapi import HTTPException, status
from starlette.datastructures import Headers

import constants
from models.responses import UnauthorizedResponse


def extract_user_token(headers: Headers) -> str:
    """Extract the bearer token from an HTTP authorization header.

    Args:
        headers: The request headers containing the authorization header.

    Returns:
        The extracted token.

    Raises:
        HTTPException: With status 401 when the header is missing or it
            does not have the `Bearer <token>` form.
    """
    authorization_header = headers.get("Authorization")
    if not authorization_header:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UnauthorizedResponse(
                cause="Authorization header is required"
            ).dump_detail(),
        )

    scheme_and_token = authorization_header.strip().split()
    if (
        len(scheme_and_token) != 2
        or scheme_and_token[0].lower() != constants.BEARER_SCHEME
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UnauthorizedResponse(
                cause="Invalid authorization format, use: Bearer <token>"
            ).dump_detail(),
        )

    return scheme_and_token[1]
