"""Models for REST API responses."""

from datetime import datetime

from pydantic import BaseModel, Field


class TokenResponse(BaseModel):
    """Model representing a response to an access token request.

    Attributes:
        token: Newly issued opaque access token.

    Example:
        ```python
        token_response = TokenResponse(token="123e4567-e89b-12d3-a456-426614174000")
        ```
    """

    token: str = Field(
        description="Opaque access token to be sent as a bearer token",
        examples=["123e4567-e89b-12d3-a456-426614174000"],
    )


class UsageResponse(BaseModel):
    """Model representing word quota usage of an access token.

    Attributes:
        used: Words justified in the current window.
        limit: Daily word limit.
        remaining: Words still available in the current window.
    """

    used: int = Field(description="Words justified today", examples=[5000])
    limit: int = Field(description="Daily word limit", examples=[80000])
    remaining: int = Field(description="Words available today", examples=[75000])

    # provides examples for /docs endpoint
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "used": 5000,
                    "limit": 80000,
                    "remaining": 75000,
                }
            ]
        }
    }


class HealthResponse(BaseModel):
    """Model representing a response to a health request."""

    status: str = Field(description="Service status", examples=["ok"])
    timestamp: datetime = Field(
        description="Time of the health check",
        examples=["2025-06-15T14:00:00Z"],
    )


class InfoResponse(BaseModel):
    """Model representing a response to an info request.

    Attributes:
        name: Service name.
        service_version: Service version.

    Example:
        ```python
        info_response = InfoResponse(
            name="Justify service",
            service_version="1.0.0",
        )
        ```
    """

    name: str = Field(
        description="Service name",
        examples=["Justify service"],
    )

    service_version: str = Field(
        description="Service version",
        examples=["0.1.0", "0.2.0", "1.0.0"],
    )


class ReadinessResponse(BaseModel):
    """Model representing response to a readiness request.

    Attributes:
        ready: If service is ready.
        reason: The reason for the readiness.
    """

    ready: bool = Field(
        ...,
        description="Flag indicating if service is ready",
        examples=[True, False],
    )

    reason: str = Field(
        ...,
        description="The reason for the readiness",
        examples=["Service is ready"],
    )

    # provides examples for /docs endpoint
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "ready": True,
                    "reason": "Service is ready",
                }
            ]
        }
    }


class LivenessResponse(BaseModel):
    """Model representing a response to a liveness request.

    Attributes:
        alive: If app is alive.

    Example:
        ```python
        liveness_response = LivenessResponse(alive=True)
        ```
    """

    alive: bool = Field(
        ...,
        description="Flag indicating that the app is alive",
        examples=[True, False],
    )


class DetailModel(BaseModel):
    """Nested detail model for error responses."""

    response: str = Field(..., description="Short summary of the error")
    cause: str = Field(..., description="Detailed explanation of what caused the error")


class AbstractErrorResponse(BaseModel):
    """Base class for all error responses.

    Contains a nested `detail` field.
    """

    detail: DetailModel

    def dump_detail(self) -> dict:
        """Return dict in FastAPI HTTPException format."""
        return self.detail.model_dump()


class BadRequestResponse(AbstractErrorResponse):
    """400 Bad Request - Request body can not be justified."""

    def __init__(self, cause: str):
        """Initialize a BadRequestResponse for unusable request body."""
        super().__init__(
            detail=DetailModel(response="Invalid request body", cause=cause)
        )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "detail": {
                        "response": "Invalid request body",
                        "cause": "Request body contains no words",
                    }
                }
            ]
        }
    }


class UnauthorizedResponse(AbstractErrorResponse):
    """401 Unauthorized - Missing or invalid credentials."""

    def __init__(
        self, cause: str = "Missing or invalid credentials provided by client"
    ):
        """Initialize an UnauthorizedResponse when authentication fails."""
        super().__init__(detail=DetailModel(response="Unauthorized", cause=cause))

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "detail": {
                        "response": "Unauthorized",
                        "cause": "Missing or invalid credentials provided by client",
                    }
                }
            ]
        }
    }


class QuotaExceededDetail(DetailModel):
    """Detail of a request refused because of exhausted word quota."""

    daily_limit: int = Field(..., description="Daily word limit")
    remaining_words: int = Field(..., description="Words available today")
    requested_words: int = Field(..., description="Words in the refused request")


class QuotaExceededResponse(AbstractErrorResponse):
    """402 Payment Required - Daily word quota exceeded."""

    detail: QuotaExceededDetail

    def __init__(self, daily_limit: int, remaining_words: int, requested_words: int):
        """Initialize a QuotaExceededResponse for a refused reservation."""
        super().__init__(
            detail=QuotaExceededDetail(
                response="Payment Required: daily word limit exceeded",
                cause=(
                    f"Requested {requested_words} words "
                    f"but only {remaining_words} words are available today"
                ),
                daily_limit=daily_limit,
                remaining_words=remaining_words,
                requested_words=requested_words,
            )
        )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "detail": {
                        "response": "Payment Required: daily word limit exceeded",
                        "cause": "Requested 3 words but only 0 words are available today",
                        "daily_limit": 80000,
                        "remaining_words": 0,
                        "requested_words": 3,
                    }
                }
            ]
        }
    }
