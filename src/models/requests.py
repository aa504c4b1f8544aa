"""Models for REST API requests."""

import re

from pydantic import BaseModel, Field, field_validator

import constants


class TokenRequest(BaseModel):
    """Model representing a request for a new access token.

    Attributes:
        email: E-mail address of the token owner.

    Example:
        ```python
        token_request = TokenRequest(email="foo@example.com")
        ```
    """

    email: str = Field(
        description="E-mail address the access token is issued to",
        examples=["foo@example.com"],
    )

    # provides examples for /docs endpoint
    model_config = {
        "extra": "forbid",
        "json_schema_extra": {
            "examples": [
                {
                    "email": "foo@example.com",
                }
            ]
        },
    }

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        """Check if e-mail address has the proper format."""
        if not re.match(constants.EMAIL_PATTERN, value):
            raise ValueError(f"Improper e-mail address '{value}'")
        return value
