"""Access token utility functions."""

import uuid


def generate_access_token() -> str:
    """
    Generate a new opaque access token.

    The value is a canonical RFC 4122 UUID4 string. Its 122 random bits come
    from the operating system CSPRNG, which makes tokens unguessable and
    collisions negligible.

    Returns:
        str: A freshly generated access token.
    """
    return str(uuid.uuid4())


def check_access_token(token: str) -> bool:
    """
    Check if given string has the shape of an access token.

    Only the format is checked, not whether the token was ever issued.
    """
    try:
        # accepts strings and bytes only
        uuid.UUID(token)
        return True
    except (ValueError, TypeError):
        return False
