"""Any exception that can occur when the daily word quota is exhausted."""


class QuotaExceedError(Exception):
    """Exception raised when the word quota of an access token is exceeded."""

    def __init__(self, owner: str, requested: int, remaining: int) -> None:
        """Construct exception object."""
        message = (
            f"User {owner} requested {requested} words "
            f"but has only {remaining} words available today"
        )
        super().__init__(message)
        self.owner = owner
        self.requested = requested
        self.remaining = remaining
