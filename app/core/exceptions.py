from fastapi import HTTPException, status


class ConfigurationError(HTTPException):
    """Raised when a required server-side setting is missing."""

    def __init__(self, setting: str):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Server misconfigured: {setting} is not set",
        )


class InvalidSignatureError(HTTPException):
    """Raised when a webhook delivery is unsigned or the signature does not match."""

    def __init__(self, message: str = "Invalid signature"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=message,
        )


class InvalidPayloadError(HTTPException):
    """Raised when a webhook body cannot be parsed into the expected event shape."""

    def __init__(self, message: str = "Invalid payload"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
        )


class QueryValidationError(HTTPException):
    """Raised when query parameters are individually valid but inconsistent together.

    Uses the same status and detail shape as FastAPI's own request validation
    errors so clients handle both the same way.
    """

    def __init__(self, errors: list[dict[str, object]]):
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=errors,
        )
