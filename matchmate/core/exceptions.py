from fastapi import HTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
)


class ValidationError(HTTPException):
    def __init__(self, detail: str = "Invalid request.", status_code: int = HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str = "User not found.", status_code: int = HTTP_404_NOT_FOUND):
        super().__init__(status_code=status_code, detail=detail)


class Conflict(HTTPException):
    """Uniqueness violation; reported to clients as a 400 like other input errors."""

    def __init__(self, detail: str = "Resource already exists.", status_code: int = HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class Unauthenticated(HTTPException):
    def __init__(self, detail: str = "Authorization denied.", status_code: int = HTTP_401_UNAUTHORIZED):
        super().__init__(status_code=status_code, detail=detail, headers={"WWW-Authenticate": "Bearer"})


class InvalidToken(HTTPException):
    def __init__(self, detail: str = "Invalid token. Authentication failed.", status_code: int = HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class Forbidden(HTTPException):
    def __init__(self, detail: str = "Forbidden.", status_code: int = HTTP_403_FORBIDDEN):
        super().__init__(status_code=status_code, detail=detail)


class EmailDeliveryError(Exception):
    """Raised when the SMTP server rejects or cannot accept a message."""
