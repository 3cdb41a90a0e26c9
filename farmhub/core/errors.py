"""
Error taxonomy for the API.

Every error is an ``HTTPException`` so it can be raised from services,
dependencies and routes alike; ``create_app`` renders all of them as
``{"message": detail}``.
"""
from fastapi import HTTPException, status


class AppError(HTTPException):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: str | None = None):
        super().__init__(status_code=type(self).status_code, detail=message or self.default_message)

    @property
    def message(self) -> str:
        return self.detail


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class UnsupportedMediaType(ValidationError):
    default_message = "Unsupported file type"


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"


class InvalidCredentials(AuthError):
    default_message = "Invalid email or password"


class MissingToken(AuthError):
    default_message = "Please login"


class InvalidToken(AuthError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid session"


class Forbidden(AuthError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Admin access required"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class StoreError(AppError):
    default_message = "Server error"


class RelayError(AppError):
    # caught by the contact flow, never rendered to a caller
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Email notification failed"
