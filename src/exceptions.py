"""Application error taxonomy.

Services raise these; the handlers in ``src.main`` turn them into the JSON
envelope. ``message`` is always safe to show to the caller.
"""

from fastapi import status


class AppError(Exception):
    """Base class for errors that map to a caller-facing response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Something went wrong"

    def __init__(
        self,
        message: str | None = None,
        errors: dict[str, list[str]] | None = None,
    ):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)


class ValidationFailed(AppError):
    """One or more fields failed validation; ``errors`` maps field to messages."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_message = "Validation failed"


class DuplicateEmail(AppError):
    """The email is already registered."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_message = "Registration failed"


class InvalidCredentials(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not enough permissions"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class InternalError(AppError):
    """Unexpected storage or infrastructure failure, already logged."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None, detail: str | None = None):
        super().__init__(message)
        self.detail = detail
