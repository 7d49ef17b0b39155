"""
Application error taxonomy.

Services and repositories raise these; the exception handlers registered in
:mod:`app.main` are the only place they are turned into HTTP responses.
"""

from enum import Enum

from fastapi import status


class ValidationField(str, Enum):
    """Field tags carried by :class:`ValidationError` (used as the error code)."""
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_NAME = "INVALID_NAME"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    INVALID_ID = "INVALID_ID"
    INVALID_DATE = "INVALID_DATE"
    INVALID_SETTING = "INVALID_SETTING"
    INVALID_INPUT = "INVALID_INPUT"


class ErrorCode(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    BAD_REQUEST = "BAD_REQUEST"


class AppError(Exception):
    """Base class for errors that map onto a known HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = ErrorCode.INTERNAL_ERROR.value
    default_message: str = "internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Input rejected by validation, tagged with the offending field."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: ValidationField, message: str):
        self.field = field
        self.code = field.value
        super().__init__(f"validation error on field '{field.value}': {message}")


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    code = ErrorCode.NOT_FOUND.value
    default_message = "resource not found"


class AlreadyExistsError(AppError):
    status_code = status.HTTP_409_CONFLICT
    code = ErrorCode.ALREADY_EXISTS.value
    default_message = "resource already exists"


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = ErrorCode.UNAUTHORIZED.value
    default_message = "unauthorized access"


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    code = ErrorCode.FORBIDDEN.value
    default_message = "access forbidden"


class InvalidInputError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = ErrorCode.BAD_REQUEST.value
    default_message = "invalid input provided"
