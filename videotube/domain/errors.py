"""Errors raised by handlers and adapters, each carrying the HTTP status it maps to."""

from typing import Any, Optional


class ApiError(Exception):
    """
    Base error for every failure that should reach the client as an error envelope.

    Attributes:
        status_code: HTTP status returned to the client
        message: Human readable description
        errors: Optional list of per-field details
    """

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None, errors: Optional[list[Any]] = None):
        if status_code is not None:
            self.status_code = status_code
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class ValidationError(ApiError):
    status_code = 400


class UnauthorizedError(ApiError):
    status_code = 401


class ForbiddenError(ApiError):
    status_code = 403


class NotFoundError(ApiError):
    status_code = 404


class UpstreamServiceError(ApiError):
    """Raised when the database or the media storage fails or misbehaves."""

    status_code = 500

