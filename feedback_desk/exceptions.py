"""Errors raised by the feedback service and mapped to HTTP responses."""

from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class FeedbackDeskError(Exception):
    """Base error. ``message`` is safe to return to the client."""

    http_status: int = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(FeedbackDeskError):
    """Submitted feedback broke one of the field rules."""

    http_status = HTTP_400_BAD_REQUEST


class AuthError(FeedbackDeskError):
    """Credential mismatch, or a missing/malformed admin token."""

    http_status = HTTP_401_UNAUTHORIZED


class StorageError(FeedbackDeskError):
    """The database could not be read or written."""

    http_status = HTTP_500_INTERNAL_SERVER_ERROR
