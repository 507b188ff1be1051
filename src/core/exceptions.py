from __future__ import annotations

from fastapi import HTTPException, status


class PostApiException(Exception):
    """Base class for domain errors raised below the controller.

    Each subclass carries the machine-readable ``code`` and the HTTP status
    used when the error escapes a route and reaches the application handler.
    """

    code = "error"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class ValidationError(PostApiException):
    code = "validation_error"
    status_code = status.HTTP_422_UNPROCESSABLE_CONTENT


class NotFoundError(PostApiException):
    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class DatabaseError(PostApiException):
    code = "database_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def map_exception_to_http(exc: PostApiException) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)
