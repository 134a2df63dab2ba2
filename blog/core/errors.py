"""Domain errors raised by the service layer.

Each error carries the HTTP status code it is surfaced with; the exception
handlers in ``blog.main`` translate them into ``{"detail": message}`` bodies.
"""

from fastapi import status


class ServiceError(Exception):
    """Base service error."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    """A post, tag or owner lookup missed."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    """A slug, tag name or username is already taken."""

    status_code = status.HTTP_400_BAD_REQUEST


class BadRequestError(ServiceError):
    """The request references data that does not exist or is otherwise invalid."""

    status_code = status.HTTP_400_BAD_REQUEST


class ForbiddenError(ServiceError):
    """The operation is blocked by existing references."""

    status_code = status.HTTP_403_FORBIDDEN


class InternalError(ServiceError):
    """Stored data is inconsistent with what the service expects."""
