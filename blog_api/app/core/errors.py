"""
Error taxonomy shared by services and the HTTP layer.

Services raise these exceptions; ``main.create_app`` registers a
handler that renders any ``BlogError`` as ``{"message": ...}`` with
the exception's status code.
"""

from typing import Optional

from fastapi import status


class BlogError(Exception):
    """Base class for errors reported to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationConflict(BlogError):
    """The request conflicts with existing data (e.g. duplicate email)."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Email already exists"


class AuthFailure(BlogError):
    """Unknown account or wrong password."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid email or password"


class StorageFailure(BlogError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Database error"


class IntegrityFailure(StorageFailure):
    """A write was rejected by a table constraint (e.g. UNIQUE email)."""
