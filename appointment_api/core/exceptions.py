"""
Domain errors raised by the auth gate and the services.

Each error carries the message returned to the client and the HTTP status
it maps to; ``main.py`` turns them into ``{"message": ...}`` responses.
"""

from fastapi import status


class DomainException(Exception):
    """Base exception for all domain errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(DomainException):
    """No bearer token was presented."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class InvalidToken(DomainException):
    """The bearer token could not be decoded or has no subject."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid token"


class InvalidCredentials(DomainException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class Forbidden(DomainException):
    """The caller's role may not use this route."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden: Insufficient permissions"


class InvalidInput(DomainException):
    """A required field is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class DuplicateUsername(DomainException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Username already exists"


class SlotUnavailable(DomainException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Slot not available"


class DuplicateBooking(DomainException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "You already have an appointment at this time"


class NotFound(DomainException):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ProfessorNotFound(NotFound):
    default_message = "Professor not found"


class AppointmentNotFound(NotFound):
    default_message = "Appointment not found"


class StorageError(DomainException):
    """The database rejected or failed a statement; details stay in the logs."""
