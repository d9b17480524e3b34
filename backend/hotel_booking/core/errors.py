"""
Domain errors raised by the service layer.

Services raise these and never catch them. The HTTP layer registers a single
handler (see hotel_booking.main) that turns them into JSON responses using
the status code carried by each class.
"""

from typing import Optional

from fastapi import status


class AppError(Exception):
    """Base class for all errors that map to a client-facing response."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    kind: str = "app_error"
    default_message: str = "Request could not be processed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(AppError):
    """The user's booking, enrollment, a room or a hotel does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    kind = "not_found"
    default_message = "No result for this search!"


class PaymentRequiredError(AppError):
    """The user's ticket does not grant hotel access."""

    status_code = status.HTTP_402_PAYMENT_REQUIRED
    kind = "payment_required"
    default_message = "Ticket is not paid, is remote or does not include hotel"


class ForbiddenError(AppError):
    """The operation is not allowed, e.g. the room has no free capacity."""

    status_code = status.HTTP_403_FORBIDDEN
    kind = "forbidden"
    default_message = "Operation not allowed"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    kind = "conflict"
    default_message = "Resource already exists"


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    kind = "unauthorized"
    default_message = "You must be signed in to continue"
