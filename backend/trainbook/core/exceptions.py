"""
Domain errors raised by the service layer.

Each error carries the HTTP status it maps to; the API layer renders all of
them as ``{"success": false, "message": ...}``.
"""

from typing import Optional

from fastapi import status


class BookingAppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFields(BookingAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing required fields"


class InvalidInput(BookingAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class InvalidDate(InvalidInput):
    default_message = "Invalid or past travel date"


class DuplicateEmail(BookingAppError):
    # A normal rejected outcome, not an HTTP error.
    status_code = status.HTTP_200_OK
    default_message = "Email already exists"


class FareNotFound(BookingAppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Fare not found for selected route"


class PersistenceFailure(BookingAppError):
    default_message = "Could not complete booking"

    def __init__(self, message: Optional[str] = None, booking_id: Optional[int] = None):
        super().__init__(message)
        self.booking_id = booking_id


class StoreUnavailable(BookingAppError):
    default_message = "Service temporarily unavailable"
