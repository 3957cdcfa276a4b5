from hotel_booking.shared.domain import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class BookingValidationException(BusinessRuleViolationException):
    """A booking request failed validation before any I/O

    Always recoverable: the caller re-prompts with the same form state.
    """

    message = "Invalid booking request"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or type(self).message
        super().__init__(self.message)


class UnauthenticatedException(BookingValidationException):
    """No signed-in user at submission time"""

    message = "Please sign in to make a booking"


class MissingDatesException(BookingValidationException):
    """Check-in or check-out date was not supplied"""

    message = "Please select check-in and check-out dates"


class InvalidDateOrderException(BookingValidationException):
    """Check-out is not strictly after check-in"""

    message = "Check-out date must be after check-in date"


class InvalidQuantityException(BookingValidationException):
    """Guest or room count below one, or not a whole number"""

    message = "Guests and rooms must be at least 1"


class HotelNotFoundException(ResourceNotFoundException):
    """The hotel reference does not resolve in the catalog"""

    pass
