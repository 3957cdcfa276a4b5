from dataclasses import dataclass
from datetime import date

from hotel_booking.catalog.domain import HotelId

from .stay_period import StayPeriod


@dataclass(frozen=True)
class BookingRequest:
    """Raw booking form values, as entered by the user

    Nothing is checked here; dates may be missing or unparsed and
    quantities may still be strings.
    """

    hotel_id: str
    check_in: date | str | None = None
    check_out: date | str | None = None
    guests: object = 1
    rooms: object = 1
    special_requests: str | None = None


@dataclass(frozen=True)
class ValidatedBookingRequest:
    """Booking request that passed validation"""

    hotel_id: HotelId
    stay_period: StayPeriod
    guests: int
    rooms: int
    special_requests: str | None = None
