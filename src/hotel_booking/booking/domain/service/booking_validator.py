from hotel_booking.booking.domain.exception import (
    HotelNotFoundException,
    InvalidDateOrderException,
    InvalidQuantityException,
    MissingDatesException,
    UnauthenticatedException,
)
from hotel_booking.booking.domain.value_object import (
    BookingRequest,
    StayPeriod,
    ValidatedBookingRequest,
)
from hotel_booking.catalog.domain import HotelId
from hotel_booking.shared.domain import Identity
from hotel_booking.shared.utils import to_date


class BookingValidator:
    """Checks the preconditions for persisting a booking

    Checks run in a fixed order and the first failure is raised:
    identity, dates present, date order, quantities.
    """

    def validate(
        self, identity: Identity | None, request: BookingRequest
    ) -> ValidatedBookingRequest:
        if identity is None:
            raise UnauthenticatedException()

        check_in = to_date(request.check_in)
        check_out = to_date(request.check_out)
        if check_in is None or check_out is None:
            raise MissingDatesException()

        if check_out <= check_in:
            raise InvalidDateOrderException()

        guests = self._to_quantity(request.guests, "guests")
        rooms = self._to_quantity(request.rooms, "rooms")

        try:
            hotel_id = HotelId(value=request.hotel_id)
        except ValueError as e:
            raise HotelNotFoundException("A hotel must be selected") from e

        special_requests = (request.special_requests or "").strip() or None

        return ValidatedBookingRequest(
            hotel_id=hotel_id,
            stay_period=StayPeriod(check_in=check_in, check_out=check_out),
            guests=guests,
            rooms=rooms,
            special_requests=special_requests,
        )

    @staticmethod
    def _to_quantity(value: object, field: str) -> int:
        if isinstance(value, bool):
            raise InvalidQuantityException(f"{field} must be a whole number")
        if isinstance(value, float) and not value.is_integer():
            raise InvalidQuantityException(f"{field} must be a whole number")
        try:
            quantity = int(str(value).strip()) if isinstance(value, str) else int(value)
        except (TypeError, ValueError) as e:
            raise InvalidQuantityException(f"{field} must be a whole number") from e
        if quantity < 1:
            raise InvalidQuantityException(f"{field} must be at least 1")
        return quantity
