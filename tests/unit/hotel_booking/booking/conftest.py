from datetime import date
from decimal import Decimal

import pytest

from hotel_booking.booking.domain import (
    Booking,
    BookingId,
    BookingRequest,
    BookingStatus,
    StayPeriod,
)
from hotel_booking.catalog.domain import HotelId
from hotel_booking.shared.domain import IsoDateTime, Money, UserId


@pytest.fixture
def create_booking():
    """Factory fixture building Booking entities"""

    def _factory(
        booking_id: str = "booking-1",
        user_id: str = "user-123",
        hotel_id: str = "hotel-1",
        check_in: date = date(2024, 1, 1),
        check_out: date = date(2024, 1, 3),
        guests: int = 2,
        rooms: int = 1,
        total_price: Decimal = Decimal("10000"),
        created_at: str = "2024-01-01T09:00:00Z",
        status: BookingStatus = BookingStatus.CONFIRMED,
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            user_id=UserId(value=user_id),
            hotel_id=HotelId(value=hotel_id),
            stay_period=StayPeriod(check_in=check_in, check_out=check_out),
            guests=guests,
            rooms=rooms,
            total_price=Money(amount=total_price),
            created_at=IsoDateTime.from_string(created_at),
            status=status,
        )

    return _factory


@pytest.fixture
def booking_request():
    """Factory fixture for raw booking form values"""

    def _factory(**overrides) -> BookingRequest:
        values = {
            "hotel_id": "hotel-1",
            "check_in": "2024-01-01",
            "check_out": "2024-01-03",
            "guests": 2,
            "rooms": 1,
            "special_requests": None,
        }
        values.update(overrides)
        return BookingRequest(**values)

    return _factory
