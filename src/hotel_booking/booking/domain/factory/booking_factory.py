from decimal import Decimal

from hotel_booking.booking.domain.entity import NewBooking
from hotel_booking.booking.domain.value_object import ValidatedBookingRequest
from hotel_booking.shared.domain import Money, UserId


class BookingFactory:
    """Builds the booking record that gets handed to the repository"""

    def create(
        self,
        user_id: UserId,
        request: ValidatedBookingRequest,
        total_price: Decimal,
    ) -> NewBooking:
        """Tag a validated, priced request with its owner"""
        return NewBooking(
            user_id=user_id,
            hotel_id=request.hotel_id,
            stay_period=request.stay_period,
            guests=request.guests,
            rooms=request.rooms,
            total_price=Money(amount=total_price),
            special_requests=request.special_requests,
        )
