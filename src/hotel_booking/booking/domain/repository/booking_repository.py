from abc import ABC, abstractmethod
from collections.abc import Iterable

from hotel_booking.booking.domain.entity import Booking, BookingView, NewBooking
from hotel_booking.catalog.domain import Hotel, HotelId, HotelRepository
from hotel_booking.shared.domain import UserId


class BookingRepository(ABC):
    """Booking repository interface"""

    @abstractmethod
    def create(self, new_booking: NewBooking) -> Booking:
        """Persist a booking with status confirmed

        Assigns the id and creation timestamp. Raises PersistenceException
        on any storage failure, leaving nothing written.
        """
        raise NotImplementedError

    @abstractmethod
    def list_for_user(self, user_id: UserId) -> list[BookingView]:
        """Bookings owned by the user joined with hotel display fields,
        most recent first"""
        raise NotImplementedError

    @abstractmethod
    def get_hotel(self, hotel_id: HotelId) -> Hotel:
        """Look up a hotel; raises HotelNotFoundException when it is absent"""
        raise NotImplementedError


def join_with_hotels(
    bookings: Iterable[Booking], hotel_repository: HotelRepository
) -> list[BookingView]:
    """Attach hotel display fields to bookings, reading each hotel once"""
    summaries: dict[HotelId, Hotel | None] = {}
    views: list[BookingView] = []
    for booking in bookings:
        if booking.hotel_id not in summaries:
            summaries[booking.hotel_id] = hotel_repository.find_by_id(booking.hotel_id)
        hotel = summaries[booking.hotel_id]
        views.append(
            BookingView(booking=booking, hotel=hotel.summary() if hotel else None)
        )
    return views
