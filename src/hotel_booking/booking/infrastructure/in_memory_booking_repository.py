import itertools
from collections.abc import Callable

from hotel_booking.booking.domain import (
    Booking,
    BookingId,
    BookingRepository,
    BookingStatus,
    BookingView,
    NewBooking,
)
from hotel_booking.booking.domain.exception import HotelNotFoundException
from hotel_booking.booking.domain.repository import join_with_hotels
from hotel_booking.catalog.domain import Hotel, HotelId, HotelRepository
from hotel_booking.shared.domain import IsoDateTime, UserId


class InMemoryBookingRepository(BookingRepository):
    """In-process booking store for local runs and tests"""

    def __init__(
        self,
        hotel_repository: HotelRepository,
        clock: Callable[[], IsoDateTime] = IsoDateTime.now,
    ) -> None:
        self.hotel_repository = hotel_repository
        self._clock = clock
        self._bookings: list[tuple[int, Booking]] = []
        self._sequence = itertools.count()

    def create(self, new_booking: NewBooking) -> Booking:
        booking = Booking.from_new(
            id=BookingId.generate(),
            new_booking=new_booking,
            created_at=self._clock(),
            status=BookingStatus.CONFIRMED,
        )
        self._persist(booking)
        return booking

    def list_for_user(self, user_id: UserId) -> list[BookingView]:
        owned = [entry for entry in self._bookings if entry[1].user_id == user_id]
        # insertion order breaks ties between equal timestamps
        owned.sort(key=lambda entry: (entry[1].created_at.value, entry[0]), reverse=True)
        return join_with_hotels((booking for _, booking in owned), self.hotel_repository)

    def get_hotel(self, hotel_id: HotelId) -> Hotel:
        hotel = self.hotel_repository.find_by_id(hotel_id)
        if hotel is None:
            raise HotelNotFoundException(f"Hotel not found: {hotel_id}")
        return hotel

    def _persist(self, booking: Booking) -> None:
        self._bookings.append((next(self._sequence), booking))
