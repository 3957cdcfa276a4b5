from collections.abc import Iterable

from hotel_booking.catalog.domain import Hotel, HotelId, HotelOrder, HotelRepository
from hotel_booking.catalog.domain.repository import filter_by_location, sort_hotels


class InMemoryHotelRepository(HotelRepository):
    """Dictionary-backed catalog for local runs and tests"""

    def __init__(self, hotels: Iterable[Hotel] = ()) -> None:
        self._hotels: dict[HotelId, Hotel] = {}
        for hotel in hotels:
            self.add(hotel)

    def add(self, hotel: Hotel) -> None:
        """Add a hotel, replacing any entry with the same id"""
        self._hotels[hotel.id] = hotel

    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        return self._hotels.get(hotel_id)

    def list_hotels(self, order_by: str | HotelOrder = HotelOrder.NAME) -> list[Hotel]:
        return sort_hotels(list(self._hotels.values()), order_by)

    def search(
        self, location: str | None, order_by: str | HotelOrder = HotelOrder.RATING
    ) -> list[Hotel]:
        return filter_by_location(self.list_hotels(order_by), location)
