from abc import abstractmethod
from enum import Enum

from hotel_booking.catalog.domain.entity import Hotel
from hotel_booking.catalog.domain.value_object import HotelId
from hotel_booking.shared.domain import Repository


class HotelOrder(str, Enum):
    """Sort keys accepted by the bulk hotel listing"""

    NAME = "name"
    PRICE_PER_NIGHT = "price_per_night"
    RATING = "rating"
    CREATED_AT = "created_at"


def sort_hotels(hotels: list[Hotel], order_by: str | HotelOrder) -> list[Hotel]:
    """Order hotels for listing; rating is best-first, the rest ascending"""
    try:
        order = HotelOrder(order_by)
    except ValueError as e:
        raise ValueError(f"Unsupported hotel ordering: {order_by}") from e

    if order is HotelOrder.NAME:
        return sorted(hotels, key=lambda h: (str(h.name).casefold(), h.id.value))
    if order is HotelOrder.PRICE_PER_NIGHT:
        return sorted(hotels, key=lambda h: (h.price_per_night.amount, h.id.value))
    if order is HotelOrder.RATING:
        return sorted(hotels, key=lambda h: (-h.rating, h.id.value))
    return sorted(
        hotels, key=lambda h: (str(h.created_at) if h.created_at else "", h.id.value)
    )


def filter_by_location(hotels: list[Hotel], location: str | None) -> list[Hotel]:
    """Hotels whose city or state contains the query, ignoring case

    A blank query matches every hotel.
    """
    query = (location or "").strip().casefold()
    if not query:
        return list(hotels)
    return [
        h for h in hotels if query in h.city.casefold() or query in h.state.casefold()
    ]


class HotelRepository(Repository[Hotel, HotelId]):
    """Read-only access to the hotel catalog"""

    @abstractmethod
    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """Look up a hotel by id"""
        raise NotImplementedError

    @abstractmethod
    def list_hotels(self, order_by: str | HotelOrder = HotelOrder.NAME) -> list[Hotel]:
        """List every hotel in the catalog"""
        raise NotImplementedError

    @abstractmethod
    def search(
        self, location: str | None, order_by: str | HotelOrder = HotelOrder.RATING
    ) -> list[Hotel]:
        """Hotels whose city or state matches the location query"""
        raise NotImplementedError
