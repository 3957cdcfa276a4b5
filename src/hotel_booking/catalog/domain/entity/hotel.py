from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from hotel_booking.catalog.domain.value_object import HotelId, HotelName
from hotel_booking.shared.domain import Entity, IsoDateTime, Money


@dataclass(frozen=True)
class HotelSummary:
    """Hotel fields shown next to a booking"""

    name: str
    location: str
    city: str
    state: str
    image_url: str | None


class Hotel(Entity[HotelId]):
    """Hotel catalog entry (read-only for bookings)"""

    def __init__(
        self,
        id: HotelId,
        name: HotelName,
        price_per_night: Money,
        location: str = "",
        city: str = "",
        state: str = "",
        description: str = "",
        rating: Decimal = Decimal("0"),
        amenities: frozenset[str] = frozenset(),
        image_url: str | None = None,
        created_at: IsoDateTime | None = None,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._price_per_night = price_per_night
        self._location = location
        self._city = city
        self._state = state
        self._description = description
        self._rating = rating
        self._amenities = frozenset(amenities)
        self._image_url = image_url
        self._created_at = created_at

    @property
    def name(self) -> HotelName:
        return self._name

    @property
    def price_per_night(self) -> Money:
        return self._price_per_night

    @property
    def location(self) -> str:
        return self._location

    @property
    def city(self) -> str:
        return self._city

    @property
    def state(self) -> str:
        return self._state

    @property
    def description(self) -> str:
        return self._description

    @property
    def rating(self) -> Decimal:
        return self._rating

    @property
    def amenities(self) -> frozenset[str]:
        return self._amenities

    @property
    def image_url(self) -> str | None:
        return self._image_url

    @property
    def created_at(self) -> IsoDateTime | None:
        return self._created_at

    def summary(self) -> HotelSummary:
        """Project the fields needed to display a booking"""
        return HotelSummary(
            name=str(self._name),
            location=self._location,
            city=self._city,
            state=self._state,
            image_url=self._image_url,
        )
