from dataclasses import dataclass

from hotel_booking.booking.domain.enum import BookingStatus
from hotel_booking.booking.domain.value_object import BookingId, StayPeriod
from hotel_booking.catalog.domain import HotelId, HotelSummary
from hotel_booking.shared.domain import Entity, IsoDateTime, Money, UserId


@dataclass(frozen=True)
class NewBooking:
    """A validated, priced booking that has not been persisted yet"""

    user_id: UserId
    hotel_id: HotelId
    stay_period: StayPeriod
    guests: int
    rooms: int
    total_price: Money
    special_requests: str | None = None


class Booking(Entity[BookingId]):
    """Hotel booking entity

    total_price is a snapshot taken at creation; later changes to the
    hotel's nightly rate do not touch it.
    """

    def __init__(
        self,
        id: BookingId,
        user_id: UserId,
        hotel_id: HotelId,
        stay_period: StayPeriod,
        guests: int,
        rooms: int,
        total_price: Money,
        created_at: IsoDateTime,
        special_requests: str | None = None,
        status: BookingStatus = BookingStatus.CONFIRMED,
    ) -> None:
        if guests < 1:
            raise ValueError("A booking needs at least one guest")
        if rooms < 1:
            raise ValueError("A booking needs at least one room")
        super().__init__(id)
        self._user_id = user_id
        self._hotel_id = hotel_id
        self._stay_period = stay_period
        self._guests = guests
        self._rooms = rooms
        self._total_price = total_price
        self._created_at = created_at
        self._special_requests = special_requests
        self._status = status

    @classmethod
    def from_new(
        cls,
        id: BookingId,
        new_booking: NewBooking,
        created_at: IsoDateTime,
        status: BookingStatus = BookingStatus.CONFIRMED,
    ) -> "Booking":
        """Materialize a NewBooking once storage assigned its id and timestamp"""
        return cls(
            id=id,
            user_id=new_booking.user_id,
            hotel_id=new_booking.hotel_id,
            stay_period=new_booking.stay_period,
            guests=new_booking.guests,
            rooms=new_booking.rooms,
            total_price=new_booking.total_price,
            created_at=created_at,
            special_requests=new_booking.special_requests,
            status=status,
        )

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def hotel_id(self) -> HotelId:
        return self._hotel_id

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def guests(self) -> int:
        return self._guests

    @property
    def rooms(self) -> int:
        return self._rooms

    @property
    def total_price(self) -> Money:
        return self._total_price

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def special_requests(self) -> str | None:
        return self._special_requests

    @property
    def status(self) -> BookingStatus:
        return self._status


@dataclass(frozen=True)
class BookingView:
    """A booking joined with the display fields of its hotel

    hotel is None when the hotel no longer resolves in the catalog.
    """

    booking: Booking
    hotel: HotelSummary | None
