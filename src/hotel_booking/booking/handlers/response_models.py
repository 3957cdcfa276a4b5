from __future__ import annotations

from pydantic import BaseModel

from hotel_booking.booking.domain import Booking, BookingView
from hotel_booking.catalog.domain import HotelSummary


class BookingData(BaseModel):
    """Booking data in responses"""

    booking_id: str
    user_id: str
    hotel_id: str
    check_in_date: str
    check_out_date: str
    nights: int
    guests: int
    rooms: int
    total_price: str
    special_requests: str | None = None
    status: str
    created_at: str


class HotelSummaryData(BaseModel):
    """Hotel fields shown with a booking"""

    name: str
    location: str
    city: str
    state: str
    image_url: str | None = None


class BookingListItem(BookingData):
    hotel: HotelSummaryData | None = None


class SuccessResponse(BaseModel):
    """Single booking response"""

    status: str = "success"
    data: BookingData


class BookingListResponse(BaseModel):
    """Booking listing response"""

    status: str = "success"
    bookings: list[BookingListItem]
    count: int


class QuoteData(BaseModel):
    hotel_id: str
    nightly_rate: str
    nights: int | None
    rooms: int
    total_price: str
    computable: bool


class QuoteResponse(BaseModel):
    status: str = "success"
    data: QuoteData


def _booking_fields(booking: Booking) -> dict:
    return {
        "booking_id": str(booking.id),
        "user_id": str(booking.user_id),
        "hotel_id": str(booking.hotel_id),
        "check_in_date": booking.stay_period.check_in.isoformat(),
        "check_out_date": booking.stay_period.check_out.isoformat(),
        "nights": booking.stay_period.nights(),
        "guests": booking.guests,
        "rooms": booking.rooms,
        "total_price": str(booking.total_price.amount),
        "special_requests": booking.special_requests,
        "status": booking.status.value,
        "created_at": str(booking.created_at),
    }


def _hotel_fields(hotel: HotelSummary | None) -> HotelSummaryData | None:
    if hotel is None:
        return None
    return HotelSummaryData(
        name=hotel.name,
        location=hotel.location,
        city=hotel.city,
        state=hotel.state,
        image_url=hotel.image_url,
    )


def to_response(booking: Booking) -> dict:
    """Convert a Booking into a response dict"""
    return SuccessResponse(data=BookingData(**_booking_fields(booking))).model_dump()


def to_list_response(views: list[BookingView]) -> dict:
    """Convert joined bookings into a listing response dict"""
    items = [
        BookingListItem(**_booking_fields(view.booking), hotel=_hotel_fields(view.hotel))
        for view in views
    ]
    return BookingListResponse(bookings=items, count=len(items)).model_dump()
