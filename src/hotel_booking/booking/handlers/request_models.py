from pydantic import BaseModel, Field, field_validator

from hotel_booking.booking.domain import BookingRequest


class CreateBookingRequest(BaseModel):
    """Create booking request body

    Dates and quantities are loosely typed here: a missing, empty or
    unparseable date and a non-integer guest or room count are reported by
    the booking validator, not by the schema.
    """

    hotel_id: str = Field(..., min_length=1)
    check_in_date: str | None = Field(
        default=None,
        description="Check-in date (YYYY-MM-DD)",
        examples=["2024-01-01"],
    )
    check_out_date: str | None = Field(
        default=None,
        description="Check-out date (YYYY-MM-DD)",
        examples=["2024-01-03"],
    )
    guests: int | float | str = Field(default=1, description="Number of guests")
    rooms: int | float | str = Field(default=1, description="Number of rooms")
    special_requests: str | None = Field(default=None, max_length=2000)

    @field_validator("guests", "rooms", mode="before")
    @classmethod
    def default_missing_quantity(cls, v):
        return 1 if v is None else v

    def to_booking_request(self) -> BookingRequest:
        return BookingRequest(
            hotel_id=self.hotel_id,
            check_in=self.check_in_date,
            check_out=self.check_out_date,
            guests=self.guests,
            rooms=self.rooms,
            special_requests=self.special_requests,
        )
