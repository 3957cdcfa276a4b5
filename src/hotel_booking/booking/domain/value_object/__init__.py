from .booking_id import BookingId as BookingId
from .booking_request import BookingRequest as BookingRequest
from .booking_request import ValidatedBookingRequest as ValidatedBookingRequest
from .stay_period import StayPeriod as StayPeriod
