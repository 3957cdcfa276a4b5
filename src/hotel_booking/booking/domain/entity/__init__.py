from .booking import Booking as Booking
from .booking import BookingView as BookingView
from .booking import NewBooking as NewBooking
