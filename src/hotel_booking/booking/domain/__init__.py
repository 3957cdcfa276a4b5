from .entity import Booking as Booking
from .entity import BookingView as BookingView
from .entity import NewBooking as NewBooking
from .enum import BookingStatus as BookingStatus
from .factory import BookingFactory as BookingFactory
from .repository import BookingRepository as BookingRepository
from .service import BookingValidator as BookingValidator
from .service import PricingEngine as PricingEngine
from .value_object import BookingId as BookingId
from .value_object import BookingRequest as BookingRequest
from .value_object import StayPeriod as StayPeriod
from .value_object import ValidatedBookingRequest as ValidatedBookingRequest
