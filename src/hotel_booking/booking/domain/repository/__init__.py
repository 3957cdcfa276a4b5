from .booking_repository import BookingRepository as BookingRepository
from .booking_repository import join_with_hotels as join_with_hotels
