from enum import Enum


class BookingStatus(str, Enum):
    """Booking status"""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
