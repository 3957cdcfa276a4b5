from .booking_lifecycle import AttemptState as AttemptState
from .booking_lifecycle import BookingAttempt as BookingAttempt
from .booking_lifecycle import (
    BookingLifecycleController as BookingLifecycleController,
)
