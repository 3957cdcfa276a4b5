from .exceptions import (
    BookingValidationException as BookingValidationException,
)
from .exceptions import HotelNotFoundException as HotelNotFoundException
from .exceptions import InvalidDateOrderException as InvalidDateOrderException
from .exceptions import InvalidQuantityException as InvalidQuantityException
from .exceptions import MissingDatesException as MissingDatesException
from .exceptions import UnauthenticatedException as UnauthenticatedException
