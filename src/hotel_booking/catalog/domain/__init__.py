from .entity import Hotel as Hotel
from .entity import HotelSummary as HotelSummary
from .repository import HotelOrder as HotelOrder
from .repository import HotelRepository as HotelRepository
from .value_object import HotelId as HotelId
from .value_object import HotelName as HotelName
