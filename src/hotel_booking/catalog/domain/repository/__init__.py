from .hotel_repository import HotelOrder as HotelOrder
from .hotel_repository import HotelRepository as HotelRepository
from .hotel_repository import filter_by_location as filter_by_location
from .hotel_repository import sort_hotels as sort_hotels
