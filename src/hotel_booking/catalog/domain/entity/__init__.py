from .hotel import Hotel as Hotel
from .hotel import HotelSummary as HotelSummary
