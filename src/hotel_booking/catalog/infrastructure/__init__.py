from .in_memory_hotel_repository import (
    InMemoryHotelRepository as InMemoryHotelRepository,
)
