from dataclasses import dataclass


@dataclass(frozen=True)
class HotelId:
    """Hotel identifier (opaque string owned by the catalog)"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("HotelId cannot be empty")

    def __str__(self) -> str:
        return self.value
