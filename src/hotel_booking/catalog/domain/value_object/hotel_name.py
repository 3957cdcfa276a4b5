from dataclasses import dataclass

MAX_LENGTH = 200


@dataclass(frozen=True)
class HotelName:
    """Hotel display name"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Hotel name cannot be empty")
        if len(self.value) > MAX_LENGTH:
            raise ValueError(f"Hotel name is too long (max {MAX_LENGTH} characters)")

    def __str__(self) -> str:
        return self.value
