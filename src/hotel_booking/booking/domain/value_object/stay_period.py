from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class StayPeriod:
    """Stay period as the half-open range [check-in, check-out)"""

    check_in: date
    check_out: date

    def __post_init__(self) -> None:
        if self.check_out <= self.check_in:
            raise ValueError("Check-out date must be after check-in date")

    def nights(self) -> int:
        """Number of nights in the stay"""
        return (self.check_out - self.check_in).days
