from datetime import date
from decimal import Decimal

from hotel_booking.shared.domain import Money
from hotel_booking.shared.utils import to_date, to_decimal

DateLike = date | str | None


class PricingEngine:
    """Computes the total cost of a stay

    Pure: same inputs, same total, no I/O.
    """

    def count_nights(self, check_in: DateLike, check_out: DateLike) -> int | None:
        """Whole nights between two calendar dates

        Both values are reduced to local calendar dates before subtracting,
        so date-only input never picks up timezone skew. Returns None when
        either date is missing or unparseable. The count is not clamped and
        can be zero or negative.
        """
        check_in_date = to_date(check_in)
        check_out_date = to_date(check_out)
        if check_in_date is None or check_out_date is None:
            return None
        return (check_out_date - check_in_date).days

    def compute_total(
        self,
        check_in: DateLike,
        check_out: DateLike,
        nightly_rate: Money | Decimal | int | str,
        rooms: int,
    ) -> Decimal:
        """nights x nightly_rate x rooms

        Returns 0 when the dates are not both available; callers must read
        that as "not computable yet", not as a free stay.
        """
        nights = self.count_nights(check_in, check_out)
        if nights is None:
            return Decimal("0")
        rate = nightly_rate.amount if isinstance(nightly_rate, Money) else to_decimal(nightly_rate)
        return nights * rate * rooms
