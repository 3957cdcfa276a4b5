from datetime import date

import pytest

from hotel_booking.booking.domain import StayPeriod


class TestStayPeriod:
    def test_nights_calculation(self):
        assert StayPeriod(date(2024, 1, 1), date(2024, 1, 3)).nights() == 2

    def test_single_night_stay(self):
        assert StayPeriod(date(2024, 1, 1), date(2024, 1, 2)).nights() == 1

    def test_stay_across_month_end(self):
        assert StayPeriod(date(2024, 2, 28), date(2024, 3, 1)).nights() == 2

    def test_checkout_before_checkin_raises_error(self):
        with pytest.raises(ValueError, match="Check-out date must be after check-in date"):
            StayPeriod(date(2024, 1, 3), date(2024, 1, 1))

    def test_same_date_raises_error(self):
        with pytest.raises(ValueError, match="Check-out date must be after check-in date"):
            StayPeriod(date(2024, 1, 1), date(2024, 1, 1))
