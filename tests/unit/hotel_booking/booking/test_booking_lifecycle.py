from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from hotel_booking.booking.applications import (
    AttemptState,
    BookingAttempt,
    BookingLifecycleController,
)
from hotel_booking.booking.domain import BookingStatus
from hotel_booking.booking.domain.exception import (
    HotelNotFoundException,
    InvalidDateOrderException,
    MissingDatesException,
    UnauthenticatedException,
)
from hotel_booking.booking.infrastructure import InMemoryBookingRepository
from hotel_booking.catalog.domain import HotelId
from hotel_booking.shared.domain import (
    BusinessRuleViolationException,
    Identity,
    PersistenceException,
    UserId,
)


class _BrokenBookingRepository(InMemoryBookingRepository):
    """Simulates a storage fault on write"""

    def _persist(self, booking):
        raise PersistenceException("connection reset by peer")


class TestSubmit:
    def test_confirmed_booking_with_snapshot_total(
        self, controller, identity, booking_request
    ):
        attempt = BookingAttempt(booking_request(check_in="2024-01-01", check_out="2024-01-03"))

        booking = controller.submit(identity, attempt)

        assert booking.status == BookingStatus.CONFIRMED
        assert booking.total_price.amount == Decimal("10000")
        assert booking.user_id == identity.user_id
        assert attempt.state is AttemptState.CONFIRMED
        assert attempt.booking is booking
        assert attempt.error is None

    def test_total_uses_rooms(self, controller, identity, booking_request):
        attempt = BookingAttempt(booking_request(check_out="2024-01-04", rooms=2))

        booking = controller.submit(identity, attempt)

        assert booking.total_price.amount == Decimal("30000")
        assert booking.rooms == 2

    def test_unauthenticated_returns_to_collecting(
        self, controller, booking_repository, booking_request, identity
    ):
        attempt = BookingAttempt(booking_request())

        with pytest.raises(UnauthenticatedException):
            controller.submit(None, attempt)

        assert attempt.state is AttemptState.COLLECTING
        assert isinstance(attempt.error, UnauthenticatedException)
        assert booking_repository.list_for_user(identity.user_id) == []

    def test_validation_failure_keeps_form_and_allows_resubmit(
        self, controller, identity, booking_request
    ):
        attempt = BookingAttempt(booking_request(check_in=None))
        with pytest.raises(MissingDatesException):
            controller.submit(identity, attempt)

        attempt.update(booking_request())
        booking = controller.submit(identity, attempt)

        assert attempt.state is AttemptState.CONFIRMED
        assert booking.stay_period.nights() == 2

    def test_unknown_hotel_fails_attempt(self, controller, identity, booking_request):
        attempt = BookingAttempt(booking_request(hotel_id="does-not-exist"))

        with pytest.raises(HotelNotFoundException):
            controller.submit(identity, attempt)

        assert attempt.state is AttemptState.FAILED
        assert isinstance(attempt.error, HotelNotFoundException)

    def test_persistence_failure_leaves_nothing_visible(
        self, hotel_repository, clock, identity, booking_request
    ):
        repository = _BrokenBookingRepository(hotel_repository=hotel_repository, clock=clock)
        controller = BookingLifecycleController(repository=repository)
        attempt = BookingAttempt(booking_request())

        with pytest.raises(PersistenceException):
            controller.submit(identity, attempt)

        assert attempt.state is AttemptState.FAILED
        assert repository.list_for_user(identity.user_id) == []

    def test_failed_attempt_can_be_retried_with_same_values(
        self, booking_repository, identity, booking_request
    ):
        flaky = MagicMock(wraps=booking_repository)
        flaky.create.side_effect = PersistenceException("timeout")
        controller = BookingLifecycleController(repository=flaky)
        request = booking_request()
        attempt = BookingAttempt(request)

        with pytest.raises(PersistenceException):
            controller.submit(identity, attempt)
        flaky.create.side_effect = booking_repository.create
        attempt.retry()
        booking = controller.submit(identity, attempt)

        assert attempt.request is request
        assert attempt.state is AttemptState.CONFIRMED
        assert len(booking_repository.list_for_user(identity.user_id)) == 1
        assert booking.id == booking_repository.list_for_user(identity.user_id)[0].booking.id

    def test_confirmed_attempt_cannot_be_submitted_again(
        self, controller, identity, booking_request
    ):
        attempt = BookingAttempt(booking_request())
        controller.submit(identity, attempt)

        with pytest.raises(BusinessRuleViolationException):
            controller.submit(identity, attempt)

    def test_failed_attempt_must_be_retried_before_resubmit(
        self, controller, identity, booking_request
    ):
        attempt = BookingAttempt(booking_request(hotel_id="missing"))
        with pytest.raises(HotelNotFoundException):
            controller.submit(identity, attempt)

        with pytest.raises(BusinessRuleViolationException):
            controller.submit(identity, attempt)

    def test_retry_only_from_failed(self, booking_request):
        with pytest.raises(BusinessRuleViolationException):
            BookingAttempt(booking_request()).retry()

    def test_hotel_is_fetched_fresh_at_submit(
        self, controller, hotel_repository, create_hotel, identity, booking_request
    ):
        request = booking_request()
        live_total = controller.quote(request, hotel_repository.find_by_id(create_hotel().id))
        hotel_repository.add(create_hotel(price_per_night=Decimal("6000")))

        booking = controller.submit(identity, BookingAttempt(request))

        assert live_total == Decimal("10000")
        assert booking.total_price.amount == Decimal("12000")

    def test_later_rate_change_does_not_touch_past_bookings(
        self, controller, hotel_repository, create_hotel, identity, booking_request
    ):
        controller.submit(identity, BookingAttempt(booking_request()))
        hotel_repository.add(create_hotel(price_per_night=Decimal("9999")))

        [view] = controller.list_bookings(identity.user_id)

        assert view.booking.total_price.amount == Decimal("10000")

    def test_non_positive_nights_rejected_before_persisting(
        self, booking_repository, identity, booking_request
    ):
        validator = MagicMock()
        validator.validate.return_value = MagicMock(
            hotel_id=HotelId(value="hotel-1"),
            stay_period=MagicMock(nights=MagicMock(return_value=0)),
        )
        repository = MagicMock(wraps=booking_repository)
        controller = BookingLifecycleController(repository=repository, validator=validator)
        attempt = BookingAttempt(booking_request())

        with pytest.raises(InvalidDateOrderException):
            controller.submit(identity, attempt)

        repository.create.assert_not_called()
        assert attempt.state is AttemptState.COLLECTING


class TestQuote:
    def test_quote_for_complete_form(self, controller, create_hotel, booking_request):
        total = controller.quote(booking_request(check_out="2024-01-04", rooms="2"), create_hotel())
        assert total == Decimal("30000")

    def test_quote_without_dates_is_zero(self, controller, create_hotel, booking_request):
        assert controller.quote(booking_request(check_out=None), create_hotel()) == 0


class TestListBookings:
    def test_no_bookings_is_empty_list(self, controller):
        assert controller.list_bookings(UserId(value="nobody")) == []

    def test_most_recent_first_with_hotel_join(self, controller, identity, booking_request):
        first = controller.submit(identity, BookingAttempt(booking_request()))
        second = controller.submit(
            identity, BookingAttempt(booking_request(check_in="2024-02-01", check_out="2024-02-02"))
        )

        views = controller.list_bookings(identity.user_id)

        assert [v.booking.id for v in views] == [second.id, first.id]
        assert views[0].hotel.name == "Taj Lake Palace"
        assert views[0].hotel.city == "Udaipur"

    def test_only_own_bookings_are_listed(self, controller, identity, booking_request):
        other = Identity(user_id=UserId(value="user-999"))
        controller.submit(identity, BookingAttempt(booking_request()))
        controller.submit(other, BookingAttempt(booking_request()))

        views = controller.list_bookings(identity.user_id)

        assert len(views) == 1
        assert views[0].booking.user_id == identity.user_id

    def test_listing_twice_is_stable(self, controller, identity, booking_request):
        for _ in range(3):
            controller.submit(identity, BookingAttempt(booking_request()))

        first = [v.booking.id for v in controller.list_bookings(identity.user_id)]
        second = [v.booking.id for v in controller.list_bookings(identity.user_id)]

        assert first == second

    def test_overlapping_bookings_are_not_prevented(self, controller, identity, booking_request):
        other = Identity(user_id=UserId(value="user-999"))
        controller.submit(identity, BookingAttempt(booking_request()))
        booking = controller.submit(other, BookingAttempt(booking_request()))

        assert booking.status == BookingStatus.CONFIRMED

    def test_list_does_not_authenticate(self, booking_repository):
        repository = MagicMock(wraps=booking_repository)
        controller = BookingLifecycleController(repository=repository)

        controller.list_bookings(UserId(value="user-123"))

        repository.list_for_user.assert_called_once_with(UserId(value="user-123"))
