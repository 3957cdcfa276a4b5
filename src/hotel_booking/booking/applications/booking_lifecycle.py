from decimal import Decimal
from enum import Enum

from aws_lambda_powertools import Logger

from hotel_booking.booking.domain import (
    Booking,
    BookingFactory,
    BookingRepository,
    BookingRequest,
    BookingValidator,
    BookingView,
    PricingEngine,
)
from hotel_booking.booking.domain.exception import (
    BookingValidationException,
    InvalidDateOrderException,
)
from hotel_booking.catalog.domain import Hotel
from hotel_booking.shared.domain import (
    BusinessRuleViolationException,
    DomainException,
    Identity,
    UserId,
)

logger = Logger(child=True)


class AttemptState(str, Enum):
    """Where a booking attempt is in its lifecycle"""

    COLLECTING = "collecting"
    VALIDATING = "validating"
    PRICING = "pricing"
    PERSISTING = "persisting"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class BookingAttempt:
    """One user's attempt to book, from form entry to a terminal outcome"""

    def __init__(self, request: BookingRequest) -> None:
        self._request = request
        self._state = AttemptState.COLLECTING
        self._error: DomainException | None = None
        self._booking: Booking | None = None

    @property
    def request(self) -> BookingRequest:
        return self._request

    @property
    def state(self) -> AttemptState:
        return self._state

    @property
    def error(self) -> DomainException | None:
        return self._error

    @property
    def booking(self) -> Booking | None:
        return self._booking

    def update(self, request: BookingRequest) -> None:
        """Replace the form values while still collecting"""
        if self._state is not AttemptState.COLLECTING:
            raise BusinessRuleViolationException(
                f"Cannot edit a booking attempt in {self._state.value} state"
            )
        self._request = request

    def retry(self) -> None:
        """Go back to collecting after a failure, keeping the same values"""
        if self._state is not AttemptState.FAILED:
            raise BusinessRuleViolationException(
                f"Cannot retry a booking attempt in {self._state.value} state"
            )
        self._state = AttemptState.COLLECTING

    def advance(self, state: AttemptState) -> None:
        self._state = state

    def reject(self, error: BookingValidationException) -> None:
        self._state = AttemptState.COLLECTING
        self._error = error

    def fail(self, error: DomainException) -> None:
        self._state = AttemptState.FAILED
        self._error = error

    def confirm(self, booking: Booking) -> None:
        self._state = AttemptState.CONFIRMED
        self._error = None
        self._booking = booking


class BookingLifecycleController:
    """Booking use cases: live quote, submission and listing

    Submission runs validate -> price -> persist, in that order, for one
    attempt. Errors are recorded on the attempt and then raised to the
    caller; none is retried here.
    """

    def __init__(
        self,
        repository: BookingRepository,
        validator: BookingValidator | None = None,
        pricing_engine: PricingEngine | None = None,
        factory: BookingFactory | None = None,
    ) -> None:
        self._repository = repository
        self._validator = validator or BookingValidator()
        self._pricing_engine = pricing_engine or PricingEngine()
        self._factory = factory or BookingFactory()

    def quote(self, request: BookingRequest, hotel: Hotel) -> Decimal:
        """Running total shown while the user fills in the form

        Display only. submit() prices again from a freshly fetched hotel.
        """
        try:
            rooms = int(request.rooms)
        except (TypeError, ValueError):
            rooms = 1
        return self._pricing_engine.compute_total(
            request.check_in, request.check_out, hotel.price_per_night, rooms
        )

    def submit(self, identity: Identity | None, attempt: BookingAttempt) -> Booking:
        """Validate, price and persist a booking attempt"""
        if attempt.state is AttemptState.CONFIRMED:
            raise BusinessRuleViolationException("Booking attempt is already confirmed")
        if attempt.state is not AttemptState.COLLECTING:
            raise BusinessRuleViolationException(
                f"Cannot submit a booking attempt in {attempt.state.value} state"
            )

        attempt.advance(AttemptState.VALIDATING)
        try:
            validated = self._validator.validate(identity, attempt.request)
        except BookingValidationException as e:
            logger.info(
                "Booking request rejected",
                extra={"reason": type(e).__name__, "hotel_id": attempt.request.hotel_id},
            )
            attempt.reject(e)
            raise
        except DomainException as e:
            attempt.fail(e)
            raise

        attempt.advance(AttemptState.PRICING)
        try:
            hotel = self._repository.get_hotel(validated.hotel_id)
        except DomainException as e:
            logger.warning(
                "Hotel lookup failed",
                extra={"hotel_id": str(validated.hotel_id), "reason": type(e).__name__},
            )
            attempt.fail(e)
            raise

        nights = validated.stay_period.nights()
        if nights <= 0:
            error = InvalidDateOrderException()
            attempt.reject(error)
            raise error

        total = self._pricing_engine.compute_total(
            validated.stay_period.check_in,
            validated.stay_period.check_out,
            hotel.price_per_night,
            validated.rooms,
        )
        new_booking = self._factory.create(identity.user_id, validated, total)

        attempt.advance(AttemptState.PERSISTING)
        try:
            booking = self._repository.create(new_booking)
        except DomainException as e:
            logger.exception(
                "Booking could not be persisted",
                extra={"hotel_id": str(validated.hotel_id), "user_id": str(identity.user_id)},
            )
            attempt.fail(e)
            raise

        attempt.confirm(booking)
        logger.info(
            "Booking confirmed",
            extra={
                "booking_id": str(booking.id),
                "hotel_id": str(booking.hotel_id),
                "nights": nights,
                "total_price": str(booking.total_price),
            },
        )
        return booking

    def list_bookings(self, user_id: UserId) -> list[BookingView]:
        """Bookings of a user who was already authenticated by the caller"""
        return self._repository.list_for_user(user_id)
