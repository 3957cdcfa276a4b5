import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

# handler modules build their boto3 resources at import time
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "hotel-booking-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "booking-service")

from hotel_booking.booking.applications import BookingLifecycleController  # noqa: E402
from hotel_booking.booking.infrastructure import InMemoryBookingRepository  # noqa: E402
from hotel_booking.catalog.domain import Hotel, HotelId, HotelName  # noqa: E402
from hotel_booking.catalog.infrastructure import InMemoryHotelRepository  # noqa: E402
from hotel_booking.shared.domain import Identity, IsoDateTime, Money, UserId  # noqa: E402


@pytest.fixture
def user_id():
    """UserId shared by every test"""
    return UserId(value="user-123")


@pytest.fixture
def identity(user_id):
    return Identity(user_id=user_id, email="guest@example.com")


@pytest.fixture
def create_hotel():
    """Factory fixture building Hotel entities"""

    def _factory(
        hotel_id: str = "hotel-1",
        name: str = "Taj Lake Palace",
        price_per_night: Decimal = Decimal("5000"),
        city: str = "Udaipur",
        state: str = "Rajasthan",
        rating: Decimal = Decimal("4.8"),
        created_at: IsoDateTime | None = None,
    ) -> Hotel:
        return Hotel(
            id=HotelId(value=hotel_id),
            name=HotelName(value=name),
            price_per_night=Money(amount=price_per_night),
            location="Lake Pichola",
            city=city,
            state=state,
            description="Palace hotel on the lake",
            rating=rating,
            amenities=frozenset({"wifi", "pool"}),
            image_url=f"https://images.example.com/{hotel_id}.jpg",
            created_at=created_at,
        )

    return _factory


@pytest.fixture
def clock():
    """Clock that moves forward one second per call"""
    start = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
    ticks = iter(range(10_000))

    def _now() -> IsoDateTime:
        return IsoDateTime(value=start + timedelta(seconds=next(ticks)))

    return _now


@pytest.fixture
def hotel_repository(create_hotel):
    return InMemoryHotelRepository([create_hotel()])


@pytest.fixture
def booking_repository(hotel_repository, clock):
    return InMemoryBookingRepository(hotel_repository=hotel_repository, clock=clock)


@pytest.fixture
def controller(booking_repository):
    return BookingLifecycleController(repository=booking_repository)


@dataclass
class FakeLambdaContext:
    function_name: str = "test-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:test-function"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """Factory fixture building API Gateway proxy events"""

    def _factory(
        body: str | None = None,
        claims: dict | None = None,
        path_parameters: dict | None = None,
        query_string_parameters: dict | None = None,
        method: str = "GET",
        path: str = "/bookings",
    ) -> dict:
        request_context: dict = {"requestId": "req-1", "stage": "prod"}
        if claims is not None:
            request_context["authorizer"] = {"claims": claims}
        return {
            "resource": path,
            "path": path,
            "httpMethod": method,
            "headers": {"Content-Type": "application/json"},
            "pathParameters": path_parameters,
            "queryStringParameters": query_string_parameters,
            "requestContext": request_context,
            "body": body,
            "isBase64Encoded": False,
        }

    return _factory
