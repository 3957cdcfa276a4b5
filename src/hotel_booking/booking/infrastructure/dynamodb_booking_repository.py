import os
from collections.abc import Callable
from datetime import date

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import BotoCoreError, ClientError

from hotel_booking.booking.domain import (
    Booking,
    BookingId,
    BookingRepository,
    BookingStatus,
    BookingView,
    NewBooking,
    StayPeriod,
)
from hotel_booking.booking.domain.exception import HotelNotFoundException
from hotel_booking.booking.domain.repository import join_with_hotels
from hotel_booking.catalog.domain import Hotel, HotelId, HotelRepository
from hotel_booking.catalog.infrastructure.dynamodb_hotel_repository import (
    DynamoDBHotelRepository,
)
from hotel_booking.shared.domain import (
    IsoDateTime,
    Money,
    PersistenceException,
    UserId,
)
from hotel_booking.shared.utils import to_decimal


class DynamoDBBookingRepository(BookingRepository):
    """BookingRepository backed by the shared DynamoDB table

    Bookings live under PK=USER#<user_id>, SK=BOOKING#<created_at>#<id>.
    created_at is fixed-width UTC, so a descending key query returns a
    user's bookings most recent first.
    """

    def __init__(
        self,
        hotel_repository: HotelRepository | None = None,
        table_name: str | None = None,
        table=None,
        clock: Callable[[], IsoDateTime] = IsoDateTime.now,
    ) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        if table is None:
            self.dynamodb = boto3.resource("dynamodb")
            table = self.dynamodb.Table(self.table_name)
        self.table = table
        self.hotel_repository = hotel_repository or DynamoDBHotelRepository(
            table_name=self.table_name, table=self.table
        )
        self._clock = clock

    def create(self, new_booking: NewBooking) -> Booking:
        """Write the booking in a single conditional put"""
        booking = Booking.from_new(
            id=BookingId.generate(),
            new_booking=new_booking,
            created_at=self._clock(),
            status=BookingStatus.CONFIRMED,
        )
        item = {
            "PK": f"USER#{booking.user_id}",
            "SK": f"BOOKING#{booking.created_at}#{booking.id}",
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "user_id": str(booking.user_id),
            "hotel_id": str(booking.hotel_id),
            "check_in_date": booking.stay_period.check_in.isoformat(),
            "check_out_date": booking.stay_period.check_out.isoformat(),
            "guests": booking.guests,
            "rooms": booking.rooms,
            "total_price": str(booking.total_price.amount),
            "status": booking.status.value,
            "created_at": str(booking.created_at),
        }
        if booking.special_requests:
            item["special_requests"] = booking.special_requests

        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            raise PersistenceException(
                f"Failed to save booking {booking.id}: "
                f"{e.response.get('Error', {}).get('Message', e)}"
            ) from e
        except BotoCoreError as e:
            raise PersistenceException(f"Failed to save booking {booking.id}: {e}") from e
        return booking

    def list_for_user(self, user_id: UserId) -> list[BookingView]:
        """Bookings of one user, most recent first, joined with hotels"""
        items: list[dict] = []
        kwargs: dict = {
            "KeyConditionExpression": Key("PK").eq(f"USER#{user_id}")
            & Key("SK").begins_with("BOOKING#"),
            "ScanIndexForward": False,
            "ConsistentRead": True,
        }
        try:
            while True:
                response = self.table.query(**kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                kwargs["ExclusiveStartKey"] = last_key
        except (ClientError, BotoCoreError) as e:
            raise PersistenceException(
                f"Failed to load bookings for user {user_id}: {e}"
            ) from e

        bookings = [self._to_entity(item) for item in items]
        return join_with_hotels(bookings, self.hotel_repository)

    def get_hotel(self, hotel_id: HotelId) -> Hotel:
        """Look up a hotel through the catalog"""
        hotel = self.hotel_repository.find_by_id(hotel_id)
        if hotel is None:
            raise HotelNotFoundException(f"Hotel not found: {hotel_id}")
        return hotel

    def _to_entity(self, item: dict) -> Booking:
        """Convert a DynamoDB item into a Booking"""
        return Booking(
            id=BookingId(value=item["booking_id"]),
            user_id=UserId(value=item["user_id"]),
            hotel_id=HotelId(value=item["hotel_id"]),
            stay_period=StayPeriod(
                check_in=date.fromisoformat(item["check_in_date"]),
                check_out=date.fromisoformat(item["check_out_date"]),
            ),
            guests=int(item["guests"]),
            rooms=int(item["rooms"]),
            total_price=Money(amount=to_decimal(item["total_price"])),
            created_at=IsoDateTime.from_string(item["created_at"]),
            special_requests=item.get("special_requests"),
            status=BookingStatus(item["status"]),
        )
