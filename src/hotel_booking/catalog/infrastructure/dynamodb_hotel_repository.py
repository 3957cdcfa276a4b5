import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError

from hotel_booking.catalog.domain import (
    Hotel,
    HotelId,
    HotelName,
    HotelOrder,
    HotelRepository,
)
from hotel_booking.catalog.domain.repository import filter_by_location, sort_hotels
from hotel_booking.shared.domain import IsoDateTime, Money, PersistenceException
from hotel_booking.shared.utils import to_decimal


class DynamoDBHotelRepository(HotelRepository):
    """HotelRepository backed by the shared DynamoDB table

    Hotels live under PK=HOTEL#<id>, SK=METADATA and are indexed on
    GSI1 (GSI1PK=HOTELS) for bulk listing.
    """

    def __init__(self, table_name: str | None = None, table=None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        if table is None:
            self.dynamodb = boto3.resource("dynamodb")
            table = self.dynamodb.Table(self.table_name)
        self.table = table

    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """Look up a hotel by id"""
        try:
            response = self.table.get_item(
                Key={"PK": f"HOTEL#{hotel_id}", "SK": "METADATA"},
            )
        except (ClientError, BotoCoreError) as e:
            raise PersistenceException(f"Failed to load hotel {hotel_id}: {e}") from e

        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def list_hotels(self, order_by: str | HotelOrder = HotelOrder.NAME) -> list[Hotel]:
        """List every hotel in the catalog"""
        items: list[dict] = []
        kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq("HOTELS"),
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
            raise PersistenceException(f"Failed to list hotels: {e}") from e

        return sort_hotels([self._to_entity(item) for item in items], order_by)

    def search(
        self, location: str | None, order_by: str | HotelOrder = HotelOrder.RATING
    ) -> list[Hotel]:
        """Hotels whose city or state matches the location query

        Filters the full GSI1 listing in memory.
        """
        return filter_by_location(self.list_hotels(order_by), location)

    def _to_entity(self, item: dict) -> Hotel:
        """Convert a DynamoDB item into a Hotel"""
        created_at = item.get("created_at")
        return Hotel(
            id=HotelId(value=item["hotel_id"]),
            name=HotelName(value=item["name"]),
            price_per_night=Money(amount=to_decimal(item["price_per_night"])),
            location=item.get("location", ""),
            city=item.get("city", ""),
            state=item.get("state", ""),
            description=item.get("description", ""),
            rating=to_decimal(item.get("rating", Decimal("0"))),
            amenities=frozenset(item.get("amenities") or ()),
            image_url=item.get("image_url"),
            created_at=IsoDateTime.from_string(created_at) if created_at else None,
        )
