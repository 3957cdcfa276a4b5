from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_booking.booking.applications import BookingLifecycleController
from hotel_booking.booking.domain import BookingRequest, PricingEngine
from hotel_booking.booking.handlers.response_models import QuoteData, QuoteResponse
from hotel_booking.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from hotel_booking.catalog.domain import HotelId
from hotel_booking.shared.domain import (
    PersistenceException,
    ResourceNotFoundException,
)
from hotel_booking.shared.utils import api_response, error_response

logger = Logger()

repository = DynamoDBBookingRepository()
pricing_engine = PricingEngine()
controller = BookingLifecycleController(
    repository=repository, pricing_engine=pricing_engine
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """Live total for the booking form (GET /hotels/{hotel_id}/quote)"""

    path_params = event.path_parameters or {}
    hotel_id = path_params.get("hotel_id")
    if not hotel_id:
        return error_response(400, "hotel_id is required")

    params = event.query_string_parameters or {}
    try:
        rooms = int(params.get("rooms") or 1)
    except ValueError:
        return error_response(400, "rooms must be a whole number")
    if rooms < 1:
        return error_response(400, "rooms must be at least 1")

    try:
        hotel = repository.get_hotel(HotelId(value=hotel_id))
    except ResourceNotFoundException as e:
        return error_response(404, str(e))
    except PersistenceException:
        logger.exception("Failed to load hotel details")
        return error_response(503, "Failed to load hotel details")

    request = BookingRequest(
        hotel_id=hotel_id,
        check_in=params.get("check_in_date"),
        check_out=params.get("check_out_date"),
        rooms=rooms,
    )
    nights = pricing_engine.count_nights(request.check_in, request.check_out)
    total = controller.quote(request, hotel)

    quote = QuoteData(
        hotel_id=hotel_id,
        nightly_rate=str(hotel.price_per_night.amount),
        nights=nights,
        rooms=rooms,
        total_price=str(total),
        computable=nights is not None and nights > 0,
    )
    return api_response(200, QuoteResponse(data=quote).model_dump())
