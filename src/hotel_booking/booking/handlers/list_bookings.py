from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_booking.booking.applications import BookingLifecycleController
from hotel_booking.booking.handlers.response_models import to_list_response
from hotel_booking.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from hotel_booking.shared.domain import PersistenceException
from hotel_booking.shared.utils import (
    api_response,
    error_response,
    get_current_identity,
    sign_in_redirect,
)

logger = Logger()

repository = DynamoDBBookingRepository()
controller = BookingLifecycleController(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """List my bookings Lambda handler (GET /bookings)"""

    # route-level gate: the controller assumes an authenticated caller
    identity = get_current_identity(event)
    if identity is None:
        return error_response(
            401, "Please sign in to view your bookings", redirect=sign_in_redirect()
        )

    logger.info("Listing bookings", extra={"user_id": str(identity.user_id)})

    try:
        views = controller.list_bookings(identity.user_id)
    except PersistenceException:
        logger.exception("Failed to load bookings")
        return error_response(503, "Failed to load bookings")

    return api_response(200, to_list_response(views))
