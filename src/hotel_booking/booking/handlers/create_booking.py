from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from hotel_booking.booking.applications import (
    BookingAttempt,
    BookingLifecycleController,
)
from hotel_booking.booking.domain.exception import (
    BookingValidationException,
    UnauthenticatedException,
)
from hotel_booking.booking.handlers.request_models import CreateBookingRequest
from hotel_booking.booking.handlers.response_models import to_response
from hotel_booking.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from hotel_booking.shared.domain import (
    PersistenceException,
    ResourceNotFoundException,
)
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
    """Create booking Lambda handler (POST /bookings)"""
    logger.info("Received create booking request")

    try:
        payload = CreateBookingRequest.model_validate_json(event.body or "{}")
    except ValidationError as e:
        logger.info("Malformed booking request body")
        return error_response(
            400, "Invalid booking request", errors=e.errors(include_url=False)
        )

    # resolved per request so a session that expired after page load is caught
    identity = get_current_identity(event)
    attempt = BookingAttempt(payload.to_booking_request())

    try:
        booking = controller.submit(identity, attempt)
    except UnauthenticatedException as e:
        return error_response(401, e.message, redirect=sign_in_redirect())
    except BookingValidationException as e:
        return error_response(400, e.message)
    except ResourceNotFoundException as e:
        return error_response(404, str(e))
    except PersistenceException:
        return error_response(503, "Booking failed, please try again")

    return api_response(201, to_response(booking))
