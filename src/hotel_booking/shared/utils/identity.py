import os
from collections.abc import Mapping

from hotel_booking.shared.domain import Identity, UserId

DEFAULT_SIGN_IN_PATH = "/auth"


def get_current_identity(event: Mapping) -> Identity | None:
    """Resolve the caller's identity from the authorizer claims of a request

    API Gateway puts the verified Cognito claims under
    requestContext.authorizer.claims. A missing or expired session leaves
    them out, in which case None is returned.
    """
    request_context = event.get("requestContext") or {}
    authorizer = request_context.get("authorizer") or {}
    claims = authorizer.get("claims") or {}

    subject = claims.get("sub")
    if not subject:
        return None
    return Identity(user_id=UserId(value=subject), email=claims.get("email"))


def sign_in_redirect() -> str:
    """Route unauthenticated callers are sent to"""
    return os.getenv("SIGN_IN_PATH", DEFAULT_SIGN_IN_PATH)
