from dataclasses import dataclass

from .user_id import UserId


@dataclass(frozen=True)
class Identity:
    """Authenticated user reference resolved from the identity provider

    Resolved per request from the authorizer claims; never cached between
    requests.
    """

    user_id: UserId
    email: str | None = None
