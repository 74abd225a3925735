"""Session object pairing a user id with one DToken."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Generic, TypeVar

from ..token.factory import TokenFactory
from ..token.model import DToken
from ..token.types import Clock
from ..utils.time import to_epoch_ms, utc_now

UserIdT = TypeVar("UserIdT")
IdentityComparator = Callable[[UserIdT, UserIdT], bool]


def default_identity_comparator(a: UserIdT, b: UserIdT) -> bool:
    return a == b


@dataclass
class Session(Generic[UserIdT]):
    """A user's session token.

    ``comparator`` decides whether two user ids are the same user. Supply one
    when the id type has no meaningful ``==`` (driver-specific id objects, for
    example).

    ``clock`` is read by ``has_expired``; sessions built with ``create`` share
    the factory's clock.
    """

    user_id: UserIdT
    token: DToken
    expiration: datetime | None = None
    comparator: IdentityComparator = field(default=default_identity_comparator, repr=False)
    clock: Clock = field(default=utc_now, repr=False)

    @classmethod
    def create(
        cls,
        user_id: UserIdT,
        factory: TokenFactory,
        *,
        expiration: datetime | None = None,
        token: DToken | str | None = None,
        comparator: IdentityComparator | None = None,
    ) -> "Session[UserIdT]":
        """Build a session; ``token`` may be a DToken, a token string or None for a fresh token."""
        if token is None:
            resolved = factory.create()
        elif isinstance(token, str):
            resolved = factory.from_string(token)
        else:
            resolved = token
        return cls(
            user_id=user_id,
            token=resolved,
            expiration=expiration,
            comparator=comparator or default_identity_comparator,
            clock=factory.clock,
        )

    @property
    def session_token(self) -> str:
        """Alias for token.to_string()."""
        return self.token.to_string()

    @property
    def has_expired(self) -> bool:
        """Whether the expiration has passed (False if the session never expires)."""
        if self.expiration is None:
            return False
        return to_epoch_ms(self.expiration) <= to_epoch_ms(self.clock())

    def validate_token(self, token: str) -> bool:
        return self.token.validate_string(token)

    def validate_user_id(self, user_id: UserIdT) -> bool:
        return self.comparator(self.user_id, user_id)

    def validate(self, user_id: UserIdT, token: str) -> bool:
        """Validate both the user id and the token string."""
        return self.validate_user_id(user_id) and self.validate_token(token)

    def next(self) -> str:
        """Alias for token.next()."""
        return self.token.next()
