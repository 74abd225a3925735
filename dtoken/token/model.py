"""The DToken value object."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict

from ..utils.time import to_epoch_ms
from .generators import GeneratorSlots
from .grammar import format_token, parse_token_string
from .types import Clock, TokenRecord

logger = logging.getLogger(__name__)


class DToken:
    """A persistent id, a rotating transient id and their two timestamps.

    Tokens are built by a TokenFactory and keep a reference to its generator
    slots, so ``next()`` always uses the factory's current transient generator.
    """

    def __init__(
        self,
        persistent: str,
        transient: str,
        created: datetime,
        last_updated: datetime,
        *,
        generators: GeneratorSlots,
        clock: Clock,
    ) -> None:
        self.persistent = persistent
        self.transient = transient
        self.created = created
        self.last_updated = last_updated
        self._generators = generators
        self._clock = clock

    def __repr__(self) -> str:
        return (
            f"DToken(persistent={self.persistent!r}, transient={self.transient!r}, "
            f"created={self.created.isoformat()}, last_updated={self.last_updated.isoformat()})"
        )

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        """Return the token as PERSISTENT_TRANSIENT:CREATED_LASTUPDATED."""
        return format_token(self)

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain record suitable for TokenFactory.from_object."""
        return {
            "persistent": self.persistent,
            "transient": self.transient,
            "created": self.created,
            "last_updated": self.last_updated,
        }

    def next(self) -> str:
        """Replace the transient id with a freshly generated one and return the old one."""
        old = self.transient
        self.transient = self._generators.transient()
        logger.debug("Rotated transient id (len %d -> len %d)", len(old), len(self.transient))
        return old

    def touch(self) -> None:
        """Set last_updated to the current time."""
        self.last_updated = self._clock()

    def validate(self, token: TokenRecord) -> bool:
        """Return True when every field of ``token`` matches this token exactly."""
        return (
            to_epoch_ms(token.created) == to_epoch_ms(self.created)
            and to_epoch_ms(token.last_updated) == to_epoch_ms(self.last_updated)
            and token.persistent == self.persistent
            and token.transient == self.transient
        )

    def validate_string(self, token: str) -> bool:
        """Parse ``token`` and validate it against this token.

        Parse failures raise InvalidFormatError or InvalidTimestampError.
        """
        return self.validate(parse_token_string(token, self._clock).unwrap())
