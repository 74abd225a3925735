"""Token construction with per-factory generator configuration."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from ..config import TokenConfig
from ..errors import InvalidFormatError
from ..utils.time import utc_now_ms
from .generators import GeneratorSlots
from .grammar import is_identifier, parse_token_string
from .model import DToken
from .types import Clock, ParseResult, StringGenerator

IDENTIFIER_FORMAT = "a non-empty id without '_' or ':'"
_MISSING = object()
_RECORD_KEYS = {
    "persistent": ("persistent",),
    "transient": ("transient",),
    "created": ("created",),
    "last_updated": ("last_updated", "lastUpdated"),
}


def _record_field(obj: Any, name: str) -> Any:
    for key in _RECORD_KEYS[name]:
        if isinstance(obj, Mapping):
            value = obj.get(key, _MISSING)
        else:
            value = getattr(obj, key, _MISSING)
        if value is not _MISSING:
            return value
    raise InvalidFormatError(repr(obj), f"a record with {', '.join(_RECORD_KEYS)}")


def _checked_identifier(value: Any) -> str:
    if not is_identifier(value):
        raise InvalidFormatError(str(value), IDENTIFIER_FORMAT)
    return value


class TokenFactory:
    """Create, parse and rehydrate DTokens sharing one generator configuration.

    Independent factories never share generators, so tests and tenants can each
    hold their own configuration.
    """

    def __init__(
        self,
        config: TokenConfig | None = None,
        *,
        persistent_generator: StringGenerator | None = None,
        transient_generator: StringGenerator | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.config = config or TokenConfig()
        self.generators = GeneratorSlots(
            self.config,
            persistent=persistent_generator,
            transient=transient_generator,
        )
        self.clock: Clock = clock or utc_now_ms

    def set_persistent_generator(self, fn: StringGenerator) -> None:
        """Replace how persistent ids are created.

        ``fn`` is called once immediately; InvalidGeneratorError is raised and
        the current generator kept if it does not return a valid id string.

        Example, reusing BSON object ids (24 hex characters)::

            factory.set_persistent_generator(lambda: str(ObjectId()))
        """
        self.generators.set_persistent(fn)

    def set_transient_generator(self, fn: StringGenerator) -> None:
        """Replace how transient ids are created. Checked like set_persistent_generator."""
        self.generators.set_transient(fn)

    def _build(self, persistent: str, transient: str, created: datetime, last_updated: datetime) -> DToken:
        return DToken(
            persistent,
            transient,
            created,
            last_updated,
            generators=self.generators,
            clock=self.clock,
        )

    def create(
        self,
        persistent: str | None = None,
        transient: str | None = None,
        created: datetime | None = None,
        last_updated: datetime | None = None,
    ) -> DToken:
        """Create a token, generating or defaulting every field not supplied.

        Supplied ids are checked so the token can be parsed back from its string
        form; an id containing ``_`` or ``:`` raises InvalidFormatError.
        """
        return self._build(
            _checked_identifier(persistent) if persistent else self.generators.persistent(),
            _checked_identifier(transient) if transient else self.generators.transient(),
            created if created is not None else self.clock(),
            last_updated if last_updated is not None else self.clock(),
        )

    def parse(self, token: str) -> ParseResult:
        """Parse a token string into a tagged result without raising."""
        return parse_token_string(token, self.clock)

    def from_string(self, token: str) -> DToken:
        """Parse a DToken from PERSISTENT_TRANSIENT[:CREATED[_LASTUPDATED]].

        Missing timestamps are set to now::

            factory.from_string("PERSISTENT_TRANSIENT")
            factory.from_string("PERSISTENT_TRANSIENT:1535454879537")
            factory.from_string("PERSISTENT_TRANSIENT:1535454850203_1535454879537")
        """
        parsed = self.parse(token).unwrap()
        return self._build(parsed.persistent, parsed.transient, parsed.created, parsed.last_updated)

    def from_object(self, obj: Any) -> DToken:
        """Rehydrate a DToken from an object or mapping with the token's fields, copied verbatim.

        Ids that could not survive a string round-trip raise InvalidFormatError.
        """
        return self._build(
            _checked_identifier(_record_field(obj, "persistent")),
            _checked_identifier(_record_field(obj, "transient")),
            _record_field(obj, "created"),
            _record_field(obj, "last_updated"),
        )
