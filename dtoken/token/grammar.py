"""Grammar for the serialized token format.

    PERSISTENT_TRANSIENT[:CREATED[_LASTUPDATED]]

PERSISTENT and TRANSIENT are opaque strings without ``_`` or ``:``. CREATED and
LASTUPDATED are epoch milliseconds, read from their leading integer digits. A
missing timestamp defaults to the clock's current time; each default is a
separate clock read.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime

from ..utils.time import from_epoch_ms, to_epoch_ms
from .types import Clock, ParsedToken, ParseFailureKind, ParseResult, TokenRecord

logger = logging.getLogger(__name__)

SEGMENT_SEPARATOR = ":"
FIELD_SEPARATOR = "_"
RESERVED_CHARACTERS = frozenset(SEGMENT_SEPARATOR + FIELD_SEPARATOR)

_TOKEN_RE = re.compile(r"(?P<identity>[^:]*)(?::(?P<timestamps>[^:]*))?")
_IDENTITY_RE = re.compile(r"(?P<persistent>[^_:]+)_(?P<transient>[^_:]+)")
_TIMESTAMPS_RE = re.compile(r"(?P<created>[^_]*)(?:_(?P<last_updated>[^_]*))?")
_EPOCH_MS_RE = re.compile(r"\s*(?P<value>[+-]?[0-9]+)")

CREATED_FIELD = "created"
LAST_UPDATED_FIELD = "lastUpdated"


def is_identifier(value: object) -> bool:
    """Return True when ``value`` can stand as a persistent or transient id."""
    return isinstance(value, str) and value != "" and not RESERVED_CHARACTERS.intersection(value)


def _parse_epoch_ms(raw: str) -> datetime | None:
    # Leading integer wins, trailing characters are ignored: "123|456" is 123.
    match = _EPOCH_MS_RE.match(raw)
    if match is None:
        return None
    try:
        return from_epoch_ms(int(match.group("value")))
    except (OverflowError, ValueError):
        return None


def _timestamp_failure(source: str, raw: str, field: str) -> ParseResult:
    logger.debug("Rejected token string: invalid %s timestamp", field)
    return ParseResult(source=source, failure=ParseFailureKind.INVALID_TIMESTAMP, field=field, value=raw)


def _format_failure(source: str) -> ParseResult:
    logger.debug("Rejected token string of length %d: invalid format", len(source))
    return ParseResult(source=source, failure=ParseFailureKind.INVALID_FORMAT, value=source)


def parse_token_string(source: str, clock: Clock) -> ParseResult:
    """Parse ``source`` into token fields without raising."""
    token_match = _TOKEN_RE.fullmatch(source)
    if token_match is None:
        return _format_failure(source)

    identity_match = _IDENTITY_RE.fullmatch(token_match.group("identity"))
    if identity_match is None:
        return _format_failure(source)

    timestamps = token_match.group("timestamps")
    if timestamps is None:
        created = clock()
        last_updated = clock()
    else:
        timestamps_match = _TIMESTAMPS_RE.fullmatch(timestamps)
        if timestamps_match is None:
            return _format_failure(source)

        raw_created = timestamps_match.group("created")
        parsed_created = _parse_epoch_ms(raw_created)
        if parsed_created is None:
            return _timestamp_failure(source, raw_created, CREATED_FIELD)
        created = parsed_created

        raw_last_updated = timestamps_match.group("last_updated")
        if raw_last_updated is None:
            last_updated = clock()
        else:
            parsed_last_updated = _parse_epoch_ms(raw_last_updated)
            if parsed_last_updated is None:
                return _timestamp_failure(source, raw_last_updated, LAST_UPDATED_FIELD)
            last_updated = parsed_last_updated

    return ParseResult(
        source=source,
        token=ParsedToken(
            persistent=identity_match.group("persistent"),
            transient=identity_match.group("transient"),
            created=created,
            last_updated=last_updated,
        ),
    )


def format_token(record: TokenRecord) -> str:
    """Render ``record`` as PERSISTENT_TRANSIENT:CREATED_LASTUPDATED."""
    created_ms = to_epoch_ms(record.created)
    last_updated_ms = to_epoch_ms(record.last_updated)
    return (
        f"{record.persistent}{FIELD_SEPARATOR}{record.transient}"
        f"{SEGMENT_SEPARATOR}{created_ms}{FIELD_SEPARATOR}{last_updated_ms}"
    )
