"""Token datatypes and parse results."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Protocol

from ..errors import DTokenError, InvalidFormatError, InvalidTimestampError

StringGenerator = Callable[[], str]
Clock = Callable[[], datetime]


class TokenRecord(Protocol):
    """Public shape shared by tokens and records loaded from storage."""

    persistent: str
    transient: str
    created: datetime
    last_updated: datetime


class ParseFailureKind(str, Enum):
    """Why a token string was rejected."""

    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_TIMESTAMP = "INVALID_TIMESTAMP"


@dataclass(frozen=True)
class ParsedToken:
    """The four resolved fields of a parsed token string."""

    persistent: str
    transient: str
    created: datetime
    last_updated: datetime


@dataclass(frozen=True)
class ParseResult:
    """Tagged outcome of parsing: parsed fields on success, failure kind otherwise."""

    source: str
    token: ParsedToken | None = None
    failure: ParseFailureKind | None = None
    field: str | None = None
    value: str | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def error(self) -> DTokenError | None:
        """Return the exception describing the failure, or None on success."""
        if self.failure is ParseFailureKind.INVALID_FORMAT:
            return InvalidFormatError(self.source)
        if self.failure is ParseFailureKind.INVALID_TIMESTAMP:
            return InvalidTimestampError(self.value or "", self.field or "")
        return None

    def unwrap(self) -> ParsedToken:
        """Return the parsed fields or raise the matching error."""
        if self.token is None:
            raise self.error() or InvalidFormatError(self.source)
        return self.token
