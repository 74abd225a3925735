"""Error types raised by token parsing and generator configuration."""

from __future__ import annotations

from typing import Any

TOKEN_FORMAT = "PERSISTENT_TRANSIENT:CREATED?_LASTUPDATED?"


class DTokenError(ValueError):
    """Base class for all dtoken errors."""


class InvalidFormatError(DTokenError):
    """The token string does not have the PERSISTENT_TRANSIENT shape."""

    def __init__(self, value: str, expected_format: str = TOKEN_FORMAT) -> None:
        self.value = value
        self.expected_format = expected_format
        super().__init__(f"Invalid string {value!r} provided. Expected format {expected_format}")


class InvalidTimestampError(DTokenError):
    """A timestamp component is present but is not an epoch-millisecond integer."""

    def __init__(self, value: str, field: str) -> None:
        self.value = value
        self.field = field
        super().__init__(f"An invalid unix timestamp {value!r} was provided for {field}")


class InvalidGeneratorError(DTokenError):
    """A replacement generator did not produce a usable string when first called."""

    def __init__(self, result: Any) -> None:
        self.result = result
        super().__init__(
            f"Invalid generator provided, first call returned {result!r}. "
            "() -> str is required, non-empty and without '_' or ':'."
        )
