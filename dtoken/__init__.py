"""dtoken package.

Composite identity tokens: a persistent id, a rotating transient id and their
creation and last-update timestamps, serialized as
``PERSISTENT_TRANSIENT:CREATED_LASTUPDATED``.
"""

from .config import TokenConfig
from .errors import DTokenError, InvalidFormatError, InvalidGeneratorError, InvalidTimestampError
from .session import Session
from .token import DToken, ParseFailureKind, ParseResult, TokenFactory
from .utils import random_string_generator

__all__ = [
    "DToken",
    "TokenFactory",
    "TokenConfig",
    "Session",
    "ParseResult",
    "ParseFailureKind",
    "DTokenError",
    "InvalidFormatError",
    "InvalidTimestampError",
    "InvalidGeneratorError",
    "random_string_generator",
]
