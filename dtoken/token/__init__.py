"""Token generation, serialization, parsing and validation."""

from .factory import TokenFactory
from .generators import GeneratorSlots
from .model import DToken
from .types import ParsedToken, ParseFailureKind, ParseResult, StringGenerator, TokenRecord

__all__ = [
    "TokenFactory",
    "DToken",
    "GeneratorSlots",
    "ParsedToken",
    "ParseFailureKind",
    "ParseResult",
    "StringGenerator",
    "TokenRecord",
]
