"""Utility helpers for random identifiers and time operations."""

from .ids import random_string_generator
from .time import from_epoch_ms, to_epoch_ms, utc_now, utc_now_ms

__all__ = ["random_string_generator", "utc_now", "utc_now_ms", "to_epoch_ms", "from_epoch_ms"]
