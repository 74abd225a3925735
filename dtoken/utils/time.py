"""UTC time helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def utc_now_ms() -> datetime:
    """Return timezone-aware UTC now truncated to millisecond precision."""
    now = utc_now()
    return now.replace(microsecond=now.microsecond - now.microsecond % 1000)


def to_epoch_ms(value: datetime) -> int:
    """Return whole epoch milliseconds for a datetime (naive values are taken as UTC)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // timedelta(milliseconds=1)


def from_epoch_ms(value: int) -> datetime:
    """Return the aware UTC datetime for an epoch-millisecond value.

    Raises ``OverflowError`` or ``ValueError`` when the instant is outside the
    range ``datetime`` can represent.
    """
    return EPOCH + timedelta(milliseconds=value)
