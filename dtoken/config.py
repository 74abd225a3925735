"""Configuration for token identifier generation."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_PERSISTENT_LENGTH = 32
DEFAULT_TRANSIENT_LENGTH = 24


def _length_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}.")
    return value


@dataclass(frozen=True)
class TokenConfig:
    """Lengths used by the default random generators."""

    persistent_length: int = DEFAULT_PERSISTENT_LENGTH
    transient_length: int = DEFAULT_TRANSIENT_LENGTH

    def __post_init__(self) -> None:
        if self.persistent_length <= 0 or self.transient_length <= 0:
            raise ValueError("Generator lengths must be positive.")

    @classmethod
    def from_env(cls) -> "TokenConfig":
        """Build a config from DTOKEN_PERSISTENT_LENGTH / DTOKEN_TRANSIENT_LENGTH."""
        return cls(
            persistent_length=_length_from_env("DTOKEN_PERSISTENT_LENGTH", DEFAULT_PERSISTENT_LENGTH),
            transient_length=_length_from_env("DTOKEN_TRANSIENT_LENGTH", DEFAULT_TRANSIENT_LENGTH),
        )
