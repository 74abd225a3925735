"""Default random identifier generator."""

from __future__ import annotations

import secrets


def random_string_generator(length: int = 24) -> str:
    """Return ``length`` lowercase hex characters from cryptographically random bytes.

    This is a convenience default. Nothing in token parsing or validation
    depends on the generated values being unpredictable.
    """
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}.")
    return secrets.token_hex((length + 1) // 2)[:length]
