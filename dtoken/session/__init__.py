"""User sessions backed by a DToken."""

from .session import IdentityComparator, Session, default_identity_comparator

__all__ = ["Session", "IdentityComparator", "default_identity_comparator"]
