"""Database models package."""

from tymora.database.models.base import Base, TimestampMixin
from tymora.database.models.bags import StoredBag, StoredDie

__all__ = [
    "Base",
    "TimestampMixin",
    "StoredBag",
    "StoredDie",
]
