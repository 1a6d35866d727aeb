"""Snapshot schemas for persisted dice state."""

from tymora.schemas.snapshot import (
    SNAPSHOT_VERSION,
    BagSnapshot,
    DieSnapshot,
)

__all__ = [
    "SNAPSHOT_VERSION",
    "BagSnapshot",
    "DieSnapshot",
]
