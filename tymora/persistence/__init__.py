"""Snapshot persistence for dice and bags."""

from tymora.persistence.codec import (
    bag_from_snapshot,
    bag_to_snapshot,
    dump_bag,
    dump_die,
    load_bag,
    load_die,
    parse_bag_snapshot,
    parse_die_snapshot,
    read_bag,
    read_die,
    save_bag,
    save_die,
)
from tymora.persistence.exceptions import (
    SnapshotError,
    SnapshotFormatError,
    SnapshotReadError,
)

__all__ = [
    # Codec
    "bag_from_snapshot",
    "bag_to_snapshot",
    "dump_bag",
    "dump_die",
    "load_bag",
    "load_die",
    "parse_bag_snapshot",
    "parse_die_snapshot",
    "read_bag",
    "read_die",
    "save_bag",
    "save_die",
    # Exceptions
    "SnapshotError",
    "SnapshotFormatError",
    "SnapshotReadError",
]
