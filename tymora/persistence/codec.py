"""Snapshot codec for dice and bags.

Dice and bags are written as JSON snapshots. Loading always builds new
objects, so a snapshot that fails to load leaves every live die exactly
as it was.

Usage:
    >>> blob = dump_die(die)
    >>> twin = load_die(blob)
    >>> save_bag(bag, Path("pocket.json"))
    >>> bag = read_bag(Path("pocket.json"))
"""

import logging
import os
from pathlib import Path

from pydantic import BaseModel, ValidationError

from tymora.dice.bag import DiceBag
from tymora.dice.die import Die
from tymora.persistence.exceptions import SnapshotFormatError, SnapshotReadError
from tymora.schemas.snapshot import BagSnapshot, DieSnapshot

logger = logging.getLogger(__name__)


# =============================================================================
# Snapshots <-> objects
# =============================================================================


def bag_to_snapshot(bag: DiceBag) -> BagSnapshot:
    """Capture a bag and every die in it."""
    return BagSnapshot(nickname=bag.nickname, dice=[die.snapshot() for die in bag])


def bag_from_snapshot(snapshot: BagSnapshot) -> DiceBag:
    """Rebuild a bag from a validated snapshot."""
    bag = DiceBag(snapshot.nickname)
    for die_snapshot in snapshot.dice:
        bag.add_die(Die.from_snapshot(die_snapshot))
    return bag


def parse_die_snapshot(data: str | bytes) -> DieSnapshot:
    """Validate serialized die data.

    Raises:
        SnapshotFormatError: If the data is not a valid die snapshot.
    """
    try:
        return DieSnapshot.model_validate_json(data)
    except ValidationError as e:
        raise SnapshotFormatError(f"Invalid die snapshot: {e}", raw_data=data) from e


def parse_bag_snapshot(data: str | bytes) -> BagSnapshot:
    """Validate serialized bag data.

    Raises:
        SnapshotFormatError: If the data is not a valid bag snapshot.
    """
    try:
        return BagSnapshot.model_validate_json(data)
    except ValidationError as e:
        raise SnapshotFormatError(f"Invalid bag snapshot: {e}", raw_data=data) from e


# =============================================================================
# In-memory blobs
# =============================================================================


def dump_die(die: Die) -> str:
    """Serialize a die to JSON."""
    return die.snapshot().model_dump_json(indent=2)


def load_die(data: str | bytes) -> Die:
    """Restore a die from JSON produced by dump_die.

    Raises:
        SnapshotFormatError: If the data is corrupt or invalid.
    """
    return Die.from_snapshot(parse_die_snapshot(data))


def dump_bag(bag: DiceBag) -> str:
    """Serialize a bag and its dice to JSON."""
    return bag_to_snapshot(bag).model_dump_json(indent=2)


def load_bag(data: str | bytes) -> DiceBag:
    """Restore a bag from JSON produced by dump_bag.

    Raises:
        SnapshotFormatError: If the data is corrupt or invalid.
    """
    return bag_from_snapshot(parse_bag_snapshot(data))


# =============================================================================
# Files
# =============================================================================


def _write_snapshot(snapshot: BaseModel, path: Path) -> None:
    """Write a snapshot, replacing the target only once it is complete."""
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        tmp_path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
        os.replace(tmp_path, path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise SnapshotReadError(f"Failed to write {path}: {e}", path=str(path)) from e


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise SnapshotReadError(f"Failed to read {path}: {e}", path=str(path)) from e


def save_die(die: Die, path: Path) -> None:
    """Write a die snapshot to a file.

    Raises:
        SnapshotReadError: If the file cannot be written.
    """
    _write_snapshot(die.snapshot(), path)
    logger.info(f"Saved die {die.die_id} to {path}")


def read_die(path: Path) -> Die:
    """Load a die from a file written by save_die.

    Raises:
        SnapshotReadError: If the file cannot be read.
        SnapshotFormatError: If the file is not a valid die snapshot.
    """
    die = load_die(_read_bytes(path))
    logger.info(f"Loaded die {die.die_id} from {path}")
    return die


def save_bag(bag: DiceBag, path: Path) -> None:
    """Write a bag snapshot to a file.

    Raises:
        SnapshotReadError: If the file cannot be written.
    """
    _write_snapshot(bag_to_snapshot(bag), path)
    logger.info(f"Saved bag '{bag.nickname}' ({len(bag)} dice) to {path}")


def read_bag(path: Path) -> DiceBag:
    """Load a bag from a file written by save_bag.

    Raises:
        SnapshotReadError: If the file cannot be read.
        SnapshotFormatError: If the file is not a valid bag snapshot.
    """
    bag = load_bag(_read_bytes(path))
    logger.info(f"Loaded bag '{bag.nickname}' ({len(bag)} dice) from {path}")
    return bag
