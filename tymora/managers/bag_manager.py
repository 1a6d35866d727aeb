"""Bag manager for storing dice bags in the database."""

import logging

from pydantic import ValidationError

from tymora.database.models.bags import StoredBag, StoredDie
from tymora.dice.bag import DiceBag
from tymora.dice.die import Die
from tymora.managers.base import BaseManager
from tymora.persistence.exceptions import SnapshotFormatError
from tymora.schemas.snapshot import DieSnapshot

logger = logging.getLogger(__name__)


class BagManager(BaseManager):
    """Loads and saves DiceBags by name.

    Each die is stored as its snapshot, so a bag loaded back continues
    every die's random sequence where it left off.
    """

    def list_bags(self) -> list[StoredBag]:
        """Get all stored bags, ordered by name."""
        return self.db.query(StoredBag).order_by(StoredBag.name).all()

    def get_stored_bag(self, name: str) -> StoredBag | None:
        """Get the stored row for a bag."""
        return self.db.query(StoredBag).filter(StoredBag.name == name).first()

    def load_bag(self, name: str) -> DiceBag | None:
        """Load a bag by name.

        Returns:
            The bag, or None if no bag has that name.

        Raises:
            SnapshotFormatError: If a stored die is corrupt.
        """
        stored = self.get_stored_bag(name)
        if stored is None:
            return None

        bag = DiceBag(stored.nickname)
        for stored_die in stored.dice:
            bag.add_die(self._die_from_row(stored_die))
        logger.debug(f"Loaded bag '{name}' with {len(bag)} dice")
        return bag

    def get_or_create_bag(self, name: str) -> DiceBag:
        """Load a bag, creating an empty one if it does not exist yet."""
        bag = self.load_bag(name)
        if bag is not None:
            return bag

        self.db.add(StoredBag(name=name, nickname=name))
        self.db.flush()
        logger.info(f"Created bag '{name}'")
        return DiceBag(name)

    def save_bag(self, name: str, bag: DiceBag) -> StoredBag:
        """Store a bag under a name, replacing what was stored before.

        Dice are matched by die_id; dice no longer in the bag are removed.
        """
        stored = self.get_stored_bag(name)
        if stored is None:
            stored = StoredBag(name=name, nickname=bag.nickname)
            self.db.add(stored)
        stored.nickname = bag.nickname

        existing = {row.die_id: row for row in stored.dice}
        kept: list[StoredDie] = []
        for position, die in enumerate(bag):
            data = die.snapshot().model_dump(mode="json")
            row = existing.pop(die.die_id, None)
            if row is None:
                row = StoredDie(die_id=die.die_id, sides=die.sides)
            row.position = position
            row.snapshot_data = data
            kept.append(row)

        # Rows left in existing fall out of the relationship and are deleted
        stored.dice = kept
        self.db.flush()
        logger.info(f"Saved bag '{name}' with {len(kept)} dice ({len(existing)} removed)")
        return stored

    def delete_bag(self, name: str) -> bool:
        """Delete a bag and its dice.

        Returns:
            True if the bag existed.
        """
        stored = self.get_stored_bag(name)
        if stored is None:
            return False
        self.db.delete(stored)
        self.db.flush()
        logger.info(f"Deleted bag '{name}'")
        return True

    def _die_from_row(self, row: StoredDie) -> Die:
        try:
            snapshot = DieSnapshot.model_validate(row.snapshot_data)
        except ValidationError as e:
            raise SnapshotFormatError(
                f"Stored die {row.die_id} is corrupt: {e}",
                raw_data=str(row.snapshot_data),
            ) from e
        return Die.from_snapshot(snapshot)
