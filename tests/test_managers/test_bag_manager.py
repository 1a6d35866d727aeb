"""Tests for BagManager class."""

import pytest
from sqlalchemy.orm import Session

from tests.factories import create_bag, create_rolled_die, create_stored_bag
from tymora.database.models.bags import StoredBag, StoredDie
from tymora.dice.bag import DiceBag
from tymora.managers.bag_manager import BagManager
from tymora.persistence.exceptions import SnapshotFormatError


class TestBaseManager:
    """Tests for the shared manager base."""

    def test_init_stores_db(self, db_session: Session):
        """Verify the manager keeps its session."""
        manager = BagManager(db_session)
        assert manager.db is db_session


class TestSaveAndLoad:
    """Tests for storing and restoring bags."""

    def test_round_trip(self, db_session: Session):
        """A saved bag loads back with the same dice in the same order."""
        bag = DiceBag("Main Bag")
        bag.add_die(create_rolled_die(20, rolls=4, nickname="Grim"))
        bag.add_die(create_rolled_die(6, rolls=2, seed=7))

        manager = BagManager(db_session)
        manager.save_bag("Main Bag", bag)
        restored = manager.load_bag("Main Bag")

        assert restored is not None
        assert restored.nickname == "Main Bag"
        assert [d.die_id for d in restored] == [d.die_id for d in bag]
        assert [d.history for d in restored] == [d.history for d in bag]
        assert restored.dice[0].nickname == "Grim"

    def test_loaded_dice_continue_sequence(self, db_session: Session):
        """Dice read from the database roll what the originals would."""
        bag = DiceBag("Main Bag")
        die = create_rolled_die(12, rolls=3, seed=31)
        bag.add_die(die)

        manager = BagManager(db_session)
        manager.save_bag("Main Bag", bag)
        restored = manager.load_bag("Main Bag").dice[0]

        assert [restored.roll() for _ in range(10)] == [die.roll() for _ in range(10)]

    def test_load_missing_returns_none(self, db_session: Session):
        """Unknown names load as None."""
        assert BagManager(db_session).load_bag("Nope") is None

    def test_save_updates_in_place(self, db_session: Session):
        """Saving again updates rows instead of duplicating them."""
        bag = create_stored_bag(db_session, "Main Bag", d6=2)
        bag.dice[0].roll("Kayla")

        manager = BagManager(db_session)
        manager.save_bag("Main Bag", bag)

        assert db_session.query(StoredDie).count() == 2
        restored = manager.load_bag("Main Bag")
        assert restored.dice[0].user_history == ("Kayla",)

    def test_save_prunes_removed_dice(self, db_session: Session):
        """Dice taken out of the bag are removed from storage."""
        bag = create_stored_bag(db_session, "Main Bag", d6=2, d20=1)
        removed = bag.dice[1]
        bag.remove_die(removed)

        manager = BagManager(db_session)
        manager.save_bag("Main Bag", bag)

        restored = manager.load_bag("Main Bag")
        assert len(restored) == 2
        assert removed.die_id not in [d.die_id for d in restored]
        assert db_session.query(StoredDie).count() == 2

    def test_same_dice_under_two_names(self, db_session: Session):
        """One bag may be stored under two names."""
        bag = create_bag("Shared", d8=1)
        manager = BagManager(db_session)

        manager.save_bag("First", bag)
        manager.save_bag("Second", bag)

        assert len(manager.load_bag("First")) == 1
        assert len(manager.load_bag("Second")) == 1


class TestGetOrCreate:
    """Tests for get_or_create_bag."""

    def test_creates_empty_bag(self, db_session: Session):
        """A new name gives an empty bag and a stored row."""
        manager = BagManager(db_session)

        bag = manager.get_or_create_bag("Fresh")

        assert len(bag) == 0
        assert bag.nickname == "Fresh"
        assert manager.get_stored_bag("Fresh") is not None

    def test_returns_existing(self, db_session: Session):
        """An existing name gives the stored dice."""
        create_stored_bag(db_session, "Main Bag", d4=3)

        bag = BagManager(db_session).get_or_create_bag("Main Bag")

        assert len(bag) == 3


class TestListAndDelete:
    """Tests for listing and deleting bags."""

    def test_list_ordered_by_name(self, db_session: Session):
        """Bags are listed alphabetically."""
        create_stored_bag(db_session, "Zeta")
        create_stored_bag(db_session, "Alpha", d6=1)

        names = [b.name for b in BagManager(db_session).list_bags()]

        assert names == ["Alpha", "Zeta"]

    def test_delete(self, db_session: Session):
        """Deleting removes the bag and its dice."""
        create_stored_bag(db_session, "Main Bag", d6=2)
        manager = BagManager(db_session)

        assert manager.delete_bag("Main Bag") is True
        assert manager.get_stored_bag("Main Bag") is None
        assert db_session.query(StoredDie).count() == 0

    def test_delete_missing(self, db_session: Session):
        """Deleting an unknown bag reports False."""
        assert BagManager(db_session).delete_bag("Nope") is False


class TestCorruptRows:
    """Tests for stored dice that no longer validate."""

    def test_corrupt_die_raises(self, db_session: Session):
        """A broken snapshot surfaces as a format error."""
        create_stored_bag(db_session, "Main Bag", d6=1)
        row = db_session.query(StoredDie).first()
        row.snapshot_data = {**row.snapshot_data, "face": 99}
        db_session.flush()

        with pytest.raises(SnapshotFormatError):
            BagManager(db_session).load_bag("Main Bag")

    def test_other_bags_unaffected(self, db_session: Session):
        """Corruption in one bag does not spoil another."""
        create_stored_bag(db_session, "Broken", d6=1)
        create_stored_bag(db_session, "Fine", d6=1)
        stored = db_session.query(StoredBag).filter(StoredBag.name == "Broken").one()
        stored.dice[0].snapshot_data = {"die_id": "x"}
        db_session.flush()

        assert len(BagManager(db_session).load_bag("Fine")) == 1
