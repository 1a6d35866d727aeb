"""Tests for rolling and describing dice from the CLI."""

from sqlalchemy.orm import sessionmaker
from typer.testing import CliRunner

from tymora.cli.main import app
from tymora.database.models.bags import StoredBag
from tymora.dice.bag import DiceBag
from tymora.dice.die import Die
from tymora.managers.bag_manager import BagManager


runner = CliRunner()


def load(engine, name: str) -> DiceBag | None:
    """Read a bag straight from the test database."""
    Session = sessionmaker(bind=engine)
    with Session() as db:
        return BagManager(db).load_bag(name)


def store(engine, name: str, bag: DiceBag) -> None:
    """Write a bag straight into the test database."""
    Session = sessionmaker(bind=engine)
    with Session() as db:
        BagManager(db).save_bag(name, bag)
        db.commit()


class TestRoll:
    """Tests for 'tymora roll'."""

    def test_roll_creates_bag_and_dice(self, cli_db):
        """Rolling into an unknown bag creates it and forges the dice."""
        result = runner.invoke(app, ["roll", "2d6+3", "--user", "Kayla", "--bag", "Pocket"])

        assert result.exit_code == 0
        assert "Kayla rolls" in result.output
        assert "Total:" in result.output

        bag = load(cli_db, "Pocket")
        assert len(bag) == 2
        for die in bag:
            assert die.sides == 6
            assert len(die.history) == 1
            assert die.user_history == ("Kayla",)

    def test_roll_reuses_dice(self, cli_db):
        """Rolling again draws the same dice instead of forging more."""
        runner.invoke(app, ["roll", "2d6", "--bag", "Pocket"])
        runner.invoke(app, ["roll", "2d6", "--bag", "Pocket"])

        bag = load(cli_db, "Pocket")
        assert len(bag) == 2
        assert all(len(die.history) == 2 for die in bag)

    def test_roll_skips_named_dice(self, cli_db):
        """Dedicated dice are never drawn for a roll."""
        bag = DiceBag("Pocket")
        grim = Die(20, nickname="Grim")
        bag.add_die(grim)
        store(cli_db, "Pocket", bag)

        result = runner.invoke(app, ["roll", "1d20", "--bag", "Pocket"])

        assert result.exit_code == 0
        stored = load(cli_db, "Pocket")
        assert len(stored) == 2
        assert stored.get_die(grim.die_id).history == ()

    def test_roll_uses_default_user(self, cli_db):
        """Rolls without --user are recorded as the default user."""
        runner.invoke(app, ["roll", "d4", "--bag", "Pocket"])

        die = load(cli_db, "Pocket").dice[0]
        assert die.user_history == ("anonymous",)

    def test_roll_total_matches_history(self, cli_db):
        """The printed total is the dice plus the bonus."""
        result = runner.invoke(app, ["roll", "1d8+5", "--bag", "Pocket"])

        die = load(cli_db, "Pocket").dice[0]
        assert f"Total: {die.history[-1] + 5}" in result.output

    def test_invalid_notation(self, cli_db):
        """Bad notation is an error and nothing is stored."""
        result = runner.invoke(app, ["roll", "2x6", "--bag", "Pocket"])

        assert result.exit_code == 1
        assert "Invalid dice term" in result.output
        Session = sessionmaker(bind=cli_db)
        with Session() as db:
            assert db.query(StoredBag).count() == 0


class TestDescribe:
    """Tests for 'tymora describe'."""

    def test_describe_pristine(self, cli_db):
        """A die never rolled is pristine."""
        bag = DiceBag("Pocket")
        die = Die(6)
        bag.add_die(die)
        store(cli_db, "Pocket", bag)

        result = runner.invoke(app, ["describe", die.die_id[:8], "--bag", "Pocket"])

        assert result.exit_code == 0
        assert "unused" in result.output

    def test_describe_very_lucky(self, cli_db):
        """A die that keeps rolling its top face shines."""
        bag = DiceBag("Pocket")
        die = Die.with_history(20, [20] * 10)
        bag.add_die(die)
        store(cli_db, "Pocket", bag)

        result = runner.invoke(app, ["describe", die.die_id[:8], "--bag", "Pocket"])

        assert result.exit_code == 0
        assert "otherworldly" in result.output
        assert "very lucky" in result.output

    def test_describe_unknown_die(self, cli_db):
        """An unknown id is an error."""
        store(cli_db, "Pocket", DiceBag("Pocket"))

        result = runner.invoke(app, ["describe", "zzzz", "--bag", "Pocket"])

        assert result.exit_code == 1
        assert "No die matching" in result.output

    def test_describe_missing_bag(self, cli_db):
        """An unknown bag is an error."""
        result = runner.invoke(app, ["describe", "abcd", "--bag", "Nope"])

        assert result.exit_code == 1
        assert "not found" in result.output
