"""Rolling and inspecting dice."""

from typing import Optional

import typer

from tymora.cli.commands.bag import load_existing_bag, resolve_bag_name, resolve_die
from tymora.cli.display import display_die, display_error, display_roll
from tymora.config import get_settings
from tymora.database.connection import get_db_session
from tymora.dice.description import describe as describe_die
from tymora.dice.dice_set import DiceSet
from tymora.dice.luck import assess_luck
from tymora.dice.parser import DiceParseError
from tymora.managers.bag_manager import BagManager
from tymora.persistence.exceptions import SnapshotError


def roll(
    notation: str = typer.Argument(..., help="Dice notation, e.g. 2d6+3"),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="Who is rolling"),
    bag_name: Optional[str] = typer.Option(None, "--bag", "-b", help="Bag to draw dice from"),
) -> None:
    """Roll dice drawn from a bag."""
    settings = get_settings()
    name = resolve_bag_name(bag_name)
    roller = user or settings.default_user

    with get_db_session() as db:
        manager = BagManager(db)
        try:
            bag = manager.get_or_create_bag(name)
        except SnapshotError as e:
            display_error(f"Bag '{name}' is corrupt: {e}")
            raise typer.Exit(1)

        try:
            dice_set = DiceSet(bag, notation)
        except DiceParseError as e:
            display_error(str(e))
            raise typer.Exit(1)

        result = dice_set.roll_all(roller)
        manager.save_bag(name, bag)

    display_roll(notation, dice_set.dice, result)


def describe(
    die_id: str = typer.Argument(..., help="Die id (or a unique prefix)"),
    bag_name: Optional[str] = typer.Option(None, "--bag", "-b", help="Bag holding the die"),
) -> None:
    """Describe a die and its luck."""
    settings = get_settings()
    name = resolve_bag_name(bag_name)
    with get_db_session() as db:
        bag = load_existing_bag(BagManager(db), name)

    die = resolve_die(bag, die_id)
    reading = assess_luck(
        die.history,
        die.sides,
        window=settings.luck_window,
        min_history=settings.luck_min_history,
    )
    description = describe_die(
        die,
        window=settings.luck_window,
        min_history=settings.luck_min_history,
    )
    display_die(die, reading, description)
