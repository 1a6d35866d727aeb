"""Dice bag commands."""

from pathlib import Path
from typing import Optional

import typer

from tymora.cli.display import (
    display_bag,
    display_bag_list,
    display_error,
    display_info,
    display_success,
)
from tymora.config import get_settings
from tymora.database.connection import get_db_session
from tymora.dice.bag import DiceBag
from tymora.dice.die import Die
from tymora.dice.luck import assess_luck
from tymora.managers.bag_manager import BagManager
from tymora.persistence.codec import read_bag, save_bag
from tymora.persistence.exceptions import SnapshotError

app = typer.Typer(help="Manage dice bags")


def resolve_bag_name(name: str | None) -> str:
    """Fall back to the configured default bag."""
    return name or get_settings().default_bag


def resolve_die(bag: DiceBag, die_id: str) -> Die:
    """Find exactly one die by id or id prefix, or exit with an error."""
    matches = bag.find(die_id)
    if not matches:
        display_error(f"No die matching '{die_id}'")
        raise typer.Exit(1)
    if len(matches) > 1:
        display_error(f"'{die_id}' matches {len(matches)} dice; use more of the id")
        raise typer.Exit(1)
    return matches[0]


def load_existing_bag(manager: BagManager, name: str) -> DiceBag:
    """Load a stored bag, or exit with an error if there is none."""
    try:
        bag = manager.load_bag(name)
    except SnapshotError as e:
        display_error(f"Bag '{name}' is corrupt: {e}")
        raise typer.Exit(1)
    if bag is None:
        display_error(f"Bag '{name}' not found")
        raise typer.Exit(1)
    return bag


@app.command("list")
def list_bags() -> None:
    """List stored bags."""
    with get_db_session() as db:
        bags = [
            {"name": b.name, "nickname": b.nickname, "dice": len(b.dice)}
            for b in BagManager(db).list_bags()
        ]
    display_bag_list(bags)


@app.command()
def show(
    bag_name: Optional[str] = typer.Option(None, "--bag", "-b", help="Bag to show"),
) -> None:
    """Show every die in a bag with its luck."""
    settings = get_settings()
    name = resolve_bag_name(bag_name)
    with get_db_session() as db:
        bag = load_existing_bag(BagManager(db), name)

    rows = [
        (
            die,
            assess_luck(
                die.history,
                die.sides,
                window=settings.luck_window,
                min_history=settings.luck_min_history,
            ),
        )
        for die in bag
    ]
    display_bag(bag.nickname or name, rows)


@app.command()
def forge(
    sides: int = typer.Argument(..., min=1, help="Sides on each new die"),
    count: int = typer.Option(1, "--count", "-c", min=1, help="How many dice to forge"),
    bag_name: Optional[str] = typer.Option(None, "--bag", "-b", help="Bag to add to"),
) -> None:
    """Forge new dice into a bag."""
    name = resolve_bag_name(bag_name)
    with get_db_session() as db:
        manager = BagManager(db)
        bag = manager.get_or_create_bag(name)
        for _ in range(count):
            bag.add_die(Die(sides))
        manager.save_bag(name, bag)

    display_success(f"Forged {count} d{sides} into '{name}'")


@app.command("name")
def name_die(
    die_id: str = typer.Argument(..., help="Die id (or a unique prefix)"),
    nickname: str = typer.Argument(..., help="New nickname"),
    bag_name: Optional[str] = typer.Option(None, "--bag", "-b", help="Bag holding the die"),
) -> None:
    """Give a die a nickname, dedicating it."""
    bag_key = resolve_bag_name(bag_name)
    with get_db_session() as db:
        manager = BagManager(db)
        bag = load_existing_bag(manager, bag_key)
        die = resolve_die(bag, die_id)
        die.nickname = nickname
        manager.save_bag(bag_key, bag)

    display_success(f"Die {die.die_id[:8]} is now called {nickname}")


@app.command("export")
def export_bag(
    path: Path = typer.Argument(..., help="File to write"),
    bag_name: Optional[str] = typer.Option(None, "--bag", "-b", help="Bag to export"),
) -> None:
    """Write a bag to a snapshot file."""
    name = resolve_bag_name(bag_name)
    with get_db_session() as db:
        bag = load_existing_bag(BagManager(db), name)

    try:
        save_bag(bag, path)
    except SnapshotError as e:
        display_error(str(e))
        raise typer.Exit(1)

    display_success(f"Exported '{name}' ({len(bag)} dice) to {path}")


@app.command("import")
def import_bag(
    path: Path = typer.Argument(..., help="Snapshot file to read"),
    bag_name: Optional[str] = typer.Option(None, "--bag", "-b", help="Name to store it under"),
    replace: bool = typer.Option(False, "--replace", help="Overwrite an existing bag"),
) -> None:
    """Load a bag from a snapshot file."""
    name = resolve_bag_name(bag_name)
    try:
        bag = read_bag(path)
    except SnapshotError as e:
        display_error(str(e))
        raise typer.Exit(1)

    with get_db_session() as db:
        manager = BagManager(db)
        if manager.get_stored_bag(name) is not None and not replace:
            display_error(f"Bag '{name}' already exists (use --replace)")
            raise typer.Exit(1)
        manager.save_bag(name, bag)

    display_success(f"Imported {len(bag)} dice into '{name}'")


@app.command()
def delete(
    bag_name: str = typer.Argument(..., help="Bag to delete"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a bag and every die in it."""
    with get_db_session() as db:
        manager = BagManager(db)
        if manager.get_stored_bag(bag_name) is None:
            display_error(f"Bag '{bag_name}' not found")
            raise typer.Exit(1)

        if not force:
            confirm = typer.confirm(f"Delete bag '{bag_name}' and all its dice?")
            if not confirm:
                display_info("Cancelled")
                return

        manager.delete_bag(bag_name)

    display_success(f"Deleted bag '{bag_name}'")
