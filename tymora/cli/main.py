"""Main CLI application for Tymora's Pocket."""

import logging

import typer
from rich.logging import RichHandler

from tymora.cli.commands import bag, dice
from tymora.config import get_settings
from tymora.database.connection import init_db

# Create main app
app = typer.Typer(
    name="tymora",
    help="A pocket full of dice that remember every roll",
    add_completion=True,
)

# Add sub-commands
app.add_typer(bag.app, name="bag")
app.command()(dice.roll)
app.command()(dice.describe)


def configure_logging(level: str) -> None:
    """Send log records through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Tymora's Pocket - dice with memory and moods.

    Use 'tymora bag forge 20' to make a die, then 'tymora roll 1d20'.
    """
    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.effective_log_level)
    init_db()


if __name__ == "__main__":
    app()
