"""Rich display helpers for CLI output."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from tymora.dice.die import Die
from tymora.dice.luck import LuckReading
from tymora.dice.types import LuckTier, SetRollResult


# Shared console instance
console = Console()

TIER_STYLES = {
    LuckTier.VERY_LUCKY: "bold green",
    LuckTier.LUCKY: "green",
    LuckTier.NEUTRAL: "white",
    LuckTier.UNLUCKY: "red",
    LuckTier.VERY_UNLUCKY: "bold red",
}


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def display_success(message: str) -> None:
    """Display success message.

    Args:
        message: Success message.
    """
    console.print(f"[bold green]{message}[/bold green]")


def display_info(message: str) -> None:
    """Display info message.

    Args:
        message: Info message.
    """
    console.print(f"[dim]{message}[/dim]")


def format_tier(tier: LuckTier) -> str:
    """Color a luck tier for display."""
    style = TIER_STYLES[tier]
    label = tier.value.replace("_", " ")
    return f"[{style}]{label}[/{style}]"


def display_bag_list(bags: list[dict]) -> None:
    """Display stored bags.

    Args:
        bags: List of bag dicts with name, nickname, dice.
    """
    if not bags:
        console.print("[dim]No bags found.[/dim]")
        return

    table = Table(title="Dice Bags")
    table.add_column("Name", style="cyan")
    table.add_column("Nickname", style="white")
    table.add_column("Dice", justify="right")

    for b in bags:
        table.add_row(b.get("name", ""), b.get("nickname", ""), str(b.get("dice", 0)))

    console.print(table)


def display_bag(title: str, rows: list[tuple[Die, LuckReading]]) -> None:
    """Display every die in a bag with its luck.

    Args:
        title: Table title (usually the bag name).
        rows: Each die with its current luck reading.
    """
    if not rows:
        console.print(f"[dim]{title} is empty.[/dim]")
        return

    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Die", justify="right")
    table.add_column("Nickname", style="white")
    table.add_column("Face", justify="right")
    table.add_column("Rolls", justify="right")
    table.add_column("Luck", justify="right")
    table.add_column("Tier")

    for die, reading in rows:
        table.add_row(
            die.die_id[:8],
            f"d{die.sides}",
            die.nickname or "",
            str(die.face),
            str(len(die.history)),
            f"{reading.score:+.2f}",
            format_tier(reading.tier),
        )

    console.print(table)


def display_roll(notation: str, dice: list[Die], result: SetRollResult) -> None:
    """Display a dice set roll.

    Args:
        notation: Notation that was rolled.
        dice: Dice in the set, in roll order.
        result: The roll result.
    """
    parts = [
        f"d{die.sides}:[bold]{value}[/bold]"
        for die, value in zip(dice, result.individual_rolls)
    ]
    if result.bonus:
        parts.append(f"{result.bonus:+d}")

    console.print(f"{result.user} rolls [cyan]{notation}[/cyan]: {'  '.join(parts)}")
    console.print(f"  Total: [bold cyan]{result.total}[/bold cyan]")


def display_die(die: Die, reading: LuckReading, description: str) -> None:
    """Display a single die in detail.

    Args:
        die: The die.
        reading: Its current luck reading.
        description: Its flavor text.
    """
    recent = ", ".join(str(value) for value in die.history[-10:]) or "none"
    body = (
        f"{description}\n\n"
        f"Face: [bold]{die.face}[/bold]   Rolls: {len(die.history)}\n"
        f"Luck: {reading.score:+.2f} ({format_tier(reading.tier)})\n"
        f"Recent: {recent}"
    )
    console.print(Panel(body, title=f"d{die.sides} {die.die_id[:8]}", border_style="cyan"))
