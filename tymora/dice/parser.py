"""Dice notation parser.

Parses standard dice notation like 1d20, 2d6+3, d100, 2d6+1d4+3, 4d6-2.
"""

import re

from tymora.dice.types import DiceExpression, DiceTerm


class DiceParseError(ValueError):
    """Error parsing dice notation."""

    pass


# A single dice term: optional count, 'd', die size
# Examples: 1d20, d100, 4D6
TERM_PATTERN = re.compile(r"^(\d*)d(\d+)$", re.IGNORECASE)

# A flat bonus
BONUS_PATTERN = re.compile(r"^\d+$")

# Splits a whole expression into signed pieces: "+2d6", "-3"
PIECE_PATTERN = re.compile(r"([+-])([^+-]*)")


def parse_dice(notation: str) -> DiceExpression:
    """Parse dice notation into a DiceExpression.

    Terms are joined with '+'. Flat bonuses may also be subtracted; dice
    may not.

    Args:
        notation: Dice notation string (e.g., "2d6+3", "1d20", "2d6+1d4+3").

    Returns:
        DiceExpression with parsed terms and summed bonus.

    Raises:
        DiceParseError: If notation is invalid.

    Examples:
        >>> parse_dice("2d6+3")
        DiceExpression(terms=(DiceTerm(num_dice=2, die_size=6),), modifier=3)
        >>> parse_dice("d100").num_dice
        1
    """
    if not notation or not notation.strip():
        raise DiceParseError("Dice notation cannot be empty")

    # Remove spaces so "1d20 + 5" and "1d20+5" read the same
    compact = re.sub(r"\s+", "", notation)
    if compact[0] not in "+-":
        compact = "+" + compact

    pieces = PIECE_PATTERN.findall(compact)
    if "".join(sign + body for sign, body in pieces) != compact:
        raise DiceParseError(f"Invalid dice notation: '{notation}'")

    terms: list[DiceTerm] = []
    modifier = 0

    for sign, body in pieces:
        if not body:
            raise DiceParseError(f"Invalid dice notation: '{notation}' (empty term)")

        if BONUS_PATTERN.match(body):
            value = int(body)
            modifier += -value if sign == "-" else value
            continue

        match = TERM_PATTERN.match(body)
        if not match:
            raise DiceParseError(f"Invalid dice term '{body}' in '{notation}'")
        if sign == "-":
            raise DiceParseError(f"Dice cannot be subtracted: '-{body}' in '{notation}'")

        num_dice_str, die_size_str = match.groups()

        # Default to 1 die if not specified (e.g., "d20" means "1d20")
        num_dice = int(num_dice_str) if num_dice_str else 1
        die_size = int(die_size_str)

        # Validate
        if num_dice < 1:
            raise DiceParseError(f"Number of dice must be at least 1, got {num_dice}")
        if die_size < 1:
            raise DiceParseError(f"Die size must be at least 1, got {die_size}")

        terms.append(DiceTerm(num_dice=num_dice, die_size=die_size))

    return DiceExpression(terms=tuple(terms), modifier=modifier)
