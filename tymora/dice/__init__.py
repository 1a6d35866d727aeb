"""Dice system.

Provides dice with memory and luck, bags to keep them in, and sets
built from dice notation.

Usage:
    >>> from tymora.dice import Die, DiceBag, DiceSet, describe
    >>> die = Die(20)
    >>> die.roll("Kayla")
    >>> describe(die)
    >>> attack = DiceSet(DiceBag(), "2d6+3")
"""

# Types
from tymora.dice.types import (
    DiceExpression,
    DiceTerm,
    LuckTier,
    Rollable,
    SetRollResult,
)

# Luck
from tymora.dice.luck import (
    LUCK_WINDOW,
    MIN_LUCK_HISTORY,
    LUCKY_THRESHOLD,
    UNLUCKY_THRESHOLD,
    VERY_LUCKY_THRESHOLD,
    VERY_UNLUCKY_THRESHOLD,
    LuckReading,
    assess_luck,
    compute_luck,
    expected_mean_roll,
    luck_tier,
    mean_roll,
    roll_std_dev,
    roll_variance,
    z_score,
)

# Description
from tymora.dice.description import basic_description, describe, luck_description
from tymora.dice.materials import material_for

# Die
from tymora.dice.die import DEFAULT_USER, Die

# Parser
from tymora.dice.parser import parse_dice, DiceParseError

# Collections
from tymora.dice.bag import DiceBag
from tymora.dice.dice_set import DiceSet

__all__ = [
    # Types
    "DiceExpression",
    "DiceTerm",
    "LuckTier",
    "Rollable",
    "SetRollResult",
    # Luck
    "LUCK_WINDOW",
    "MIN_LUCK_HISTORY",
    "LUCKY_THRESHOLD",
    "UNLUCKY_THRESHOLD",
    "VERY_LUCKY_THRESHOLD",
    "VERY_UNLUCKY_THRESHOLD",
    "LuckReading",
    "assess_luck",
    "compute_luck",
    "expected_mean_roll",
    "luck_tier",
    "mean_roll",
    "roll_std_dev",
    "roll_variance",
    "z_score",
    # Description
    "basic_description",
    "describe",
    "luck_description",
    "material_for",
    # Die
    "DEFAULT_USER",
    "Die",
    # Parser
    "parse_dice",
    "DiceParseError",
    # Collections
    "DiceBag",
    "DiceSet",
]
