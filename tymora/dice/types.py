"""Dice system type definitions.

Immutable dataclasses for dice expressions and roll results, plus the
luck tiers a die can fall into.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable


class LuckTier(str, Enum):
    """Category of a die's recent luck.

    Derived by thresholding the luck score (a z-score of the recent
    roll sum). See tymora.dice.luck for the thresholds.
    """

    VERY_UNLUCKY = "very_unlucky"  # score < -3.0
    UNLUCKY = "unlucky"  # -3.0 <= score < -2.0
    NEUTRAL = "neutral"  # -2.0 <= score <= 2.0
    LUCKY = "lucky"  # 2.0 < score <= 3.0
    VERY_LUCKY = "very_lucky"  # score > 3.0


@dataclass(frozen=True)
class DiceTerm:
    """A single group of identical dice, like the 2d6 in 2d6+3.

    Attributes:
        num_dice: Number of dice in the group.
        die_size: Sides on each die.
    """

    num_dice: int
    die_size: int

    @property
    def notation(self) -> str:
        """Render the term as NdM."""
        return f"{self.num_dice}d{self.die_size}"


@dataclass(frozen=True)
class DiceExpression:
    """A full dice expression like 2d6+1d4+3.

    Attributes:
        terms: Dice groups in the order they were written.
        modifier: Flat bonus added to the total (may be negative).
    """

    terms: tuple[DiceTerm, ...] = field(default_factory=tuple)
    modifier: int = 0

    @property
    def num_dice(self) -> int:
        """Total number of dice across all terms."""
        return sum(term.num_dice for term in self.terms)

    @property
    def notation(self) -> str:
        """Canonical notation, e.g. '2d6+1d4+3'."""
        parts = [term.notation for term in self.terms]
        text = "+".join(parts)
        if self.modifier > 0:
            text = f"{text}+{self.modifier}" if text else str(self.modifier)
        elif self.modifier < 0:
            text = f"{text}{self.modifier}"
        return text or "0"


@dataclass(frozen=True)
class SetRollResult:
    """Result of rolling every die in a DiceSet.

    Attributes:
        individual_rolls: Each die's result, in set order.
        bonus: The fixed bonus applied.
        total: Sum of rolls plus bonus.
        user: Who rolled.
    """

    individual_rolls: tuple[int, ...]
    bonus: int
    total: int
    user: str = ""

    @property
    def dice_total(self) -> int:
        """Sum of the dice alone, without the bonus."""
        return sum(self.individual_rolls)


@runtime_checkable
class Rollable(Protocol):
    """Anything that can be rolled and remembers its last result."""

    def roll(self, user: str = ...) -> int:
        """Roll and return the new result."""
        ...

    @property
    def result(self) -> int | None:
        """The most recent result without re-rolling."""
        ...
