"""Dice sets.

A DiceSet is a group of dice drawn from a bag plus a fixed bonus,
usually built from notation:

    >>> bag = DiceBag("Main Bag")
    >>> attack = DiceSet(bag, "2d6+1d4+3")
    >>> len(attack.dice)
    3
    >>> result = attack.roll_all("Kayla")
    >>> result.total == sum(result.individual_rolls) + 3
    True
"""

import logging

from tymora.dice.bag import DiceBag
from tymora.dice.die import DEFAULT_USER, Die
from tymora.dice.parser import parse_dice
from tymora.dice.types import DiceExpression, SetRollResult

logger = logging.getLogger(__name__)


class DiceSet:
    """A group of dice rolled together, with a fixed bonus."""

    def __init__(self, bag: DiceBag, notation: str = "", nickname: str = "") -> None:
        """Build a set, drawing dice from the bag.

        Args:
            bag: Bag to draw dice from. New dice are forged into it as needed.
            notation: Dice notation such as "2d6+3". Empty for an empty set.
            nickname: Optional name for the set.

        Raises:
            DiceParseError: If notation is invalid.
        """
        self.bag = bag
        self.nickname = nickname
        self.fixed_bonus = 0
        self._dice: list[Die] = []
        self._last_total: int | None = None

        if notation.strip():
            self.add_expression(parse_dice(notation))

    def add_expression(self, expression: DiceExpression) -> None:
        """Draw the dice for every term and add the expression's bonus."""
        for term in expression.terms:
            drawn = self.bag.get_dice(term.die_size, term.num_dice, exclude=self._dice)
            self._dice.extend(drawn)
        self.fixed_bonus += expression.modifier
        logger.debug(
            f"Set '{self.nickname}' drew {expression.num_dice} dice for {expression.notation}"
        )

    def add_die(self, die: Die) -> None:
        """Add a die to the set."""
        self._dice.append(die)

    def remove_die(self, die: Die) -> bool:
        """Remove a die from the set.

        Returns:
            True if the die was in the set.
        """
        for index, member in enumerate(self._dice):
            if member is die:
                del self._dice[index]
                return True
        return False

    @property
    def dice(self) -> list[Die]:
        """Dice in the set, in draw order."""
        return list(self._dice)

    @property
    def result(self) -> int | None:
        """Total of the last roll, or None if the set has not been rolled."""
        return self._last_total

    def roll_all(self, user: str = DEFAULT_USER) -> SetRollResult:
        """Roll every die in the set.

        Args:
            user: Who is rolling. Recorded in each die's history.

        Returns:
            SetRollResult with each die's result and the total.
        """
        rolls = tuple(die.roll(user) for die in self._dice)
        total = sum(rolls) + self.fixed_bonus
        self._last_total = total
        return SetRollResult(
            individual_rolls=rolls,
            bonus=self.fixed_bonus,
            total=total,
            user=user,
        )

    def roll(self, user: str = DEFAULT_USER) -> int:
        """Roll every die and return just the total."""
        return self.roll_all(user).total

    def __len__(self) -> int:
        return len(self._dice)

    def __repr__(self) -> str:
        return (
            f"<DiceSet nickname={self.nickname!r} dice={len(self._dice)} "
            f"bonus={self.fixed_bonus}>"
        )
