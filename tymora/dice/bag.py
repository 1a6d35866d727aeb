"""Dice bags.

A bag is a pool of dice. Asking it for dice hands out fresh (unnamed)
dice it already holds and forges new ones to cover any shortfall.
Bags are plain objects: create one and pass it to whatever needs it.
"""

import logging
from collections.abc import Iterable, Iterator

from tymora.dice.die import Die

logger = logging.getLogger(__name__)


class DiceBag:
    """A keyed pool of dice.

    Dice are kept in the order they entered the bag, keyed by die_id.
    """

    def __init__(self, nickname: str = "") -> None:
        self.nickname = nickname
        self._dice: dict[str, Die] = {}

    def get_dice(
        self,
        sides: int,
        count: int,
        exclude: Iterable[Die] = (),
    ) -> list[Die]:
        """Get dice with the given number of sides.

        Fresh dice already in the bag are used first; new dice are
        forged and added to the bag for any shortfall. The same die is
        never returned twice.

        Args:
            sides: Sides on each die.
            count: How many dice are needed.
            exclude: Dice already handed out that must not be reused.

        Returns:
            Exactly count distinct dice.

        Raises:
            ValueError: If count is negative.
        """
        if count < 0:
            raise ValueError(f"Cannot draw a negative number of dice: {count}")

        taken = {die.die_id for die in exclude}
        matches = [die for die in self.fresh_dice(sides) if die.die_id not in taken][:count]
        forged = 0
        while len(matches) < count:
            die = Die(sides)
            self.add_die(die)
            matches.append(die)
            forged += 1

        if forged:
            logger.debug(f"Bag '{self.nickname}' forged {forged} new d{sides}")
        return matches

    def fresh_dice(self, sides: int | None = None) -> list[Die]:
        """Dice that are free to be drawn, optionally of one size."""
        return [
            die
            for die in self._dice.values()
            if die.can_draw and (sides is None or die.sides == sides)
        ]

    def add_die(self, die: Die) -> None:
        """Put a die in the bag. Adding a die that is already in is a no-op.

        Raises:
            ValueError: If a different die with the same id is already in the bag.
        """
        held = self._dice.get(die.die_id)
        if held is not None and held is not die:
            raise ValueError(f"Bag '{self.nickname}' already holds another die {die.die_id}")
        self._dice[die.die_id] = die

    def remove_die(self, die: Die) -> bool:
        """Take a die out of the bag.

        Returns:
            True if the die was in the bag.
        """
        if self._dice.get(die.die_id) is not die:
            return False
        del self._dice[die.die_id]
        return True

    def get_die(self, die_id: str) -> Die | None:
        """Look up a die by its full id."""
        return self._dice.get(die_id)

    def find(self, prefix: str) -> list[Die]:
        """Find dice whose id starts with prefix."""
        return [die for die_id, die in self._dice.items() if die_id.startswith(prefix)]

    @property
    def dice(self) -> list[Die]:
        """Every die in the bag."""
        return list(self._dice.values())

    def to_list(self) -> list[str]:
        """Descriptions of every die in the bag."""
        return [str(die) for die in self._dice.values()]

    def __len__(self) -> int:
        return len(self._dice)

    def __iter__(self) -> Iterator[Die]:
        return iter(list(self._dice.values()))

    def __contains__(self, die: object) -> bool:
        return isinstance(die, Die) and self._dice.get(die.die_id) is die

    def __repr__(self) -> str:
        return f"<DiceBag nickname={self.nickname!r} dice={len(self._dice)}>"
