"""The die entity.

A Die owns a private random stream, its current face, and the full
history of who rolled what. After every draw the stream is reseeded with
a value drawn from itself, so the stored seed is always enough to resume
the exact future sequence:

    >>> die = Die(20, seed=42)
    >>> twin = Die.from_snapshot(die.snapshot())
    >>> die.roll() == twin.roll()
    True
"""

import logging
import random
import uuid
from collections.abc import Sequence

from tymora.dice.description import describe
from tymora.dice.luck import (
    LUCK_WINDOW,
    LUCKY_THRESHOLD,
    UNLUCKY_THRESHOLD,
    VERY_LUCKY_THRESHOLD,
    VERY_UNLUCKY_THRESHOLD,
    compute_luck,
    luck_tier,
)
from tymora.dice.materials import material_for
from tymora.dice.types import LuckTier
from tymora.schemas.snapshot import DieSnapshot

logger = logging.getLogger(__name__)


# Width of the seeds drawn for reseeding
SEED_BITS = 64

DEFAULT_USER = "anonymous"


class Die:
    """A die with a nickname, a history, and a mood.

    Attributes:
        LUCK_WINDOW: Trailing rolls examined for luck.
    """

    LUCK_WINDOW = LUCK_WINDOW

    def __init__(
        self,
        sides: int,
        *,
        seed: int | None = None,
        die_id: str | None = None,
        nickname: str | None = None,
    ) -> None:
        """Forge a new die.

        Args:
            sides: Number of sides (at least 1).
            seed: Seed for the die's random stream. Drawn at random if omitted.
            die_id: Stable identity. Generated if omitted.
            nickname: Optional name. A named die is dedicated to its owner.

        Raises:
            ValueError: If sides is less than 1, or the seed is not a
                64-bit unsigned integer.
        """
        if sides < 1:
            raise ValueError(f"A die needs at least 1 side, got {sides}")
        if seed is not None and not 0 <= seed < 2**SEED_BITS:
            raise ValueError(f"Seed must fit in {SEED_BITS} unsigned bits, got {seed}")

        self._sides = sides
        self._die_id = die_id or uuid.uuid4().hex
        self._seed = seed if seed is not None else random.getrandbits(SEED_BITS)
        self._rng = random.Random(self._seed)
        self._face = sides
        self._roll_history: list[int] = []
        self._user_history: list[str] = []
        self._nickname = nickname

        logger.debug(f"Forged a {sides}-sided die {self._die_id} with seed {self._seed}")

    @classmethod
    def with_history(
        cls,
        sides: int,
        rolls: Sequence[int],
        users: Sequence[str] | None = None,
        seed: int | None = None,
    ) -> "Die":
        """Build a die that has already been rolled.

        Handy for exercising luck and descriptions without rolling until
        the right pattern comes up.

        Raises:
            ValueError: If a roll is out of range or users does not match rolls.
        """
        die = cls(sides, seed=seed)
        if users is None:
            users = [DEFAULT_USER] * len(rolls)
        if len(users) != len(rolls):
            raise ValueError(
                f"Got {len(rolls)} rolls but {len(users)} users; histories must match"
            )
        for value in rolls:
            if not 1 <= value <= sides:
                raise ValueError(f"Roll {value} is impossible on a {sides}-sided die")

        die._roll_history = list(rolls)
        die._user_history = list(users)
        if rolls:
            die._face = rolls[-1]
        return die

    # =========================================================================
    # State
    # =========================================================================

    @property
    def sides(self) -> int:
        """Number of sides."""
        return self._sides

    @property
    def die_id(self) -> str:
        """Stable identity of this die."""
        return self._die_id

    @property
    def seed(self) -> int:
        """Current seed of the random stream."""
        return self._seed

    @property
    def face(self) -> int:
        """Face currently showing."""
        return self._face

    @property
    def result(self) -> int:
        """Most recent result (the face showing)."""
        return self._face

    @property
    def history(self) -> tuple[int, ...]:
        """Every roll, oldest first."""
        return tuple(self._roll_history)

    @property
    def user_history(self) -> tuple[str, ...]:
        """Who made each roll, parallel to history."""
        return tuple(self._user_history)

    @property
    def nickname(self) -> str | None:
        """The die's name, if it has one."""
        return self._nickname

    @nickname.setter
    def nickname(self, nickname: str | None) -> None:
        self._nickname = nickname
        logger.debug(f"Die {self._die_id} is now known as {nickname!r}")

    @property
    def can_draw(self) -> bool:
        """Whether a bag may hand this die out. Named dice are dedicated."""
        return self._nickname is None

    @property
    def material(self) -> str:
        """What the die is made of."""
        return material_for(self._die_id)

    # =========================================================================
    # Rolling and Superstition
    # =========================================================================

    def roll(self, user: str = DEFAULT_USER) -> int:
        """Roll the die and record who rolled it.

        Args:
            user: Who is rolling.

        Returns:
            The new face.
        """
        self._face = self._rng.randint(1, self._sides)
        self._roll_history.append(self._face)
        self._user_history.append(user)
        logger.debug(f"{user} rolled a {self._face} on die {self._die_id}")
        self._reseed()
        return self._face

    def set_face(self, face: int) -> bool:
        """Turn the die to a specific face.

        Returns:
            True if the face was set, False if it is not on this die.
        """
        if not 1 <= face <= self._sides:
            logger.debug(f"Die {self._die_id} has no face {face}")
            return False
        self._face = face
        return True

    def place(self) -> None:
        """Set the die down highest face up. For luck."""
        self.set_face(self._sides)

    def blow(self) -> bool:
        """Blow on the die. The die decides whether it helped."""
        blessed = bool(self._rng.getrandbits(1))
        self._reseed()
        logger.debug(f"Blew on die {self._die_id}: {'blessed' if blessed else 'ignored'}")
        return blessed

    def _reseed(self) -> None:
        """Fold a fresh draw back into the stream as its new seed."""
        self._seed = self._rng.getrandbits(SEED_BITS)
        self._rng.seed(self._seed)

    # =========================================================================
    # Luck
    # =========================================================================

    @property
    def luck(self) -> float:
        """Z-score of the recent rolls (0.0 until the window fills)."""
        return compute_luck(self._roll_history, self._sides, window=self.LUCK_WINDOW)

    @property
    def luck_tier(self) -> LuckTier:
        """Tier of the current luck score."""
        return luck_tier(self.luck)

    @property
    def is_lucky(self) -> bool:
        return self.luck > LUCKY_THRESHOLD

    @property
    def is_very_lucky(self) -> bool:
        return self.luck > VERY_LUCKY_THRESHOLD

    @property
    def is_unlucky(self) -> bool:
        return self.luck < UNLUCKY_THRESHOLD

    @property
    def is_very_unlucky(self) -> bool:
        return self.luck < VERY_UNLUCKY_THRESHOLD

    # =========================================================================
    # Snapshots
    # =========================================================================

    def snapshot(self) -> DieSnapshot:
        """Capture everything needed to resume this die exactly."""
        return DieSnapshot(
            die_id=self._die_id,
            sides=self._sides,
            seed=self._seed,
            face=self._face,
            roll_history=list(self._roll_history),
            user_history=list(self._user_history),
            nickname=self._nickname,
        )

    @classmethod
    def from_snapshot(cls, snapshot: DieSnapshot) -> "Die":
        """Rebuild a die from a validated snapshot.

        The stream is reseeded from the stored seed, so the restored die
        continues the sequence the original would have produced.
        """
        die = cls(
            snapshot.sides,
            seed=snapshot.seed,
            die_id=snapshot.die_id,
            nickname=snapshot.nickname,
        )
        die._face = snapshot.face
        die._roll_history = list(snapshot.roll_history)
        die._user_history = list(snapshot.user_history)
        return die

    def __str__(self) -> str:
        return describe(self, window=self.LUCK_WINDOW)

    def __repr__(self) -> str:
        return f"<Die d{self._sides} id={self._die_id[:8]} face={self._face}>"
