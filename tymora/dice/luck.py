"""Luck model for dice.

A die's luck is the z-score of its most recent rolls: how far their sum
sits from the sum a fair die would be expected to produce, measured in
standard deviations. For a fair n-sided die each roll has

    mean     = (n + 1) / 2
    variance = (n^2 - 1) / 12

and a window of k independent rolls has k times both. The score is then
bucketed into five tiers.

Usage:
    >>> compute_luck([9] * 10, sides=10) > VERY_LUCKY_THRESHOLD
    True
    >>> luck_tier(0.4)
    <LuckTier.NEUTRAL: 'neutral'>
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from tymora.dice.types import LuckTier


# Number of trailing rolls examined for luck
LUCK_WINDOW = 10

# Rolls required before any luck is inferred
MIN_LUCK_HISTORY = LUCK_WINDOW

# Tier thresholds (in standard deviations)
VERY_LUCKY_THRESHOLD = 3.0
LUCKY_THRESHOLD = 2.0
UNLUCKY_THRESHOLD = -2.0
VERY_UNLUCKY_THRESHOLD = -3.0

NEUTRAL_LUCK = 0.0


def expected_mean_roll(sides: int) -> float:
    """Expected value of a single roll of a fair die.

    Examples:
        >>> expected_mean_roll(6)
        3.5
    """
    return (sides + 1) / 2.0


def roll_variance(sides: int) -> float:
    """Variance of a single roll (discrete uniform over 1..sides).

    Examples:
        >>> round(roll_variance(6), 4)
        2.9167
    """
    return (sides * sides - 1) / 12.0


def roll_std_dev(sides: int) -> float:
    """Standard deviation of a single roll."""
    return math.sqrt(roll_variance(sides))


def mean_roll(rolls: Sequence[int], sides: int) -> float:
    """Observed mean of a run of rolls.

    An empty run has no observations, so the expected mean is returned.
    """
    if not rolls:
        return expected_mean_roll(sides)
    return sum(rolls) / len(rolls)


def z_score(rolls: Sequence[int], sides: int) -> float:
    """Z-score of the sum of an arbitrary run of rolls.

    Args:
        rolls: Observed roll values.
        sides: Sides on the die that produced them.

    Returns:
        (actual_sum - expected_sum) / expected_std_dev, or 0.0 when the run
        is empty or the die is degenerate (one side, zero variance).
    """
    n = len(rolls)
    if n == 0 or sides <= 1:
        return NEUTRAL_LUCK

    expected_sum = n * expected_mean_roll(sides)
    expected_std_dev = math.sqrt(n * roll_variance(sides))
    return (sum(rolls) - expected_sum) / expected_std_dev


def compute_luck(
    history: Sequence[int],
    sides: int,
    window: int = LUCK_WINDOW,
    min_history: int | None = None,
) -> float:
    """Compute the luck score over the trailing window of a roll history.

    Args:
        history: Full roll history, oldest first.
        sides: Sides on the die.
        window: Number of trailing rolls to examine.
        min_history: Rolls needed before luck is inferred. Defaults to
            the window size.

    Returns:
        The z-score of the last min(len(history), window) rolls, or 0.0
        if the history is shorter than min_history.
    """
    if window < 1:
        raise ValueError(f"Luck window must be at least 1, got {window}")
    if min_history is None:
        min_history = window

    if len(history) < min_history:
        return NEUTRAL_LUCK

    sample_size = min(len(history), window)
    recent = list(history[len(history) - sample_size :])
    return z_score(recent, sides)


def luck_tier(score: float) -> LuckTier:
    """Bucket a luck score into a tier.

    Boundaries belong to the milder tier: exactly 2.0 is neutral and
    exactly 3.0 is lucky.
    """
    if score > VERY_LUCKY_THRESHOLD:
        return LuckTier.VERY_LUCKY
    if score > LUCKY_THRESHOLD:
        return LuckTier.LUCKY
    if score < VERY_UNLUCKY_THRESHOLD:
        return LuckTier.VERY_UNLUCKY
    if score < UNLUCKY_THRESHOLD:
        return LuckTier.UNLUCKY
    return LuckTier.NEUTRAL


@dataclass(frozen=True)
class LuckReading:
    """A luck score together with its tier.

    Attributes:
        score: Z-score of the examined rolls.
        tier: Tier the score falls into.
        sample_size: Number of rolls examined (0 when too few to judge).
    """

    score: float
    tier: LuckTier
    sample_size: int

    @property
    def is_neutral(self) -> bool:
        """Whether the die is neither lucky nor unlucky."""
        return self.tier == LuckTier.NEUTRAL


def assess_luck(
    history: Sequence[int],
    sides: int,
    window: int = LUCK_WINDOW,
    min_history: int | None = None,
) -> LuckReading:
    """Compute the luck score and tier in one go."""
    if min_history is None:
        min_history = window
    score = compute_luck(history, sides, window=window, min_history=min_history)
    sample_size = min(len(history), window) if len(history) >= min_history else 0
    return LuckReading(score=score, tier=luck_tier(score), sample_size=sample_size)
