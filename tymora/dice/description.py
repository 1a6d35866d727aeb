"""Flavor text for dice.

A description has two parts: what the die is ("Lucky, an ornate jade
20-sided die.") and how it feels, which depends on its luck and how
worn it is.
"""

from typing import TYPE_CHECKING

from tymora.dice.luck import LUCK_WINDOW, compute_luck, luck_tier
from tymora.dice.materials import material_for, starts_with_vowel
from tymora.dice.types import LuckTier

if TYPE_CHECKING:
    from tymora.dice.die import Die


FORTUNE_PHRASE = "It shines with an otherworldly brilliance, as if touched by fortune herself."
FAVOR_PHRASE = "It feels light and ready, as if favor lingers nearby."
CURSE_PHRASE = "It exudes an unsettling and malevolent aura, as if shadowed by an ancient curse."
MISFORTUNE_PHRASE = "It carries an ominous stillness, as if misfortune waits in the wings."
PRISTINE_PHRASE = "It is pristine and unused."
ALMOST_NEW_PHRASE = "It looks almost new."

# Checked in this order; first match wins
TIER_PHRASES = (
    (LuckTier.VERY_LUCKY, FORTUNE_PHRASE),
    (LuckTier.LUCKY, FAVOR_PHRASE),
    (LuckTier.VERY_UNLUCKY, CURSE_PHRASE),
    (LuckTier.UNLUCKY, MISFORTUNE_PHRASE),
)


def basic_description(die: "Die") -> str:
    """Describe what the die is.

    Examples:
        "A polished oak 6-sided die."
        "Grim, an obsidian 20-sided die."
    """
    material = material_for(die.die_id)
    prefix = f"{die.nickname}, a" if die.nickname is not None else "A"
    if starts_with_vowel(material):
        prefix += "n"
    return f"{prefix} {material} {die.sides}-sided die."


def luck_description(
    die: "Die",
    window: int = LUCK_WINDOW,
    min_history: int | None = None,
) -> str:
    """Describe how the die feels, based on its luck and wear.

    Returns an empty string for an established die with neutral luck.
    """
    history = die.history
    tier = luck_tier(compute_luck(history, die.sides, window=window, min_history=min_history))

    for phrase_tier, phrase in TIER_PHRASES:
        if tier == phrase_tier:
            return phrase
    if not history:
        return PRISTINE_PHRASE
    if len(history) < window:
        return ALMOST_NEW_PHRASE
    return ""


def describe(
    die: "Die",
    window: int = LUCK_WINDOW,
    min_history: int | None = None,
) -> str:
    """Full description of a die.

    Depends only on the die's public state, so describing an unchanged
    die twice gives the same text.
    """
    suffix = luck_description(die, window=window, min_history=min_history)
    basic = basic_description(die)
    return f"{basic} {suffix}" if suffix else basic
