"""Material tables for flavor text.

Every die is made of something. The material is picked from these tables
by a generator seeded with the die's identity, so the same die always
reads the same way.
"""

import random


COMMON = ("plastic", "acrylic")
METALS = ("iron", "steel", "bronze", "gold", "silver", "platinum", "mithril")
STONES = ("granite", "marble", "limestone", "obsidian", "basalt", "jade", "serpentine")
WOODS = ("oak", "birch", "mahogany", "teak", "ebony", "pine")
GEMS = ("ruby", "sapphire", "emerald", "amethyst", "diamond", "opal")
BONES = ("cow bone", "pig bone", "horse bone", "human bone", "dragon bone")
OTHER_MATERIALS = ("ivory", "glass", "ceramic", "clay", "chitin")

# Common materials make up half the draws
MATERIAL_CATEGORIES = (
    COMMON, METALS,
    COMMON, STONES,
    COMMON, WOODS,
    COMMON, GEMS,
    COMMON, BONES,
    COMMON, OTHER_MATERIALS,
)

ADJECTIVES = (
    "polished",
    "rough-hewn",
    "engraved",
    "ancient",
    "shimmering",
    "ornate",
    "pristine",
    "primitive",
    "masterwork",
)

# Out of 10: draws above this get an adjective (a 20% chance)
ADJECTIVE_CUTOFF = 7

VOWELS = "aeiouAEIOU"


def material_for(identity: str) -> str:
    """Pick the material for a die.

    Args:
        identity: Stable identity of the die (its die_id).

    Returns:
        Material phrase, optionally with an adjective, e.g. "ornate jade".

    Examples:
        >>> material_for("abc") == material_for("abc")
        True
    """
    # str seeds hash through sha512, so this is stable across processes
    rng = random.Random(identity)
    category = rng.choice(MATERIAL_CATEGORIES)
    material = rng.choice(category)

    if rng.randrange(10) > ADJECTIVE_CUTOFF:
        return f"{rng.choice(ADJECTIVES)} {material}"
    return material


def starts_with_vowel(text: str) -> bool:
    """Check whether text begins with a vowel (for choosing 'a' or 'an')."""
    return bool(text) and text[0] in VOWELS
