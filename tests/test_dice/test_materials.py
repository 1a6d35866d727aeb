"""Tests for material tables."""

import uuid

from tymora.dice.materials import (
    ADJECTIVES,
    MATERIAL_CATEGORIES,
    material_for,
    starts_with_vowel,
)


ALL_MATERIALS = {material for category in MATERIAL_CATEGORIES for material in category}


class TestMaterialFor:
    """Tests for picking materials."""

    def test_deterministic(self):
        """The same identity always gives the same material."""
        assert material_for("die-1") == material_for("die-1")

    def test_known_material(self):
        """Every pick is a real material, optionally with a real adjective."""
        for _ in range(200):
            text = material_for(uuid.uuid4().hex)
            words = text.split(" ", 1)
            if words[0] in ADJECTIVES:
                assert words[1] in ALL_MATERIALS
            else:
                assert text in ALL_MATERIALS

    def test_variety(self):
        """Different dice are made of different things."""
        picks = {material_for(uuid.uuid4().hex) for _ in range(200)}
        assert len(picks) > 10

    def test_common_materials_dominate(self):
        """About half of all dice are plastic or acrylic."""
        picks = [material_for(f"die-{i}") for i in range(2000)]
        common = sum(1 for p in picks if p.split()[-1] in ("plastic", "acrylic"))
        assert 0.4 < common / len(picks) < 0.6


class TestStartsWithVowel:
    """Tests for article selection."""

    def test_vowels(self):
        """Vowel-initial words, either case."""
        assert starts_with_vowel("obsidian")
        assert starts_with_vowel("Ivory")

    def test_consonants(self):
        """Consonant-initial words."""
        assert not starts_with_vowel("plastic")

    def test_empty(self):
        """Empty text has no vowel."""
        assert not starts_with_vowel("")
