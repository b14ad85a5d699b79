"""
Pytest configuration and fixtures for dm20-rules tests.
"""

import sys
from pathlib import Path
import pytest

# Add src directory to Python path to allow importing dm20_rules
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dm20_rules.models import (  # noqa: E402
    AbilityScores,
    CharacterClass,
    CharacterForValidation,
    Spell,
)


STANDARD_SCORES = {"str": 15, "dex": 14, "con": 13, "int": 12, "wis": 10, "cha": 8}


def _make_scores(**overrides: int) -> AbilityScores:
    """Standard array assigned STR-first, with per-ability overrides."""
    return AbilityScores(**{**STANDARD_SCORES, **overrides})


def _make_character(classes=(("Fighter", 1),), scores=None, **fields) -> CharacterForValidation:
    """Build a validation character with sensible defaults."""
    return CharacterForValidation(
        name=fields.pop("name", "Test Character"),
        race=fields.pop("race", "Human"),
        classes=[CharacterClass(name=name, level=level) for name, level in classes],
        ability_scores=scores if scores is not None else _make_scores(),
        **fields,
    )


@pytest.fixture
def make_scores():
    return _make_scores


@pytest.fixture
def make_character():
    return _make_character


@pytest.fixture
def standard_scores() -> AbilityScores:
    return _make_scores()


@pytest.fixture
def fighter() -> CharacterForValidation:
    """Level 1 Human Fighter with standard array scores."""
    return _make_character()


@pytest.fixture
def wizard() -> CharacterForValidation:
    """Level 1 Elf Wizard, INT-focused."""
    return _make_character(
        classes=(("Wizard", 1),),
        scores=_make_scores(str=8, dex=14, con=13, int=15, wis=12, cha=10),
        race="Elf",
        has_spellcasting=True,
    )


@pytest.fixture
def spells() -> list[Spell]:
    """A small spell list spanning cantrips to 5th level."""
    return [
        Spell(name="Fire Bolt", level=0, classes=["Sorcerer", "Wizard"]),
        Spell(name="Sacred Flame", level=0, classes=["Cleric"]),
        Spell(name="Magic Missile", level=1, classes=["Sorcerer", "Wizard"]),
        Spell(name="Cure Wounds", level=1, classes=["Bard", "Cleric", "Druid", "Paladin", "Ranger"]),
        Spell(name="Hex", level=1, classes=["Warlock"]),
        Spell(name="Misty Step", level=2, classes=["Sorcerer", "Warlock", "Wizard"]),
        Spell(name="Fireball", level=3, classes=["Sorcerer", "Wizard"]),
        Spell(name="Revivify", level=3, classes=["Cleric", "Paladin"]),
        Spell(name="Cone of Cold", level=5, classes=["Sorcerer", "Wizard"]),
    ]
