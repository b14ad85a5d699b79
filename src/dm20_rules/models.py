"""
Data models consumed by the rules engine.

These are read-only projections built by the calling layer from persisted
character data. The engine never mutates them.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Ability(str, Enum):
    """The six D&D ability scores, keyed by their short name."""
    STR = "str"
    DEX = "dex"
    CON = "con"
    INT = "int"
    WIS = "wis"
    CHA = "cha"

    @property
    def field_name(self) -> str:
        """Full attribute name on AbilityScores, e.g. 'strength'."""
        return ABILITY_FIELD_NAMES[self]

    @property
    def label(self) -> str:
        """Display label, e.g. 'STR'."""
        return self.value.upper()


ABILITY_FIELD_NAMES: dict[Ability, str] = {
    Ability.STR: "strength",
    Ability.DEX: "dexterity",
    Ability.CON: "constitution",
    Ability.INT: "intelligence",
    Ability.WIS: "wisdom",
    Ability.CHA: "charisma",
}

ALL_ABILITIES: tuple[Ability, ...] = tuple(Ability)


class AbilityScoreMethod(str, Enum):
    """How a character's base ability scores were generated."""
    POINT_BUY = "point-buy"
    STANDARD_ARRAY = "standard-array"
    MANUAL = "manual"


class ProficiencyType(str, Enum):
    """Equipment proficiency categories."""
    LIGHT_ARMOR = "light-armor"
    MEDIUM_ARMOR = "medium-armor"
    HEAVY_ARMOR = "heavy-armor"
    SHIELDS = "shields"
    SIMPLE_WEAPONS = "simple-weapons"
    MARTIAL_WEAPONS = "martial-weapons"
    SPECIFIC_WEAPON = "specific-weapon"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ")


class ItemType(str, Enum):
    WEAPON = "weapon"
    ARMOR = "armor"
    SHIELD = "shield"
    EQUIPMENT = "equipment"


class AbilityScores(BaseModel):
    """The six ability scores of a character.

    Accepts either full names (``strength=15``) or short names (``str=15``).
    Ranges are deliberately not enforced here: out-of-range scores are
    reported by the validators.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    strength: int = Field(alias="str")
    dexterity: int = Field(alias="dex")
    constitution: int = Field(alias="con")
    intelligence: int = Field(alias="int")
    wisdom: int = Field(alias="wis")
    charisma: int = Field(alias="cha")

    def score(self, ability: Ability | str) -> int:
        return getattr(self, Ability(ability).field_name)

    def as_dict(self) -> dict[str, int]:
        """Scores keyed by short ability name."""
        return {ability.value: self.score(ability) for ability in ALL_ABILITIES}


ScoreSource = AbilityScores | Mapping[str, Any]


def score_of(scores: ScoreSource, ability: Ability | str) -> Any:
    """Read one ability score from an AbilityScores model or a plain mapping.

    Mappings may be keyed by short ('str') or full ('strength') names. A
    missing ability is a programming error and raises KeyError.
    """
    ability = Ability(ability)
    if isinstance(scores, AbilityScores):
        return scores.score(ability)
    if ability.value in scores:
        return scores[ability.value]
    return scores[ability.field_name]


class CharacterClass(BaseModel):
    """One class a character has levels in."""
    model_config = ConfigDict(frozen=True)

    name: str
    level: int = Field(ge=1, le=20)


class EquipmentItem(BaseModel):
    """An equipped item. Its proficiency requirement comes from table lookup on ``name``."""
    model_config = ConfigDict(frozen=True)

    name: str
    type: ItemType = ItemType.EQUIPMENT


class Spell(BaseModel):
    """Spell information."""
    model_config = ConfigDict(frozen=True)

    name: str
    level: int = Field(ge=0, le=9)
    classes: list[str] = Field(default_factory=list)
    school: str = ""
    casting_time: str = ""
    range: str = ""
    components: str = ""
    duration: str = ""
    description: str = ""
    ritual: bool = False


class CharacterForValidation(BaseModel):
    """Read-only projection of a character, built right before each validation call."""
    model_config = ConfigDict(frozen=True)

    name: str
    race: str
    classes: list[CharacterClass]
    background: str | None = None
    level: int = Field(ge=1, le=20)
    ability_scores: AbilityScores
    ability_score_method: AbilityScoreMethod = AbilityScoreMethod.MANUAL
    proficiencies: list[str] = Field(default_factory=list)
    feats: list[str] = Field(default_factory=list)
    known_spells: list[str] = Field(default_factory=list)
    known_cantrips: list[str] = Field(default_factory=list)
    prepared_spells: list[str] = Field(default_factory=list)
    equipped_items: list[EquipmentItem] = Field(default_factory=list)
    has_spellcasting: bool = False

    @model_validator(mode="before")
    @classmethod
    def default_total_level(cls, data: Any) -> Any:
        """Derive the total level from the class levels when it isn't given."""
        if isinstance(data, dict) and data.get("level") is None:
            total = 0
            for char_class in data.get("classes") or []:
                total += char_class["level"] if isinstance(char_class, dict) else char_class.level
            data = {**data, "level": max(total, 1)}
        return data

    @property
    def class_names(self) -> list[str]:
        return [c.name for c in self.classes]

    @property
    def is_multiclass(self) -> bool:
        return len(self.classes) > 1

    def has_class(self, class_name: str) -> bool:
        target = class_name.strip().lower()
        return any(c.name.strip().lower() == target for c in self.classes)


__all__ = [
    "Ability",
    "ABILITY_FIELD_NAMES",
    "ALL_ABILITIES",
    "AbilityScoreMethod",
    "ProficiencyType",
    "ItemType",
    "AbilityScores",
    "ScoreSource",
    "score_of",
    "CharacterClass",
    "EquipmentItem",
    "Spell",
    "CharacterForValidation",
]
