"""Equipment proficiency requirements and the proficiencies each class grants (SRD)."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from ..models import ProficiencyType

logger = logging.getLogger("dm20-rules")

LIGHT = ProficiencyType.LIGHT_ARMOR
MEDIUM = ProficiencyType.MEDIUM_ARMOR
HEAVY = ProficiencyType.HEAVY_ARMOR
SHIELDS = ProficiencyType.SHIELDS
SIMPLE = ProficiencyType.SIMPLE_WEAPONS
MARTIAL = ProficiencyType.MARTIAL_WEAPONS


# Proficiencies a class grants when taken as the starting class
CLASS_PROFICIENCIES: Mapping[str, tuple[ProficiencyType, ...]] = MappingProxyType({
    "Barbarian": (LIGHT, MEDIUM, SHIELDS, SIMPLE, MARTIAL),
    "Bard": (LIGHT, SIMPLE),
    "Cleric": (LIGHT, MEDIUM, SHIELDS, SIMPLE),
    "Druid": (LIGHT, MEDIUM, SHIELDS, SIMPLE),
    "Fighter": (LIGHT, MEDIUM, HEAVY, SHIELDS, SIMPLE, MARTIAL),
    "Monk": (SIMPLE,),
    "Paladin": (LIGHT, MEDIUM, HEAVY, SHIELDS, SIMPLE, MARTIAL),
    "Ranger": (LIGHT, MEDIUM, SHIELDS, SIMPLE, MARTIAL),
    "Rogue": (LIGHT, SIMPLE),
    "Sorcerer": (SIMPLE,),
    "Warlock": (LIGHT, SIMPLE),
    "Wizard": (SIMPLE,),
})

# Reduced set gained when a class is added through multiclassing
MULTICLASS_PROFICIENCIES: Mapping[str, tuple[ProficiencyType, ...]] = MappingProxyType({
    "Barbarian": (SHIELDS, SIMPLE, MARTIAL),
    "Bard": (LIGHT,),
    "Cleric": (LIGHT, MEDIUM, SHIELDS),
    "Druid": (LIGHT, MEDIUM, SHIELDS),
    "Fighter": (LIGHT, MEDIUM, SHIELDS, SIMPLE, MARTIAL),
    "Monk": (SIMPLE,),
    "Paladin": (LIGHT, MEDIUM, SHIELDS, SIMPLE, MARTIAL),
    "Ranger": (LIGHT, MEDIUM, SHIELDS, SIMPLE, MARTIAL),
    "Rogue": (LIGHT,),
    "Sorcerer": (),
    "Warlock": (LIGHT, SIMPLE),
    "Wizard": (),
})


def _items(proficiency: ProficiencyType, *names: str) -> dict[str, ProficiencyType]:
    return {name: proficiency for name in names}


EQUIPMENT_PROFICIENCY_MAP: Mapping[str, ProficiencyType] = MappingProxyType({
    **_items(LIGHT, "Padded", "Leather", "Studded Leather"),
    **_items(MEDIUM, "Hide", "Chain Shirt", "Scale Mail", "Breastplate", "Half Plate"),
    **_items(HEAVY, "Ring Mail", "Chain Mail", "Splint", "Plate"),
    **_items(SHIELDS, "Shield"),
    **_items(
        SIMPLE,
        "Club", "Dagger", "Greatclub", "Handaxe", "Javelin", "Light Hammer", "Mace",
        "Quarterstaff", "Sickle", "Spear", "Light Crossbow", "Dart", "Shortbow", "Sling",
    ),
    **_items(
        MARTIAL,
        "Battleaxe", "Flail", "Glaive", "Greataxe", "Greatsword", "Halberd", "Lance",
        "Longsword", "Maul", "Morningstar", "Pike", "Rapier", "Scimitar", "Shortsword",
        "Trident", "War Pick", "Warhammer", "Whip", "Blowgun", "Hand Crossbow",
        "Heavy Crossbow", "Longbow", "Net",
    ),
})

_EQUIPMENT_BY_NAME: Mapping[str, ProficiencyType] = MappingProxyType(
    {name.lower(): prof for name, prof in EQUIPMENT_PROFICIENCY_MAP.items()}
)


def _class_entry(
    table: Mapping[str, tuple[ProficiencyType, ...]], class_name: str
) -> tuple[ProficiencyType, ...]:
    target = class_name.strip().lower()
    for name, proficiencies in table.items():
        if name.lower() == target:
            return proficiencies
    logger.debug(f"No proficiency entry for class '{class_name}'")
    return ()


def get_equipment_proficiency_requirement(item_name: str) -> ProficiencyType | None:
    """Proficiency an item requires, or None if it needs none (or is uncatalogued)."""
    return _EQUIPMENT_BY_NAME.get(item_name.strip().lower())


def get_class_proficiencies(class_name: str) -> list[ProficiencyType]:
    return list(_class_entry(CLASS_PROFICIENCIES, class_name))


def get_multiclass_proficiencies(class_name: str) -> list[ProficiencyType]:
    """Proficiencies gained by multiclassing into a class."""
    return list(_class_entry(MULTICLASS_PROFICIENCIES, class_name))


def class_has_proficiency(class_name: str, proficiency: ProficiencyType) -> bool:
    return proficiency in _class_entry(CLASS_PROFICIENCIES, class_name)
