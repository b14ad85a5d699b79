"""
Spellcasting tables: slot progressions per caster archetype, spells and
cantrips known, and which classes prepare their spells.

Slot rows are indexed by class level. Each row lists slot counts per spell
level (index 0 = 1st level), so a row's length is the highest spell level the
class can cast at that level. Half casters have an empty row at level 1.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..models import Ability


class CasterType(str, Enum):
    """Shape of a class's spell-slot progression."""
    FULL = "full"
    HALF = "half"
    THIRD = "third"  # Eldritch Knight / Arcane Trickster
    PACT = "pact"    # Warlock pact magic
    NONE = "none"


@dataclass(frozen=True)
class PactMagicSlots:
    slots: int
    level: int  # Spell level every pact slot is cast at


# =============================================================================
# Spell Slot Progressions (SRD)
# =============================================================================

FULL_CASTER_SPELL_SLOTS: Mapping[int, tuple[int, ...]] = MappingProxyType({
    1:  (2,),
    2:  (3,),
    3:  (4, 2),
    4:  (4, 3),
    5:  (4, 3, 2),
    6:  (4, 3, 3),
    7:  (4, 3, 3, 1),
    8:  (4, 3, 3, 2),
    9:  (4, 3, 3, 3, 1),
    10: (4, 3, 3, 3, 2),
    11: (4, 3, 3, 3, 2, 1),
    12: (4, 3, 3, 3, 2, 1),
    13: (4, 3, 3, 3, 2, 1, 1),
    14: (4, 3, 3, 3, 2, 1, 1),
    15: (4, 3, 3, 3, 2, 1, 1, 1),
    16: (4, 3, 3, 3, 2, 1, 1, 1),
    17: (4, 3, 3, 3, 2, 1, 1, 1, 1),
    18: (4, 3, 3, 3, 3, 1, 1, 1, 1),
    19: (4, 3, 3, 3, 3, 2, 1, 1, 1),
    20: (4, 3, 3, 3, 3, 2, 2, 1, 1),
})

# Paladin, Ranger
HALF_CASTER_SPELL_SLOTS: Mapping[int, tuple[int, ...]] = MappingProxyType({
    1:  (),
    2:  (2,),
    3:  (3,),
    4:  (3,),
    5:  (4, 2),
    6:  (4, 2),
    7:  (4, 3),
    8:  (4, 3),
    9:  (4, 3, 2),
    10: (4, 3, 2),
    11: (4, 3, 3),
    12: (4, 3, 3),
    13: (4, 3, 3, 1),
    14: (4, 3, 3, 1),
    15: (4, 3, 3, 2),
    16: (4, 3, 3, 2),
    17: (4, 3, 3, 3, 1),
    18: (4, 3, 3, 3, 1),
    19: (4, 3, 3, 3, 2),
    20: (4, 3, 3, 3, 2),
})

WARLOCK_PACT_SLOTS: Mapping[int, PactMagicSlots] = MappingProxyType({
    level: PactMagicSlots(slots, spell_level)
    for level, (slots, spell_level) in {
        1: (1, 1), 2: (2, 1), 3: (2, 2), 4: (2, 2), 5: (2, 3),
        6: (2, 3), 7: (2, 4), 8: (2, 4), 9: (2, 5), 10: (2, 5),
        11: (3, 5), 12: (3, 5), 13: (3, 5), 14: (3, 5), 15: (3, 5),
        16: (3, 5), 17: (4, 5), 18: (4, 5), 19: (4, 5), 20: (4, 5),
    }.items()
})

CLASS_CASTER_TYPES: Mapping[str, CasterType] = MappingProxyType({
    "Bard": CasterType.FULL,
    "Cleric": CasterType.FULL,
    "Druid": CasterType.FULL,
    "Sorcerer": CasterType.FULL,
    "Wizard": CasterType.FULL,
    "Paladin": CasterType.HALF,
    "Ranger": CasterType.HALF,
    "Warlock": CasterType.PACT,
    "Fighter": CasterType.THIRD,
    "Rogue": CasterType.THIRD,
    "Barbarian": CasterType.NONE,
    "Monk": CasterType.NONE,
})

SPELLCASTING_ABILITIES: Mapping[str, Ability] = MappingProxyType({
    "Bard": Ability.CHA,
    "Cleric": Ability.WIS,
    "Druid": Ability.WIS,
    "Paladin": Ability.CHA,
    "Ranger": Ability.WIS,
    "Sorcerer": Ability.CHA,
    "Warlock": Ability.CHA,
    "Wizard": Ability.INT,
    "Fighter": Ability.INT,
    "Rogue": Ability.INT,
})


# =============================================================================
# Spells / Cantrips Known
# =============================================================================

def _by_level(*counts: int) -> Mapping[int, int]:
    return MappingProxyType(dict(enumerate(counts, start=1)))


SPELLS_KNOWN: Mapping[str, Mapping[int, int]] = MappingProxyType({
    "Bard": _by_level(4, 5, 6, 7, 8, 9, 10, 11, 12, 14, 15, 15, 16, 18, 19, 19, 20, 22, 22, 22),
    "Ranger": _by_level(0, 2, 3, 3, 4, 4, 5, 5, 6, 6, 7, 7, 8, 8, 9, 9, 10, 10, 11, 11),
    "Sorcerer": _by_level(2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 12, 13, 13, 14, 14, 15, 15, 15, 15),
    "Warlock": _by_level(2, 3, 4, 5, 6, 7, 8, 9, 10, 10, 11, 11, 12, 12, 13, 13, 14, 14, 15, 15),
})

CANTRIPS_KNOWN: Mapping[str, Mapping[int, int]] = MappingProxyType({
    "Bard": _by_level(2, 2, 2, 3, 3, 3, 3, 3, 3, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4),
    "Cleric": _by_level(3, 3, 3, 4, 4, 4, 4, 4, 4, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5),
    "Druid": _by_level(2, 2, 2, 3, 3, 3, 3, 3, 3, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4),
    "Sorcerer": _by_level(4, 4, 4, 5, 5, 5, 5, 5, 5, 6, 6, 6, 6, 6, 6, 6, 6, 6, 6, 6),
    "Warlock": _by_level(2, 2, 2, 3, 3, 3, 3, 3, 3, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4),
    "Wizard": _by_level(3, 3, 3, 4, 4, 4, 4, 4, 4, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5),
})

# Classes that prepare spells from their whole list instead of tracking spells known
PREPARED_SPELL_CLASSES: tuple[str, ...] = ("Cleric", "Druid", "Paladin", "Wizard")


# =============================================================================
# Lookups (case-insensitive on class name)
# =============================================================================

def _lookup(table: Mapping[str, object], class_name: str) -> object | None:
    target = class_name.strip().lower()
    for name, value in table.items():
        if name.lower() == target:
            return value
    return None


def get_caster_type(class_name: str) -> CasterType:
    """Caster archetype of a class. Unknown classes are treated as non-casters."""
    return _lookup(CLASS_CASTER_TYPES, class_name) or CasterType.NONE


def is_known_class(class_name: str) -> bool:
    """True if the class appears in the caster table (casters and non-casters alike)."""
    return _lookup(CLASS_CASTER_TYPES, class_name) is not None


def get_spellcasting_ability(class_name: str) -> Ability | None:
    return _lookup(SPELLCASTING_ABILITIES, class_name)


def get_spells_known_table(class_name: str) -> Mapping[int, int] | None:
    return _lookup(SPELLS_KNOWN, class_name)


def get_cantrips_known_table(class_name: str) -> Mapping[int, int] | None:
    return _lookup(CANTRIPS_KNOWN, class_name)


def uses_prepared_spells(class_name: str) -> bool:
    target = class_name.strip().lower()
    return any(c.lower() == target for c in PREPARED_SPELL_CLASSES)


def get_spell_slots(class_name: str, class_level: int) -> dict[int, int]:
    """Spell slots per spell level for a single-class character, e.g. {1: 4, 2: 3}.

    Warlocks report their pact slots at the pact slot level. Third casters
    follow the same approximation as get_max_spell_level().
    """
    caster_type = get_caster_type(class_name)

    if caster_type == CasterType.PACT:
        pact = WARLOCK_PACT_SLOTS.get(class_level)
        return {pact.level: pact.slots} if pact else {}

    if caster_type == CasterType.FULL:
        row = FULL_CASTER_SPELL_SLOTS.get(class_level, ())
    elif caster_type == CasterType.HALF:
        row = HALF_CASTER_SPELL_SLOTS.get(class_level, ())
    elif caster_type == CasterType.THIRD:
        row = HALF_CASTER_SPELL_SLOTS.get(third_caster_table_level(class_level), ())
    else:
        row = ()

    return {idx + 1: count for idx, count in enumerate(row) if count > 0}


def third_caster_table_level(class_level: int) -> int:
    """Half-caster table row used to approximate a third caster.

    ceil(level / 3) doubled. This is a simplification of the Eldritch Knight
    and Arcane Trickster tables, not an exact copy of them.
    """
    return math.ceil(class_level / 3) * 2
