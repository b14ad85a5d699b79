"""
Spell list filtering by class and level (SRD).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ..models import Spell
from ..results import ValidationIssue, ValidationResult, ValidationSeverity
from ..tables.spellcasting import (
    FULL_CASTER_SPELL_SLOTS,
    HALF_CASTER_SPELL_SLOTS,
    WARLOCK_PACT_SLOTS,
    CasterType,
    get_caster_type,
    is_known_class,
    third_caster_table_level,
)


@dataclass(frozen=True)
class AvailableSpells:
    cantrips: list[Spell] = field(default_factory=list)
    spells_by_level: dict[int, list[Spell]] = field(default_factory=dict)


def get_max_spell_level(class_name: str, character_level: int) -> int:
    """Highest spell level a class can cast at a given class level.

    Full and half casters: the number of spell levels in their slot row.
    Pact casters: the pact slot level. Third casters are approximated from
    the half-caster table (see third_caster_table_level). Non-casters: 0.
    """
    caster_type = get_caster_type(class_name)

    if caster_type == CasterType.NONE:
        return 0

    if caster_type == CasterType.PACT:
        pact = WARLOCK_PACT_SLOTS.get(character_level)
        return pact.level if pact else 0

    if caster_type == CasterType.FULL:
        slots = FULL_CASTER_SPELL_SLOTS.get(character_level, ())
    elif caster_type == CasterType.HALF:
        slots = HALF_CASTER_SPELL_SLOTS.get(character_level, ())
    else:
        slots = HALF_CASTER_SPELL_SLOTS.get(third_caster_table_level(character_level), ())

    return len(slots)


def can_class_cast_spell(class_name: str, spell: Spell) -> bool:
    """Check if the spell is on the class's spell list (case-insensitive)."""
    target = class_name.strip().lower()
    return any(spell_class.strip().lower() == target for spell_class in spell.classes)


def filter_spells_by_class_and_level(
    spells: Iterable[Spell],
    class_name: str,
    character_level: int,
) -> list[Spell]:
    """Spells on the class list that the class can cast at this level.

    Cantrips only need to be on the class list.
    """
    max_spell_level = get_max_spell_level(class_name, character_level)

    return [
        spell for spell in spells
        if can_class_cast_spell(class_name, spell)
        and (spell.level == 0 or spell.level <= max_spell_level)
    ]


def validate_spell_selection(spell: Spell, class_name: str, character_level: int) -> ValidationResult:
    """Validate picking a spell, reporting every problem rather than the first.

    A class missing from the caster table (homebrew) only gets a warning; its
    slot progression is unknown, so the level ceiling is not checked.
    """
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    if not can_class_cast_spell(class_name, spell):
        errors.append(ValidationIssue(
            code="SPELL_NOT_ON_CLASS_LIST",
            message=f"{spell.name} is not on the {class_name} spell list",
            severity=ValidationSeverity.ERROR,
            field="spells",
            suggestion=f"{spell.name} is available to: {', '.join(spell.classes)}",
        ))

    if not is_known_class(class_name):
        warnings.append(ValidationIssue(
            code="SPELL_UNKNOWN_CLASS",
            message=f'Unknown class "{class_name}" - cannot validate spell level',
            severity=ValidationSeverity.WARNING,
            field="class",
        ))
        return ValidationResult.from_issues(errors, warnings)

    max_spell_level = get_max_spell_level(class_name, character_level)
    if spell.level > 0 and spell.level > max_spell_level:
        errors.append(ValidationIssue(
            code="SPELL_LEVEL_TOO_HIGH",
            message=(
                f"Cannot cast {spell.name} (level {spell.level}). "
                f"Maximum spell level at level {character_level} is {max_spell_level}"
            ),
            severity=ValidationSeverity.ERROR,
            field="spells",
            suggestion=f"You need to be a higher level {class_name} to cast this spell",
        ))

    if spell.level > 0 and get_caster_type(class_name) == CasterType.NONE:
        errors.append(ValidationIssue(
            code="CLASS_CANNOT_CAST_SPELLS",
            message=f"{class_name} cannot cast spells",
            severity=ValidationSeverity.ERROR,
            field="class",
            suggestion="Consider a spellcasting class like Wizard, Cleric, or Bard",
        ))

    return ValidationResult.from_issues(errors)


def get_available_spells(
    spells: Iterable[Spell],
    class_name: str,
    character_level: int,
) -> AvailableSpells:
    """Castable spells split into cantrips and non-empty spell levels."""
    filtered = filter_spells_by_class_and_level(spells, class_name, character_level)

    spells_by_level: dict[int, list[Spell]] = {}
    for level in range(1, 10):
        at_level = [s for s in filtered if s.level == level]
        if at_level:
            spells_by_level[level] = at_level

    return AvailableSpells(
        cantrips=[s for s in filtered if s.level == 0],
        spells_by_level=spells_by_level,
    )
