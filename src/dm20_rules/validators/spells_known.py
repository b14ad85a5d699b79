"""
Spells known / prepared limits.

Bard, Ranger, Sorcerer and Warlock learn a fixed number of spells per level.
Cleric, Druid, Paladin and Wizard prepare a daily subset whose size is
ability modifier + level (half level for half casters), minimum 1.
"""

from __future__ import annotations

from typing import Sequence

from ..results import ValidationIssue, ValidationResult, ValidationSeverity
from ..tables.spellcasting import (
    CasterType,
    get_cantrips_known_table,
    get_caster_type,
    get_spells_known_table,
    uses_prepared_spells,
)
from .common import plural


def get_spells_known_limit(class_name: str, level: int) -> int | None:
    """Spells known at a level, or None for prepared casters and classes without a table."""
    if uses_prepared_spells(class_name):
        return None

    table = get_spells_known_table(class_name)
    if table is None:
        return None

    return table.get(level, 0)


def get_cantrips_known_limit(class_name: str, level: int) -> int:
    table = get_cantrips_known_table(class_name)
    if table is None:
        return 0
    return table.get(level, 0)


def get_prepared_spells_limit(class_name: str, level: int, ability_modifier: int) -> int:
    """How many spells a prepared caster can prepare (0 for other classes)."""
    if not uses_prepared_spells(class_name):
        return 0

    if get_caster_type(class_name) == CasterType.HALF:
        return max(1, ability_modifier + level // 2)

    return max(1, ability_modifier + level)


def validate_known_spells_limit(
    class_name: str,
    level: int,
    known_spells: Sequence[str],
    known_cantrips: Sequence[str],
) -> ValidationResult:
    """Compare known spells and cantrips against the class tables."""
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    spells_limit = get_spells_known_limit(class_name, level)
    if spells_limit is not None:
        known = len(known_spells)
        if known > spells_limit:
            excess = known - spells_limit
            errors.append(ValidationIssue(
                code="TOO_MANY_SPELLS_KNOWN",
                message=(
                    f"You know {known} spells, but a level {level} {class_name} can only know "
                    f"{spells_limit} spells. Remove {plural(excess, 'spell')}."
                ),
                severity=ValidationSeverity.ERROR,
                field="known_spells",
                suggestion=f"Remove {plural(excess, 'spell')} from your known spells",
            ))
        elif known < spells_limit:
            remaining = spells_limit - known
            warnings.append(ValidationIssue(
                code="SPELLS_KNOWN_AVAILABLE",
                message=f"You can know {plural(remaining, 'more spell')}",
                severity=ValidationSeverity.INFO,
                field="known_spells",
            ))

    cantrips_limit = get_cantrips_known_limit(class_name, level)
    if cantrips_limit > 0 and len(known_cantrips) > cantrips_limit:
        excess = len(known_cantrips) - cantrips_limit
        errors.append(ValidationIssue(
            code="TOO_MANY_CANTRIPS_KNOWN",
            message=(
                f"You know {len(known_cantrips)} cantrips, but a level {level} {class_name} "
                f"can only know {cantrips_limit}. Remove {plural(excess, 'cantrip')}."
            ),
            severity=ValidationSeverity.ERROR,
            field="known_cantrips",
            suggestion=f"Remove {plural(excess, 'cantrip')} from your known cantrips",
        ))

    return ValidationResult.from_issues(errors, warnings)


def validate_prepared_spells_limit(
    class_name: str,
    level: int,
    ability_modifier: int,
    prepared_spells: Sequence[str],
) -> ValidationResult:
    """Compare prepared spells against the prepared-caster formula."""
    if not uses_prepared_spells(class_name):
        return ValidationResult()

    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []
    limit = get_prepared_spells_limit(class_name, level, ability_modifier)
    prepared = len(prepared_spells)

    if prepared > limit:
        excess = prepared - limit
        errors.append(ValidationIssue(
            code="TOO_MANY_PREPARED_SPELLS",
            message=(
                f"You have {prepared} spells prepared, but can only prepare {limit}. "
                f"Unprepare {plural(excess, 'spell')}."
            ),
            severity=ValidationSeverity.ERROR,
            field="prepared_spells",
            suggestion=f"Unprepare {plural(excess, 'spell')}",
        ))
    elif prepared < limit:
        remaining = limit - prepared
        warnings.append(ValidationIssue(
            code="CAN_PREPARE_MORE_SPELLS",
            message=f"You can prepare {plural(remaining, 'more spell')}",
            severity=ValidationSeverity.INFO,
            field="prepared_spells",
        ))

    return ValidationResult.from_issues(errors, warnings)
