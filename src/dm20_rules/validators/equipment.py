"""
Equipment proficiency validation.

Using gear without proficiency is legal, it only carries a penalty, so a
missing proficiency is always reported as a warning and never blocks.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..models import EquipmentItem, ItemType
from ..results import ValidationIssue, ValidationResult, ValidationSeverity
from ..tables.proficiencies import class_has_proficiency, get_equipment_proficiency_requirement

logger = logging.getLogger("dm20-rules")

ARMOR_PENALTY = (
    "Disadvantage on ability checks, saving throws, and attack rolls involving "
    "Strength or Dexterity, and you cannot cast spells"
)

UNPROFICIENT_PENALTIES: dict[ItemType, str] = {
    ItemType.ARMOR: ARMOR_PENALTY,
    ItemType.SHIELD: ARMOR_PENALTY,
    ItemType.WEAPON: "Cannot add proficiency bonus to attack rolls",
}


def has_proficiency_with_equipment(
    item_name: str,
    character_classes: Iterable[str],
    additional_proficiencies: Iterable[str] = (),
) -> bool:
    """True if the item needs no proficiency, a class grants it, or it was gained elsewhere."""
    required = get_equipment_proficiency_requirement(item_name)
    if required is None:
        return True

    if any(class_has_proficiency(class_name, required) for class_name in character_classes):
        return True

    # Feats, race, background
    return required.value in set(additional_proficiencies)


def get_unproficient_penalty(item: EquipmentItem) -> str:
    return UNPROFICIENT_PENALTIES.get(item.type, "No specific penalty")


def validate_equipment_proficiency(
    item: EquipmentItem,
    character_classes: Iterable[str],
    additional_proficiencies: Iterable[str] = (),
) -> ValidationResult:
    """Warn when a character uses an item it isn't proficient with."""
    character_classes = list(character_classes)
    additional_proficiencies = list(additional_proficiencies)

    if has_proficiency_with_equipment(item.name, character_classes, additional_proficiencies):
        return ValidationResult()

    required = get_equipment_proficiency_requirement(item.name)
    logger.debug(f"No proficiency with {item.name} for classes {character_classes}")

    return ValidationResult.from_issues(warnings=[ValidationIssue(
        code="EQUIPMENT_NOT_PROFICIENT",
        message=f"You are not proficient with {item.name} (requires {required.label})",
        severity=ValidationSeverity.WARNING,
        field="equipment",
        suggestion=f"Penalty: {get_unproficient_penalty(item)}",
    )])


def validate_all_equipped_items(
    equipped_items: Iterable[EquipmentItem],
    character_classes: Iterable[str],
    additional_proficiencies: Iterable[str] = (),
) -> ValidationResult:
    character_classes = list(character_classes)
    additional_proficiencies = list(additional_proficiencies)
    warnings: list[ValidationIssue] = []

    for item in equipped_items:
        result = validate_equipment_proficiency(item, character_classes, additional_proficiencies)
        warnings.extend(result.warnings)

    return ValidationResult.from_issues(warnings=warnings)
