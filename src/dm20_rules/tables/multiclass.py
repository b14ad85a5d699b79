"""Multiclass ability prerequisites per class (SRD 5.1)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..models import Ability

logger = logging.getLogger("dm20-rules")


class RequirementType(str, Enum):
    """Whether every listed requirement must hold, or just one of them."""
    ALL = "all"
    ANY = "any"


@dataclass(frozen=True)
class AbilityRequirement:
    ability: Ability
    minimum: int

    def __str__(self) -> str:
        return f"{self.ability.label} {self.minimum}"


@dataclass(frozen=True)
class MulticlassRequirement:
    class_name: str
    requirements: tuple[AbilityRequirement, ...]
    requirement_type: RequirementType = RequirementType.ALL


def _req(class_name: str, *pairs: tuple[Ability, int], kind: RequirementType = RequirementType.ALL) -> MulticlassRequirement:
    return MulticlassRequirement(
        class_name=class_name,
        requirements=tuple(AbilityRequirement(ability, minimum) for ability, minimum in pairs),
        requirement_type=kind,
    )


# =============================================================================
# Multiclass Requirements
# =============================================================================

MULTICLASS_PREREQUISITES: tuple[MulticlassRequirement, ...] = (
    _req("Barbarian", (Ability.STR, 13)),
    _req("Bard", (Ability.CHA, 13)),
    _req("Cleric", (Ability.WIS, 13)),
    _req("Druid", (Ability.WIS, 13)),
    _req("Fighter", (Ability.STR, 13), (Ability.DEX, 13), kind=RequirementType.ANY),
    _req("Monk", (Ability.DEX, 13), (Ability.WIS, 13)),
    _req("Paladin", (Ability.STR, 13), (Ability.CHA, 13)),
    _req("Ranger", (Ability.DEX, 13), (Ability.WIS, 13)),
    _req("Rogue", (Ability.DEX, 13)),
    _req("Sorcerer", (Ability.CHA, 13)),
    _req("Warlock", (Ability.CHA, 13)),
    _req("Wizard", (Ability.INT, 13)),
)

_BY_NAME: Mapping[str, MulticlassRequirement] = MappingProxyType(
    {req.class_name.lower(): req for req in MULTICLASS_PREREQUISITES}
)


def get_multiclass_prerequisite(class_name: str) -> MulticlassRequirement | None:
    """Look up a class's multiclass prerequisite (case-insensitive)."""
    requirement = _BY_NAME.get(class_name.strip().lower())
    if requirement is None:
        logger.debug(f"No multiclass prerequisite entry for class '{class_name}'")
    return requirement


def get_multiclass_prerequisite_description(class_name: str) -> str:
    """Human-readable prerequisite, e.g. 'STR 13 or DEX 13'."""
    prerequisite = get_multiclass_prerequisite(class_name)
    if prerequisite is None:
        return "Unknown class prerequisites"

    joiner = " and " if prerequisite.requirement_type == RequirementType.ALL else " or "
    return joiner.join(str(req) for req in prerequisite.requirements)
