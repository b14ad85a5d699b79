"""
Feat prerequisite validation (SRD).

Each prerequisite variant has its own checker registered on
check_prerequisite. A checker returns None when the prerequisite is met,
otherwise the issue describing what is missing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import singledispatch

from ..models import CharacterForValidation, score_of
from ..results import ValidationIssue, ValidationResult, ValidationSeverity
from ..tables.feats import (
    SRD_FEATS,
    AbilityPrerequisite,
    ClassPrerequisite,
    Feat,
    LevelPrerequisite,
    ProficiencyPrerequisite,
    RacePrerequisite,
    SpellcastingPrerequisite,
    get_feat,
)
from .common import ability_field


@dataclass(frozen=True)
class NearlyAvailableFeat:
    """A feat the character is one prerequisite away from."""
    feat: Feat
    missing: tuple[ValidationIssue, ...] = field(default_factory=tuple)


# =============================================================================
# Prerequisite Checks
# =============================================================================

@singledispatch
def check_prerequisite(prereq: object, character: CharacterForValidation) -> ValidationIssue | None:
    """Check one feat prerequisite against a character."""
    raise NotImplementedError(f"No checker registered for prerequisite {type(prereq).__name__}")


@check_prerequisite.register
def _(prereq: AbilityPrerequisite, character: CharacterForValidation) -> ValidationIssue | None:
    score = score_of(character.ability_scores, prereq.ability)
    if score >= prereq.minimum:
        return None
    label = prereq.ability.label
    return ValidationIssue(
        code="FEAT_ABILITY_NOT_MET",
        message=f"Requires {label} {prereq.minimum}. Current: {score}",
        severity=ValidationSeverity.ERROR,
        field=ability_field(prereq.ability),
        suggestion=f"Increase {label} to at least {prereq.minimum}",
    )


@check_prerequisite.register
def _(prereq: ProficiencyPrerequisite, character: CharacterForValidation) -> ValidationIssue | None:
    if prereq.proficiency in character.proficiencies:
        return None
    label = prereq.proficiency.replace("-", " ")
    return ValidationIssue(
        code="FEAT_PROFICIENCY_NOT_MET",
        message=f"Requires proficiency with {label}",
        severity=ValidationSeverity.ERROR,
        field="proficiencies",
        suggestion=f"Gain {label} proficiency first",
    )


@check_prerequisite.register
def _(prereq: SpellcastingPrerequisite, character: CharacterForValidation) -> ValidationIssue | None:
    if character.has_spellcasting:
        return None
    return ValidationIssue(
        code="FEAT_SPELLCASTING_NOT_MET",
        message="Requires the ability to cast at least one spell",
        severity=ValidationSeverity.ERROR,
        field="class",
        suggestion="Choose a spellcasting class or take the Magic Initiate feat first",
    )


@check_prerequisite.register
def _(prereq: LevelPrerequisite, character: CharacterForValidation) -> ValidationIssue | None:
    if character.level >= prereq.level:
        return None
    return ValidationIssue(
        code="FEAT_LEVEL_NOT_MET",
        message=f"Requires character level {prereq.level}. Current: {character.level}",
        severity=ValidationSeverity.ERROR,
        field="level",
    )


@check_prerequisite.register
def _(prereq: RacePrerequisite, character: CharacterForValidation) -> ValidationIssue | None:
    if character.race.strip().lower() == prereq.race.strip().lower():
        return None
    return ValidationIssue(
        code="FEAT_RACE_NOT_MET",
        message=f"Requires {prereq.race} race",
        severity=ValidationSeverity.ERROR,
        field="race",
    )


@check_prerequisite.register
def _(prereq: ClassPrerequisite, character: CharacterForValidation) -> ValidationIssue | None:
    if character.has_class(prereq.class_name):
        return None
    return ValidationIssue(
        code="FEAT_CLASS_NOT_MET",
        message=f"Requires {prereq.class_name} class",
        severity=ValidationSeverity.ERROR,
        field="class",
    )


# =============================================================================
# Feat Validation
# =============================================================================

def _holds_feat(character: CharacterForValidation, feat_name: str) -> bool:
    target = feat_name.strip().lower()
    return any(held.strip().lower() == target for held in character.feats)


def validate_feat_prerequisites(
    feat_name: str,
    character: CharacterForValidation,
    *,
    acquiring: bool = True,
) -> ValidationResult:
    """Validate whether a character can take (or keep) a feat.

    Args:
        feat_name: Feat to check.
        character: The character.
        acquiring: True when the character is about to take the feat, in
            which case already holding it is an error (no SRD feat is
            repeatable). False re-checks a feat the character already has.

    Returns:
        ValidationResult. Unknown feats yield a warning only.
    """
    feat = get_feat(feat_name)

    if feat is None:
        return ValidationResult.from_issues(warnings=[ValidationIssue(
            code="FEAT_UNKNOWN",
            message=f'Unknown feat "{feat_name}"',
            severity=ValidationSeverity.WARNING,
            field="feats",
        )])

    errors: list[ValidationIssue] = []

    if acquiring and _holds_feat(character, feat_name):
        errors.append(ValidationIssue(
            code="FEAT_ALREADY_TAKEN",
            message=f"You already have the {feat.name} feat",
            severity=ValidationSeverity.ERROR,
            field="feats",
        ))

    for prereq in feat.prerequisites:
        issue = check_prerequisite(prereq, character)
        if issue is not None:
            errors.append(issue.with_message(f"{feat.name}: {issue.message}"))

    return ValidationResult.from_issues(errors)


def get_available_feats(character: CharacterForValidation) -> list[Feat]:
    """Feats whose prerequisites the character meets and doesn't hold yet."""
    return [
        feat for feat in SRD_FEATS
        if validate_feat_prerequisites(feat.name, character).is_valid
    ]


def get_nearly_available_feats(character: CharacterForValidation) -> list[NearlyAvailableFeat]:
    """Feats with exactly one unmet requirement, for "almost there" hints.

    Feats the character already holds are left out.
    """
    nearly_available: list[NearlyAvailableFeat] = []

    for feat in SRD_FEATS:
        if _holds_feat(character, feat.name):
            continue
        result = validate_feat_prerequisites(feat.name, character)
        if len(result.errors) == 1:
            nearly_available.append(NearlyAvailableFeat(feat=feat, missing=result.errors))

    return nearly_available
