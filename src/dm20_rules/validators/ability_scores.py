"""
Ability score validation.

Checks every score against the hard bounds (1-30) and flags scores above
the normal maximum of 20, which are only reachable with magic items or
special features. Independent of how the scores were generated.
"""

from __future__ import annotations

from typing import Any, Sequence

from ..config import DEFAULT_CONFIG, RulesConfig
from ..models import ALL_ABILITIES, Ability, ScoreSource, score_of
from ..results import ValidationIssue, ValidationResult, ValidationSeverity
from ..tables.abilities import ABILITY_SCORE_MIN, is_whole_number
from ..tables.multiclass import AbilityRequirement
from .common import ability_field


def validate_ability_score(
    ability: Ability | str,
    value: Any,
    config: RulesConfig | None = None,
) -> ValidationResult:
    """Validate a single ability score.

    Checks, in order: whole number, lower bound, absolute upper bound
    (error), normal upper bound (warning).
    """
    config = config or DEFAULT_CONFIG
    ability = Ability(ability)
    label = ability.label
    normal_max = config.ability_score_normal_max
    absolute_max = config.ability_score_absolute_max
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    if not is_whole_number(value):
        errors.append(ValidationIssue(
            code="ABILITY_SCORE_NOT_INTEGER",
            message=f"{label} must be a whole number",
            severity=ValidationSeverity.ERROR,
            field=ability_field(ability),
        ))
        # Bounds can still be checked for 12.5, not for "12" or None
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            return ValidationResult.from_issues(errors)

    if value < ABILITY_SCORE_MIN:
        errors.append(ValidationIssue(
            code="ABILITY_SCORE_TOO_LOW",
            message=f"{label} cannot be less than {ABILITY_SCORE_MIN}",
            severity=ValidationSeverity.ERROR,
            field=ability_field(ability),
            suggestion=f"Set {label} to at least {ABILITY_SCORE_MIN}",
        ))

    if value > absolute_max:
        errors.append(ValidationIssue(
            code="ABILITY_SCORE_TOO_HIGH",
            message=f"{label} cannot exceed {absolute_max}",
            severity=ValidationSeverity.ERROR,
            field=ability_field(ability),
            suggestion=f"The maximum ability score in D&D 5e is {absolute_max}",
        ))
    elif value > normal_max:
        warnings.append(ValidationIssue(
            code="ABILITY_SCORE_ABOVE_NORMAL_MAX",
            message=(
                f"{label} of {value} exceeds the normal maximum of {normal_max}. "
                "This is only possible with magic items or special features."
            ),
            severity=ValidationSeverity.WARNING,
            field=ability_field(ability),
        ))

    return ValidationResult.from_issues(errors, warnings)


def validate_all_ability_scores(
    scores: ScoreSource,
    config: RulesConfig | None = None,
) -> ValidationResult:
    """Validate all six ability scores."""
    config = config or DEFAULT_CONFIG
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    for ability in ALL_ABILITIES:
        result = validate_ability_score(ability, score_of(scores, ability), config)
        errors.extend(result.errors)
        warnings.extend(result.warnings)

    return ValidationResult.from_issues(errors, warnings)


def meets_ability_minimum(scores: ScoreSource, ability: Ability | str, minimum: int) -> bool:
    """True if the score is at or above the minimum."""
    return score_of(scores, ability) >= minimum


def validate_ability_scores_for_multiclass(
    scores: ScoreSource,
    target_class: str,
    prerequisites: Sequence[AbilityRequirement],
) -> ValidationResult:
    """Score-by-score multiclass readiness, with the shortfall for each unmet minimum.

    Scores sitting exactly on a minimum pass, with an informational note.
    """
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    for prereq in prerequisites:
        label = prereq.ability.label
        current = score_of(scores, prereq.ability)

        if current < prereq.minimum:
            difference = prereq.minimum - current
            errors.append(ValidationIssue(
                code="MULTICLASS_ABILITY_NOT_MET",
                message=(
                    f"{label} {prereq.minimum} required for {target_class}. "
                    f"Current: {current} (need {difference} more)"
                ),
                severity=ValidationSeverity.ERROR,
                field=ability_field(prereq.ability),
                suggestion=f"Increase {label} by {difference} to meet the requirement",
            ))
        elif current == prereq.minimum:
            warnings.append(ValidationIssue(
                code="MULTICLASS_ABILITY_AT_MINIMUM",
                message=f"{label} is exactly at the minimum ({prereq.minimum}) for {target_class}",
                severity=ValidationSeverity.INFO,
                field=ability_field(prereq.ability),
            ))

    return ValidationResult.from_issues(errors, warnings)
