"""
Multiclass prerequisite validation (SRD 5.1).

To multiclass a character must meet the prerequisites of every class it
already has AND of the class it is entering. Whether the target class is new
at all (as opposed to leveling an existing class) is decided by the engine,
not here.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..models import ScoreSource, score_of
from ..results import ValidationIssue, ValidationResult, ValidationSeverity
from ..tables.multiclass import RequirementType, get_multiclass_prerequisite
from .common import ability_field

logger = logging.getLogger("dm20-rules")


def check_multiclass_prerequisites(class_name: str, scores: ScoreSource) -> ValidationResult:
    """Check whether ability scores meet a class's multiclass prerequisites.

    ALL classes get one error per unmet ability. ANY classes get a single
    error only when none of the alternatives is met. Unknown classes produce
    a warning since they may be homebrew.
    """
    prerequisite = get_multiclass_prerequisite(class_name)

    if prerequisite is None:
        return ValidationResult.from_issues(warnings=[ValidationIssue(
            code="MULTICLASS_UNKNOWN_CLASS",
            message=f'Unknown class "{class_name}" - cannot validate multiclass prerequisites',
            severity=ValidationSeverity.WARNING,
            field="class",
        )])

    errors: list[ValidationIssue] = []

    if prerequisite.requirement_type == RequirementType.ALL:
        for req in prerequisite.requirements:
            score = score_of(scores, req.ability)
            if score < req.minimum:
                label = req.ability.label
                errors.append(ValidationIssue(
                    code="MULTICLASS_PREREQ_NOT_MET",
                    message=(
                        f"Multiclassing into {class_name} requires {label} {req.minimum} "
                        f"or higher. Your {label} is {score}."
                    ),
                    severity=ValidationSeverity.ERROR,
                    field=ability_field(req.ability),
                    suggestion=f"Increase {label} to at least {req.minimum}",
                ))
    else:
        meets_any = any(
            score_of(scores, req.ability) >= req.minimum for req in prerequisite.requirements
        )
        if not meets_any:
            alternatives = " or ".join(str(req) for req in prerequisite.requirements)
            errors.append(ValidationIssue(
                code="MULTICLASS_PREREQ_NOT_MET",
                message=(
                    f"Multiclassing into {class_name} requires one of: {alternatives}. "
                    "None of these are met."
                ),
                severity=ValidationSeverity.ERROR,
                field="ability_scores",
                suggestion=f"Increase one of {alternatives} to meet the requirement",
            ))

    return ValidationResult.from_issues(errors)


def can_multiclass(
    current_classes: Iterable[str],
    target_class: str,
    scores: ScoreSource,
) -> ValidationResult:
    """Check leaving every current class and entering the target class."""
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    for current_class in current_classes:
        result = check_multiclass_prerequisites(current_class, scores)
        for error in result.errors:
            errors.append(error.with_message(f"To multiclass out of {current_class}: {error.message}"))
        warnings.extend(result.warnings)

    target_result = check_multiclass_prerequisites(target_class, scores)
    errors.extend(target_result.errors)
    warnings.extend(target_result.warnings)

    if errors:
        logger.debug(f"Multiclass into {target_class} blocked by {len(errors)} unmet prerequisite(s)")

    return ValidationResult.from_issues(errors, warnings)
