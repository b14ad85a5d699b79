"""
Point buy validation.

Scores must each lie in 8-15 before any cost is computed. The total is then
compared against the budget: overspending is an error, underspending is only
an informational note since leaving points unspent is legal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..config import DEFAULT_CONFIG, RulesConfig
from ..models import ALL_ABILITIES, Ability, ScoreSource, score_of
from ..results import ValidationIssue, ValidationResult, ValidationSeverity
from ..tables.abilities import (
    INVALID_POINT_COST,
    POINT_BUY_MAX,
    POINT_BUY_MIN,
    get_point_cost,
    is_whole_number,
)
from .common import ability_field, plural


@dataclass(frozen=True)
class ScoreAdjustment:
    """Whether a point-buy score may move one step, and why not if it can't."""
    allowed: bool
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.allowed


@dataclass(frozen=True)
class PointBuySummary:
    total_spent: int
    remaining: int
    breakdown: dict[str, int]
    is_valid: bool


def calculate_total_points_spent(scores: ScoreSource) -> int:
    """Total point-buy cost, or INVALID_POINT_COST if any score is out of range."""
    total = 0
    for ability in ALL_ABILITIES:
        cost = get_point_cost(score_of(scores, ability))
        if cost == INVALID_POINT_COST:
            return INVALID_POINT_COST
        total += cost
    return total


def validate_point_buy_score(ability: Ability | str, score: Any) -> ValidationResult:
    """Validate a single score for the point buy method."""
    ability = Ability(ability)
    label = ability.label
    field = ability_field(ability)
    errors: list[ValidationIssue] = []

    if not is_whole_number(score):
        errors.append(ValidationIssue(
            code="POINT_BUY_NOT_INTEGER",
            message=f"{label} must be a whole number",
            severity=ValidationSeverity.ERROR,
            field=field,
        ))
        return ValidationResult.from_issues(errors)

    if score < POINT_BUY_MIN:
        errors.append(ValidationIssue(
            code="POINT_BUY_SCORE_TOO_LOW",
            message=f"{label} cannot be lower than {POINT_BUY_MIN} in point buy",
            severity=ValidationSeverity.ERROR,
            field=field,
            suggestion=f"Minimum ability score in point buy is {POINT_BUY_MIN}",
        ))

    if score > POINT_BUY_MAX:
        errors.append(ValidationIssue(
            code="POINT_BUY_SCORE_TOO_HIGH",
            message=f"{label} cannot exceed {POINT_BUY_MAX} in point buy",
            severity=ValidationSeverity.ERROR,
            field=field,
            suggestion=f"Maximum ability score in point buy is {POINT_BUY_MAX} (before racial bonuses)",
        ))

    return ValidationResult.from_issues(errors)


def validate_point_buy_scores(
    scores: ScoreSource,
    config: RulesConfig | None = None,
) -> ValidationResult:
    """Validate all six scores for the point buy method, then the budget."""
    config = config or DEFAULT_CONFIG
    budget = config.point_buy_budget
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    for ability in ALL_ABILITIES:
        result = validate_point_buy_score(ability, score_of(scores, ability))
        errors.extend(result.errors)
        warnings.extend(result.warnings)

    # Budget only makes sense once every score has a cost
    if not errors:
        total_spent = calculate_total_points_spent(scores)

        if total_spent > budget:
            excess = total_spent - budget
            errors.append(ValidationIssue(
                code="POINT_BUY_EXCEEDED",
                message=(
                    f"You've spent {total_spent} points, but only {budget} are available. "
                    f"You're {plural(excess, 'point')} over."
                ),
                severity=ValidationSeverity.ERROR,
                field="ability_scores",
                suggestion=f"Reduce some ability scores to free up {plural(excess, 'point')}",
            ))
        elif total_spent < budget:
            remaining = budget - total_spent
            warnings.append(ValidationIssue(
                code="POINT_BUY_POINTS_REMAINING",
                message=f"You have {plural(remaining, 'point')} left to spend",
                severity=ValidationSeverity.INFO,
                field="ability_scores",
            ))

    return ValidationResult.from_issues(errors, warnings)


def can_increase_score(
    current_score: int,
    current_total_spent: int,
    config: RulesConfig | None = None,
) -> ScoreAdjustment:
    """Check whether a score can go up one step within the remaining budget."""
    config = config or DEFAULT_CONFIG
    if current_score >= POINT_BUY_MAX:
        return ScoreAdjustment(False, f"Maximum score of {POINT_BUY_MAX} reached")

    current_cost = get_point_cost(current_score)
    next_cost = get_point_cost(current_score + 1)
    if current_cost == INVALID_POINT_COST or next_cost == INVALID_POINT_COST:
        return ScoreAdjustment(False, "Invalid score")

    points_needed = next_cost - current_cost
    points_available = config.point_buy_budget - current_total_spent

    if points_needed > points_available:
        return ScoreAdjustment(
            False,
            f"Need {plural(points_needed, 'point')}, but only {points_available} available",
        )

    return ScoreAdjustment(True)


def can_decrease_score(current_score: int) -> ScoreAdjustment:
    if current_score <= POINT_BUY_MIN:
        return ScoreAdjustment(False, f"Minimum score of {POINT_BUY_MIN} reached")
    return ScoreAdjustment(True)


def get_points_freed_by_decrease(current_score: int) -> int:
    """Points returned to the pool by lowering a score one step (0 at the floor)."""
    if current_score <= POINT_BUY_MIN:
        return 0

    current_cost = get_point_cost(current_score)
    lower_cost = get_point_cost(current_score - 1)
    if current_cost == INVALID_POINT_COST or lower_cost == INVALID_POINT_COST:
        return 0

    return current_cost - lower_cost


def get_point_buy_summary(
    scores: ScoreSource,
    config: RulesConfig | None = None,
) -> PointBuySummary:
    """Per-ability costs and the running total. Invalid scores count as 0."""
    config = config or DEFAULT_CONFIG
    breakdown: dict[str, int] = {}
    total_spent = 0
    is_valid = True

    for ability in ALL_ABILITIES:
        cost = get_point_cost(score_of(scores, ability))
        if cost == INVALID_POINT_COST:
            is_valid = False
            breakdown[ability.value] = 0
        else:
            breakdown[ability.value] = cost
            total_spent += cost

    if total_spent > config.point_buy_budget:
        is_valid = False

    return PointBuySummary(
        total_spent=total_spent,
        remaining=config.point_buy_budget - total_spent,
        breakdown=breakdown,
        is_valid=is_valid,
    )
