"""Standard array validation: the six base scores must be exactly 15, 14, 13, 12, 10, 8."""

from __future__ import annotations

from ..models import ALL_ABILITIES, ScoreSource, score_of
from ..results import ValidationIssue, ValidationResult, ValidationSeverity
from ..tables.abilities import STANDARD_ARRAY


def validate_standard_array_scores(scores: ScoreSource) -> ValidationResult:
    """Check that the scores are a permutation of the standard array."""
    assigned = [score_of(scores, ability) for ability in ALL_ABILITIES]

    if sorted(assigned, reverse=True) == sorted(STANDARD_ARRAY, reverse=True):
        return ValidationResult()

    expected = ", ".join(str(v) for v in STANDARD_ARRAY)
    return ValidationResult.from_issues([ValidationIssue(
        code="STANDARD_ARRAY_MISMATCH",
        message=(
            f"Standard array scores must be exactly {expected} "
            f"(got {', '.join(str(v) for v in assigned)})"
        ),
        severity=ValidationSeverity.ERROR,
        field="ability_scores",
        suggestion="Assign each standard array value to exactly one ability",
    )])
