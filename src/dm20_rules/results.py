"""
Validation result types shared by every rule validator.

A validator never raises for a rules problem. It returns a ValidationResult
holding the issues it found, organized by severity. A result is valid if it
has no ERROR-level issues; warnings and informational notes never block.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


# =============================================================================
# Validation Models
# =============================================================================

class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""
    ERROR = "error"      # Configuration is not rules-legal
    WARNING = "warning"  # Legal, but worth flagging
    INFO = "info"        # Informational note


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation issue found by a rule validator."""
    code: str           # e.g., "MULTICLASS_PREREQ_NOT_MET"
    message: str        # Human-readable message
    severity: ValidationSeverity
    field: str | None = None       # e.g., "ability_scores.str"
    suggestion: str | None = None

    def with_message(self, message: str) -> ValidationIssue:
        """Return a copy of this issue carrying a different message."""
        return ValidationIssue(
            code=self.code,
            message=message,
            severity=self.severity,
            field=self.field,
            suggestion=self.suggestion,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "severity": self.severity.value,
            "field": self.field,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of one or more rule checks.

    ``errors`` holds ERROR-level issues. ``warnings`` holds everything that
    does not block, both WARNING and INFO severities. Validity is derived
    from ``errors`` so it can never disagree with them.
    """
    errors: tuple[ValidationIssue, ...] = ()
    warnings: tuple[ValidationIssue, ...] = ()

    @classmethod
    def from_issues(
        cls,
        errors: list[ValidationIssue] | tuple[ValidationIssue, ...] = (),
        warnings: list[ValidationIssue] | tuple[ValidationIssue, ...] = (),
    ) -> ValidationResult:
        return cls(errors=tuple(errors), warnings=tuple(warnings))

    @property
    def is_valid(self) -> bool:
        """True if no ERROR-level issues were found."""
        return len(self.errors) == 0

    @property
    def issues(self) -> tuple[ValidationIssue, ...]:
        """All issues, errors first."""
        return self.errors + self.warnings

    @property
    def info(self) -> tuple[ValidationIssue, ...]:
        """Return all INFO-level issues."""
        return tuple(i for i in self.warnings if i.severity == ValidationSeverity.INFO)

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
        }

    def __str__(self) -> str:
        """Return a formatted summary of the result."""
        lines = [f"Status: {'✓ VALID' if self.is_valid else '✗ INVALID'}"]
        notes = [w for w in self.warnings if w.severity == ValidationSeverity.WARNING]
        lines.append(
            f"Issues: {len(self.errors)} errors, {len(notes)} warnings, {len(self.info)} info"
        )

        for title, group in (("Errors", self.errors), ("Warnings", tuple(notes)), ("Info", self.info)):
            if not group:
                continue
            lines.append(f"\n{title}:")
            for issue in group:
                lines.append(f"  - [{issue.code}] {issue.field or 'general'}: {issue.message}")
                if issue.suggestion:
                    lines.append(f"    Suggestion: {issue.suggestion}")

        return "\n".join(lines)


__all__ = [
    "ValidationSeverity",
    "ValidationIssue",
    "ValidationResult",
]
