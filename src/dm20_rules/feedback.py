"""
Aggregation and reporting helpers for validation results.

Validators each return their own ValidationResult. These helpers merge them
into one result, group issues by field, and reduce a result to the short
summary/status a character sheet displays next to a field or section.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .results import ValidationIssue, ValidationResult, ValidationSeverity
from .validators.common import plural


@dataclass(frozen=True)
class ValidationSummary:
    """Issue counts plus a one-line description such as '2 errors, 1 warning'."""
    error_count: int
    warning_count: int
    info_count: int
    summary_text: str
    is_valid: bool


@dataclass(frozen=True)
class ValidationStatus:
    """Single status indicator: the most severe level present and its first message."""
    status: Literal["valid", "warning", "error"]
    message: str
    count: int


# =============================================================================
# Merging and Grouping
# =============================================================================

def merge_validation_results(*results: ValidationResult) -> ValidationResult:
    """Concatenate errors and warnings in argument order.

    Merging is associative and the empty result is its identity, so callers
    may merge incrementally or all at once.
    """
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    for result in results:
        errors.extend(result.errors)
        warnings.extend(result.warnings)

    return ValidationResult.from_issues(errors, warnings)


def group_errors_by_field(result: ValidationResult) -> dict[str, list[ValidationIssue]]:
    """Bucket every issue by its field. Issues without one go under 'general'."""
    grouped: dict[str, list[ValidationIssue]] = {}
    for issue in result.issues:
        grouped.setdefault(issue.field or "general", []).append(issue)
    return grouped


def filter_by_severity(
    result: ValidationResult,
    severity: ValidationSeverity | str,
) -> list[ValidationIssue]:
    severity = ValidationSeverity(severity)
    return [issue for issue in result.issues if issue.severity == severity]


def get_field_issues(result: ValidationResult, field_name: str) -> list[ValidationIssue]:
    """All issues (any severity) reported against one field."""
    return [issue for issue in result.issues if issue.field == field_name]


def has_field_error(result: ValidationResult, field_name: str) -> bool:
    return any(error.field == field_name for error in result.errors)


def has_field_warning(result: ValidationResult, field_name: str) -> bool:
    return any(warning.field == field_name for warning in result.warnings)


# =============================================================================
# Reporting
# =============================================================================

def get_highest_severity(issues: list[ValidationIssue] | tuple[ValidationIssue, ...]) -> ValidationSeverity | None:
    """Most severe level among the issues, or None if there are none."""
    if not issues:
        return None
    for severity in (ValidationSeverity.ERROR, ValidationSeverity.WARNING):
        if any(issue.severity == severity for issue in issues):
            return severity
    return ValidationSeverity.INFO


def format_validation_issue(issue: ValidationIssue) -> str:
    """Message with the suggestion appended in parentheses, if there is one."""
    if issue.suggestion:
        return f"{issue.message} ({issue.suggestion})"
    return issue.message


def get_validation_summary(result: ValidationResult) -> ValidationSummary:
    """Count issues by severity and build the summary line.

    Errors and warnings are listed when present. Notes are only mentioned
    when there is nothing more serious to report.
    """
    error_count = len(result.errors)
    warning_count = sum(1 for w in result.warnings if w.severity == ValidationSeverity.WARNING)
    info_count = sum(1 for w in result.warnings if w.severity == ValidationSeverity.INFO)

    parts: list[str] = []
    if error_count > 0:
        parts.append(plural(error_count, "error"))
    if warning_count > 0:
        parts.append(plural(warning_count, "warning"))

    if parts:
        summary_text = ", ".join(parts)
    elif info_count > 0:
        summary_text = plural(info_count, "note")
    else:
        summary_text = "Valid"

    return ValidationSummary(
        error_count=error_count,
        warning_count=warning_count,
        info_count=info_count,
        summary_text=summary_text,
        is_valid=result.is_valid,
    )


def get_validation_status(result: ValidationResult) -> ValidationStatus:
    """Reduce a result to error > warning > valid. Info-only results are valid."""
    if not result.is_valid:
        return ValidationStatus(
            status="error",
            message=result.errors[0].message,
            count=len(result.errors),
        )

    warnings_only = [w for w in result.warnings if w.severity == ValidationSeverity.WARNING]
    if warnings_only:
        return ValidationStatus(
            status="warning",
            message=warnings_only[0].message,
            count=len(warnings_only),
        )

    return ValidationStatus(status="valid", message="All validations passed", count=0)


# =============================================================================
# Constructors
# =============================================================================

def create_empty_validation_result() -> ValidationResult:
    return ValidationResult()


def create_error_result(
    code: str,
    message: str,
    field: str | None = None,
    suggestion: str | None = None,
) -> ValidationResult:
    """A result holding exactly one error."""
    return ValidationResult.from_issues(errors=[ValidationIssue(
        code=code,
        message=message,
        severity=ValidationSeverity.ERROR,
        field=field,
        suggestion=suggestion,
    )])


def create_warning_result(
    code: str,
    message: str,
    field: str | None = None,
    suggestion: str | None = None,
) -> ValidationResult:
    """A valid result holding exactly one warning."""
    return ValidationResult.from_issues(warnings=[ValidationIssue(
        code=code,
        message=message,
        severity=ValidationSeverity.WARNING,
        field=field,
        suggestion=suggestion,
    )])


__all__ = [
    "ValidationSummary",
    "ValidationStatus",
    "merge_validation_results",
    "group_errors_by_field",
    "filter_by_severity",
    "get_field_issues",
    "has_field_error",
    "has_field_warning",
    "get_highest_severity",
    "format_validation_issue",
    "get_validation_summary",
    "get_validation_status",
    "create_empty_validation_result",
    "create_error_result",
    "create_warning_result",
]
