"""
Tests for validation results and the aggregation helpers.
"""

import pytest

from dm20_rules.feedback import (
    create_empty_validation_result,
    create_error_result,
    create_warning_result,
    filter_by_severity,
    format_validation_issue,
    get_field_issues,
    get_highest_severity,
    get_validation_status,
    get_validation_summary,
    group_errors_by_field,
    has_field_error,
    has_field_warning,
    merge_validation_results,
)
from dm20_rules.results import ValidationIssue, ValidationResult, ValidationSeverity


def issue(code: str, severity: ValidationSeverity, field: str | None = None, suggestion: str | None = None):
    return ValidationIssue(
        code=code,
        message=f"{code} message",
        severity=severity,
        field=field,
        suggestion=suggestion,
    )


ERR_STR = issue("E_STR", ValidationSeverity.ERROR, "ability_scores.str")
ERR_GENERAL = issue("E_GEN", ValidationSeverity.ERROR)
WARN_EQUIP = issue("W_EQUIP", ValidationSeverity.WARNING, "equipment", "Penalty: none")
INFO_STR = issue("I_STR", ValidationSeverity.INFO, "ability_scores.str")


class TestValidationResult:
    """Test the result value type."""

    def test_empty_result_is_valid(self):
        result = ValidationResult()
        assert result.is_valid is True
        assert result.errors == ()
        assert result.warnings == ()

    def test_validity_follows_errors(self):
        """is_valid is derived from the error list."""
        assert ValidationResult.from_issues([ERR_STR]).is_valid is False
        assert ValidationResult.from_issues(warnings=[WARN_EQUIP, INFO_STR]).is_valid is True

    def test_info_property(self):
        result = ValidationResult.from_issues(warnings=[WARN_EQUIP, INFO_STR])
        assert result.info == (INFO_STR,)

    def test_structural_equality(self):
        assert ValidationResult.from_issues([ERR_STR]) == ValidationResult.from_issues((ERR_STR,))

    def test_to_dict_fully_populated(self):
        """Every issue carries all five keys, even when empty."""
        data = ValidationResult.from_issues([ERR_GENERAL], [WARN_EQUIP]).to_dict()
        assert data["is_valid"] is False
        assert data["errors"][0] == {
            "code": "E_GEN",
            "message": "E_GEN message",
            "severity": "error",
            "field": None,
            "suggestion": None,
        }
        assert data["warnings"][0]["severity"] == "warning"

    def test_with_message_keeps_other_fields(self):
        renamed = ERR_STR.with_message("Prefixed: E_STR message")
        assert renamed.message == "Prefixed: E_STR message"
        assert renamed.code == ERR_STR.code
        assert renamed.field == ERR_STR.field

    def test_str_report(self):
        report = str(ValidationResult.from_issues([ERR_STR], [WARN_EQUIP]))
        assert "✗ INVALID" in report
        assert "[E_STR] ability_scores.str" in report
        assert "Suggestion: Penalty: none" in report


class TestMerge:
    """Test merging many results."""

    def test_merge_concatenates_in_order(self):
        a = ValidationResult.from_issues([ERR_STR])
        b = ValidationResult.from_issues([ERR_GENERAL], [WARN_EQUIP])
        merged = merge_validation_results(a, b)
        assert merged.errors == (ERR_STR, ERR_GENERAL)
        assert merged.warnings == (WARN_EQUIP,)
        assert merged.is_valid is False

    def test_merge_nothing_is_valid(self):
        assert merge_validation_results() == ValidationResult()

    def test_merge_is_associative(self):
        a = ValidationResult.from_issues([ERR_STR])
        b = ValidationResult.from_issues(warnings=[WARN_EQUIP])
        c = ValidationResult.from_issues([ERR_GENERAL], [INFO_STR])
        left = merge_validation_results(merge_validation_results(a, b), c)
        right = merge_validation_results(a, merge_validation_results(b, c))
        assert left == right

    def test_empty_is_identity(self):
        a = ValidationResult.from_issues([ERR_STR], [INFO_STR])
        assert merge_validation_results(a, create_empty_validation_result()) == a
        assert merge_validation_results(create_empty_validation_result(), a) == a


class TestGroupingAndFiltering:
    """Test field and severity queries."""

    def test_group_by_field_uses_general_bucket(self):
        result = ValidationResult.from_issues([ERR_STR, ERR_GENERAL], [INFO_STR])
        grouped = group_errors_by_field(result)
        assert grouped["ability_scores.str"] == [ERR_STR, INFO_STR]
        assert grouped["general"] == [ERR_GENERAL]

    def test_filter_by_severity(self):
        result = ValidationResult.from_issues([ERR_STR], [WARN_EQUIP, INFO_STR])
        assert filter_by_severity(result, ValidationSeverity.INFO) == [INFO_STR]
        assert filter_by_severity(result, "warning") == [WARN_EQUIP]

    def test_field_queries(self):
        result = ValidationResult.from_issues([ERR_STR], [WARN_EQUIP])
        assert has_field_error(result, "ability_scores.str") is True
        assert has_field_error(result, "equipment") is False
        assert has_field_warning(result, "equipment") is True
        assert get_field_issues(result, "equipment") == [WARN_EQUIP]


class TestSummary:
    """Test summaries and status indicators."""

    @pytest.mark.parametrize("errors,warnings,expected", [
        ([], [], "Valid"),
        ([ERR_STR], [], "1 error"),
        ([ERR_STR, ERR_GENERAL], [WARN_EQUIP], "2 errors, 1 warning"),
        ([], [WARN_EQUIP, WARN_EQUIP], "2 warnings"),
        ([], [INFO_STR], "1 note"),
        ([], [WARN_EQUIP, INFO_STR], "1 warning"),
    ])
    def test_summary_text(self, errors, warnings, expected):
        summary = get_validation_summary(ValidationResult.from_issues(errors, warnings))
        assert summary.summary_text == expected

    def test_summary_counts(self):
        summary = get_validation_summary(ValidationResult.from_issues([ERR_STR], [WARN_EQUIP, INFO_STR]))
        assert (summary.error_count, summary.warning_count, summary.info_count) == (1, 1, 1)
        assert summary.is_valid is False

    def test_status_error_first(self):
        status = get_validation_status(ValidationResult.from_issues([ERR_STR, ERR_GENERAL], [WARN_EQUIP]))
        assert status.status == "error"
        assert status.message == "E_STR message"
        assert status.count == 2

    def test_status_warning(self):
        status = get_validation_status(ValidationResult.from_issues(warnings=[INFO_STR, WARN_EQUIP]))
        assert status.status == "warning"
        assert status.message == "W_EQUIP message"
        assert status.count == 1

    def test_info_only_is_valid(self):
        status = get_validation_status(ValidationResult.from_issues(warnings=[INFO_STR]))
        assert status.status == "valid"
        assert status.message == "All validations passed"
        assert status.count == 0

    def test_highest_severity(self):
        assert get_highest_severity([]) is None
        assert get_highest_severity([INFO_STR]) == ValidationSeverity.INFO
        assert get_highest_severity([INFO_STR, WARN_EQUIP]) == ValidationSeverity.WARNING
        assert get_highest_severity([WARN_EQUIP, ERR_STR]) == ValidationSeverity.ERROR

    def test_format_issue(self):
        assert format_validation_issue(WARN_EQUIP) == "W_EQUIP message (Penalty: none)"
        assert format_validation_issue(ERR_STR) == "E_STR message"


class TestConstructors:
    """Test single-issue result constructors."""

    def test_error_result(self):
        result = create_error_result("CODE", "Broken", field="level", suggestion="Fix it")
        assert result.is_valid is False
        assert result.errors[0].severity == ValidationSeverity.ERROR
        assert result.errors[0].field == "level"

    def test_warning_result(self):
        result = create_warning_result("CODE", "Careful")
        assert result.is_valid is True
        assert result.warnings[0].severity == ValidationSeverity.WARNING
        assert result.warnings[0].field is None
