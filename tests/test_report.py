"""
Tests for ValidationReport aggregation and text formatting.
"""

import json

import pytest

from token_guard.contracts import Category, Severity
from token_guard.validators import (
    FileFailure,
    FileScanResult,
    ReportFormatter,
    ReportMode,
    TokenViolation,
    ValidationReport,
    ValidationReportGenerator,
)


def make_violation(file="src/A.tsx", line=1, column=1, class_name="h-8", candidates=None, **kwargs):
    candidates = ["h-size-sm"] if candidates is None else candidates
    defaults = dict(
        category=Category.SIZING,
        severity=Severity.WARNING,
        suggestion=candidates[0] if candidates else None,
        candidates=candidates,
        context='<div className="h-8" />',
        rule="no-non-semantic-sizing",
        fixable=bool(candidates),
    )
    defaults.update(kwargs)
    return TokenViolation(file=file, line=line, column=column, class_name=class_name, **defaults)


class TestValidationReportGenerator:
    """Aggregation of per-file results."""

    def test_orders_files_and_positions(self):
        results = [
            FileScanResult(file="src/B.tsx", violations=[make_violation("src/B.tsx", 1, 5)]),
            FileScanResult(
                file="src/A.tsx",
                violations=[make_violation("src/A.tsx", 3, 1), make_violation("src/A.tsx", 1, 9)],
            ),
        ]
        report = ValidationReportGenerator().generate(results)

        assert [v.location for v in report.violations] == [
            "src/A.tsx:1:9",
            "src/A.tsx:3:1",
            "src/B.tsx:1:5",
        ]

    def test_failures_excluded_from_total(self):
        results = [
            FileScanResult(file="src/A.tsx"),
            FileScanResult(file="src/B.tsx", failure=FileFailure("src/B.tsx", "bad bytes")),
        ]
        report = ValidationReportGenerator().generate(results, skipped_files=2)

        assert report.total_files == 1
        assert report.skipped_files == 2
        assert report.failures[0].to_dict() == {"file": "src/B.tsx", "reason": "bad bytes"}

    def test_top_suggestion_limit(self):
        violations = [
            make_violation(class_name=f"h-{n}", candidates=[f"h-x{n}"], column=n) for n in range(5)
        ]
        report = ValidationReportGenerator(top_suggestions=2).generate(
            [FileScanResult(file="src/A.tsx", violations=violations)]
        )

        assert [s.key for s in report.top_suggestions] == ["h-0 → h-x0", "h-1 → h-x1"]

    def test_hint_only_violations_not_ranked(self):
        violation = make_violation(class_name="h-9", candidates=[], hint="nearest: ...")
        report = ValidationReportGenerator().generate(
            [FileScanResult(file="src/A.tsx", violations=[violation])]
        )

        assert report.top_suggestions == []

    def test_fixes_summed(self):
        results = [
            FileScanResult(file="src/A.tsx", fixes_applied=2),
            FileScanResult(file="src/B.tsx", fixes_applied=1),
        ]

        assert ValidationReportGenerator().generate(results, fix_mode=True).fixes_applied == 3


class TestValidationReport:
    """Derived views and exit codes."""

    @pytest.mark.parametrize(
        "violations,failures,expected",
        [
            ([], [], 0),
            ([make_violation()], [], 1),
            ([make_violation()], [FileFailure("x", "y")], 1),
            ([], [FileFailure("x", "y")], 2),
        ],
    )
    def test_exit_code(self, violations, failures, expected):
        report = ValidationReport(total_files=1, violations=violations, failures=failures)

        assert report.exit_code == expected

    def test_lookups(self):
        color = make_violation(
            "src/B.tsx", class_name="bg-neutral-100", category=Category.COLOR, severity=Severity.ERROR
        )
        report = ValidationReport(total_files=2, violations=[make_violation(), color])

        assert report.get_violations_by_category(Category.COLOR) == [color]
        assert report.get_violations_for_file("src/B.tsx") == [color]
        assert report.by_severity == {"error": 1, "warning": 1}

    def test_to_json(self):
        report = ValidationReport(total_files=1, violations=[make_violation()])
        data = json.loads(report.to_json())

        assert data["total_files"] == 1
        assert data["total_violations"] == 1
        assert data["violations"][0]["category"] == "sizing"
        assert data["by_category"]["borderRadius"] == 0

    def test_violation_dict_roundtrip(self):
        violation = make_violation(hint=None)

        assert TokenViolation.from_dict(violation.to_dict()) == violation


class TestReportFormatter:
    """Text rendering of reports."""

    def test_detailed_line(self):
        violation = make_violation("src/A.tsx", 4, 12)

        assert violation.describe() == (
            'src/A.tsx:4:12 — h-8 (<div className="h-8" />) — Suggestion: h-size-sm'
        )

    def test_line_without_suggestion(self):
        violation = make_violation(candidates=[], class_name="text-black", context="x")

        assert violation.describe() == "src/A.tsx:1:1 — text-black (x)"

    def test_header(self):
        report = ValidationReport(total_files=3, violations=[make_violation()], skipped_files=1)
        text = ReportFormatter().format(report)

        assert text.splitlines()[:5] == [
            "Semantic Token Validation",
            "  Files scanned: 3",
            "  Files with violations: 1",
            "  Total violations: 1",
            "  Skipped (exceptions): 1",
        ]
        assert "    - sizing: 1" in text
        assert "    - borderRadius: 0" in text

    def test_summary_truncates(self):
        violations = [make_violation(line=n) for n in range(1, 6)]
        report = ValidationReport(total_files=1, violations=violations)
        text = ReportFormatter(summary_violation_limit=2).format(report, ReportMode.SUMMARY)

        assert "src/A.tsx:2:1" in text
        assert "src/A.tsx:3:1" not in text
        assert "  ... and 3 more (use --report detailed)" in text

    def test_detailed_lists_everything(self):
        violations = [make_violation(line=n) for n in range(1, 6)]
        report = ValidationReport(total_files=1, violations=violations)
        text = ReportFormatter(summary_violation_limit=2).format(report, ReportMode.DETAILED)

        assert "src/A.tsx:5:1" in text
        assert "more (use --report detailed)" not in text

    def test_top_suggestions_section(self):
        report = ValidationReportGenerator().generate(
            [FileScanResult(file="src/A.tsx", violations=[make_violation(), make_violation(line=2)])]
        )
        text = ReportFormatter().format(report)

        assert "Top suggestions:" in text
        assert "     2  h-8 → h-size-sm" in text

    def test_failures_and_fixes(self):
        report = ValidationReport(
            total_files=1,
            failures=[FileFailure("src/B.tsx", "bad bytes")],
            fixes_applied=4,
            fix_mode=True,
        )
        text = ReportFormatter().format(report)

        assert "  Fixes applied: 4" in text
        assert "Failed files (1):" in text
        assert "  src/B.tsx: bad bytes" in text
