"""
Report Formatter - Render a ValidationReport as text.

Modes:
- summary: aggregate counts, top suggestions, first N violations
- detailed: aggregate counts, top suggestions, every violation as
  `file:line:col — class (context) — Suggestion: …`
"""

from enum import Enum
from typing import List

from .report import ValidationReport


class ReportMode(Enum):
    """Report verbosity."""

    SUMMARY = "summary"
    DETAILED = "detailed"


class ReportFormatter:
    """Formats validation reports as plain text."""

    def __init__(self, summary_violation_limit: int = 10):
        """
        Args:
            summary_violation_limit: Violations listed in summary mode
        """
        self._limit = summary_violation_limit

    def format(self, report: ValidationReport, mode: ReportMode = ReportMode.SUMMARY) -> str:
        """
        Render a report.

        Args:
            report: Report to render
            mode: Summary or detailed

        Returns:
            Multi-line text
        """
        lines = self._header(report)
        lines.extend(self._top_suggestions(report))

        if mode == ReportMode.DETAILED:
            lines.extend(self._violations(report, len(report.violations)))
        else:
            lines.extend(self._violations(report, self._limit))

        lines.extend(self._failures(report))
        return "\n".join(lines)

    def _header(self, report: ValidationReport) -> List[str]:
        lines = [
            "Semantic Token Validation",
            f"  Files scanned: {report.total_files}",
            f"  Files with violations: {report.files_with_violations}",
            f"  Total violations: {report.total_violations}",
        ]
        if report.skipped_files:
            lines.append(f"  Skipped (exceptions): {report.skipped_files}")
        if report.fix_mode:
            lines.append(f"  Fixes applied: {report.fixes_applied}")

        lines.append("")
        lines.append("  By category:")
        for category, count in report.by_category.items():
            lines.append(f"    - {category}: {count}")
        lines.append("  By severity:")
        for severity, count in report.by_severity.items():
            lines.append(f"    - {severity}: {count}")
        return lines

    def _top_suggestions(self, report: ValidationReport) -> List[str]:
        if not report.top_suggestions:
            return []
        lines = ["", "Top suggestions:"]
        for entry in report.top_suggestions:
            lines.append(f"  {entry.count:>4}  {entry.key}")
        return lines

    def _violations(self, report: ValidationReport, limit: int) -> List[str]:
        if not report.violations or limit <= 0:
            return []
        shown = report.violations[:limit]
        lines = ["", "Violations:"]
        lines.extend(f"  {v.describe()}" for v in shown)
        remaining = len(report.violations) - len(shown)
        if remaining > 0:
            lines.append(f"  ... and {remaining} more (use --report detailed)")
        return lines

    def _failures(self, report: ValidationReport) -> List[str]:
        if not report.failures:
            return []
        lines = ["", f"Failed files ({len(report.failures)}):"]
        lines.extend(f"  {f.file}: {f.reason}" for f in report.failures)
        return lines
