"""
Validation Report - Aggregated results of a batch token scan.

Provides the per-violation record, per-file scan results and the
ValidationReport with its generator. Aggregation only sums file
results, so the order files finish scanning in never matters.
"""

import json
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..contracts.categories import Category, Severity
from ..contracts.validation import Diagnostic


@dataclass
class TokenViolation:
    """One offending class occurrence in a scanned file."""

    file: str
    """Path of the file, relative to the scan root."""

    line: int
    column: int
    class_name: str
    category: Category
    severity: Severity

    suggestion: Optional[str] = None
    """First candidate, or the nearest-match hint."""

    candidates: List[str] = field(default_factory=list)
    """All candidate replacements in rank order."""

    hint: Optional[str] = None
    context: str = ""
    """Trimmed source line the class appears on."""

    rule: str = ""
    fixable: bool = False
    """True when the first candidate can be applied automatically."""

    @classmethod
    def from_diagnostic(
        cls, diagnostic: Diagnostic, file: str, context: str = ""
    ) -> "TokenViolation":
        """Build a report record from a lint diagnostic."""
        return cls(
            file=file,
            line=diagnostic.line,
            column=diagnostic.column,
            class_name=diagnostic.class_name,
            category=diagnostic.category,
            severity=diagnostic.severity,
            suggestion=diagnostic.resolution.suggestion,
            candidates=diagnostic.resolution.replacements(),
            hint=diagnostic.resolution.hint,
            context=context.strip(),
            rule=diagnostic.rule,
            fixable=diagnostic.has_fix,
        )

    @property
    def location(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"

    def describe(self) -> str:
        """One-line rendering used by detailed reports."""
        text = f"{self.location} — {self.class_name} ({self.context})"
        if self.suggestion:
            text += f" — Suggestion: {self.suggestion}"
        return text

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "class_name": self.class_name,
            "category": self.category.value,
            "severity": self.severity.value,
            "suggestion": self.suggestion,
            "candidates": self.candidates,
            "hint": self.hint,
            "context": self.context,
            "rule": self.rule,
            "fixable": self.fixable,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TokenViolation":
        """Create from dictionary."""
        return cls(
            file=data["file"],
            line=data["line"],
            column=data["column"],
            class_name=data["class_name"],
            category=Category(data["category"]),
            severity=Severity.from_string(data.get("severity", "warning")),
            suggestion=data.get("suggestion"),
            candidates=data.get("candidates", []),
            hint=data.get("hint"),
            context=data.get("context", ""),
            rule=data.get("rule", ""),
            fixable=data.get("fixable", False),
        )


@dataclass
class FileFailure:
    """A file that could not be read or parsed."""

    file: str
    reason: str

    def to_dict(self) -> Dict[str, str]:
        return {"file": self.file, "reason": self.reason}


@dataclass
class FileScanResult:
    """Outcome of scanning one file."""

    file: str
    violations: List[TokenViolation] = field(default_factory=list)
    fixes_applied: int = 0
    failure: Optional[FileFailure] = None

    @property
    def failed(self) -> bool:
        return self.failure is not None


@dataclass
class SuggestionCount:
    """How often one `from → to` replacement is suggested."""

    from_class: str
    to_class: str
    count: int
    files: List[str] = field(default_factory=list)

    @property
    def key(self) -> str:
        return f"{self.from_class} → {self.to_class}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.from_class,
            "to": self.to_class,
            "count": self.count,
            "files": self.files,
        }


@dataclass
class ValidationReport:
    """
    Complete report of a batch scan.

    Contains every violation plus the aggregate views used to
    prioritize fixes.
    """

    total_files: int
    """Files scanned (excludes skipped and failed files)."""

    violations: List[TokenViolation] = field(default_factory=list)
    skipped_files: int = 0
    """Files skipped because they match an exception."""

    failures: List[FileFailure] = field(default_factory=list)
    top_suggestions: List[SuggestionCount] = field(default_factory=list)
    fixes_applied: int = 0
    fix_mode: bool = False

    @property
    def total_violations(self) -> int:
        return len(self.violations)

    @property
    def files_with_violations(self) -> int:
        return len({v.file for v in self.violations})

    @property
    def has_violations(self) -> bool:
        return len(self.violations) > 0

    @property
    def by_category(self) -> Dict[str, int]:
        """Violation count per category (all categories listed)."""
        counts = Counter(v.category for v in self.violations)
        return {category.value: counts.get(category, 0) for category in Category}

    @property
    def by_severity(self) -> Dict[str, int]:
        """Violation count per severity (all severities listed)."""
        counts = Counter(v.severity for v in self.violations)
        return {severity.value: counts.get(severity, 0) for severity in Severity}

    @property
    def exit_code(self) -> int:
        """0 clean, 1 violations found, 2 only file failures."""
        if self.has_violations:
            return 1
        if self.failures:
            return 2
        return 0

    def get_violations_by_category(self, category: Category) -> List[TokenViolation]:
        return [v for v in self.violations if v.category == category]

    def get_violations_for_file(self, file: str) -> List[TokenViolation]:
        return [v for v in self.violations if v.file == file]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "total_files": self.total_files,
            "files_with_violations": self.files_with_violations,
            "skipped_files": self.skipped_files,
            "total_violations": self.total_violations,
            "by_category": self.by_category,
            "by_severity": self.by_severity,
            "top_suggestions": [s.to_dict() for s in self.top_suggestions],
            "violations": [v.to_dict() for v in self.violations],
            "failures": [f.to_dict() for f in self.failures],
            "fixes_applied": self.fixes_applied,
        }

    def to_json(self) -> str:
        """Serialize report to JSON string."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


class ValidationReportGenerator:
    """Builds a ValidationReport from per-file scan results."""

    def __init__(self, top_suggestions: int = 20):
        """
        Args:
            top_suggestions: Entries kept in the top suggestions ranking
        """
        self._top_suggestions = top_suggestions

    def generate(
        self,
        results: List[FileScanResult],
        skipped_files: int = 0,
        fix_mode: bool = False,
    ) -> ValidationReport:
        """
        Aggregate file results.

        Args:
            results: One result per scanned file, in any order
            skipped_files: Files skipped by exceptions
            fix_mode: Whether fixes were applied

        Returns:
            ValidationReport with violations ordered by file, line, column
        """
        ordered = sorted(results, key=lambda r: r.file)

        violations = []
        failures = []
        fixes_applied = 0
        for result in ordered:
            if result.failure is not None:
                failures.append(result.failure)
                continue
            violations.extend(sorted(result.violations, key=lambda v: (v.line, v.column)))
            fixes_applied += result.fixes_applied

        return ValidationReport(
            total_files=len(ordered) - len(failures),
            violations=violations,
            skipped_files=skipped_files,
            failures=failures,
            top_suggestions=self._rank_suggestions(violations),
            fixes_applied=fixes_applied,
            fix_mode=fix_mode,
        )

    def _rank_suggestions(self, violations: List[TokenViolation]) -> List[SuggestionCount]:
        """Count `from → first candidate` pairs; most frequent first, ties alphabetical."""
        counts: Counter = Counter()
        files: Dict[tuple, set] = {}
        for violation in violations:
            # hint-only violations have nothing to replace with
            if not violation.candidates:
                continue
            key = (violation.class_name, violation.candidates[0])
            counts[key] += 1
            files.setdefault(key, set()).add(violation.file)

        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return [
            SuggestionCount(
                from_class=from_class,
                to_class=to_class,
                count=count,
                files=sorted(files[(from_class, to_class)]),
            )
            for (from_class, to_class), count in ranked[: self._top_suggestions]
        ]
