"""
Validation - Classification results, violations and lint diagnostics.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from .categories import Category, Severity
from .suggestions import Resolution, SuggestionCandidate
from .tokens import ClassToken


@dataclass(frozen=True)
class ClassificationResult:
    """
    Whether a class is governed, by which category, and if it is non-semantic.

    `is_non_semantic` is only meaningful when `is_governed` is True.
    """

    is_governed: bool
    category: Optional[Category] = None
    is_non_semantic: bool = False

    @classmethod
    def not_governed(cls) -> "ClassificationResult":
        return cls(is_governed=False)

    @property
    def is_violation(self) -> bool:
        """Check if the class should be reported."""
        return self.is_governed and self.is_non_semantic

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "is_governed": self.is_governed,
            "category": self.category.value if self.category else None,
            "is_non_semantic": self.is_non_semantic,
        }


@dataclass(frozen=True)
class Violation:
    """A non-semantic class with its ranked suggestions."""

    class_name: str
    category: Category
    suggestion: Optional[str] = None
    """First candidate replacement, if any."""

    all_candidates: List[SuggestionCandidate] = field(default_factory=list)
    hint: Optional[str] = None

    @property
    def has_fix(self) -> bool:
        return len(self.all_candidates) > 0

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "class_name": self.class_name,
            "category": self.category.value,
            "suggestion": self.suggestion,
            "all_candidates": [c.to_dict() for c in self.all_candidates],
            "hint": self.hint,
        }


@dataclass
class Diagnostic:
    """
    A lint-time report for one offending class occurrence.

    Carries the absolute source span of the class so a fix replaces
    exactly that token and nothing else.
    """

    rule: str
    """Rule name (e.g. 'no-non-semantic-shadows')."""

    category: Category
    severity: Severity
    token: ClassToken
    message: str
    resolution: Resolution = field(default_factory=Resolution)

    filename: str = ""
    line: int = 1
    """1-based line of the offending class."""

    column: int = 1
    """1-based column of the offending class."""

    start: int = 0
    """Absolute source offset of the class."""

    fixable: bool = True
    """False when the enclosing class value cannot be rewritten in place."""

    @property
    def end(self) -> int:
        return self.start + len(self.token.raw)

    @property
    def class_name(self) -> str:
        return self.token.raw

    @property
    def candidates(self) -> List[SuggestionCandidate]:
        return self.resolution.candidates

    @property
    def suggestion(self) -> Optional[str]:
        return self.resolution.first.replacement if self.resolution.first else None

    @property
    def has_fix(self) -> bool:
        """Check if an automatic fix can be applied."""
        return self.fixable and self.resolution.has_candidates

    def apply(
        self,
        source: str,
        candidate: Union[SuggestionCandidate, int, None] = None,
    ) -> str:
        """
        Apply a candidate to the source text.

        Only the offending class is replaced; surrounding classes and
        whitespace are left as they were. REMOVE_CLASS splices in an
        empty string.

        Args:
            source: Source text this diagnostic was produced from
            candidate: Candidate, candidate index, or None for the first

        Returns:
            New source text

        Raises:
            ValueError: If there is no such candidate or the span no
                longer matches the offending class
        """
        if candidate is None or isinstance(candidate, int):
            index = candidate or 0
            if index >= len(self.candidates):
                raise ValueError(f"No candidate #{index} for {self.class_name}")
            candidate = self.candidates[index]

        if source[self.start:self.end] != self.token.raw:
            raise ValueError(
                f"Source does not contain {self.class_name} at offset {self.start}"
            )

        return source[: self.start] + candidate.applied_text + source[self.end:]

    def to_violation(self) -> Violation:
        """Drop position data, keeping the engine-level violation."""
        return Violation(
            class_name=self.class_name,
            category=self.category,
            suggestion=self.suggestion,
            all_candidates=list(self.candidates),
            hint=self.resolution.hint,
        )

    def describe(self) -> str:
        """Generate human-readable one-line description."""
        return f"{self.filename}:{self.line}:{self.column} [{self.rule}] {self.message}"

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "rule": self.rule,
            "category": self.category.value,
            "severity": self.severity.value,
            "class_name": self.class_name,
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "fixable": self.fixable,
            **self.resolution.to_dict(),
        }
