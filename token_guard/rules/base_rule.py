"""
TokenRule - Abstract base class for non-semantic token rules.

Each rule owns one Category. The engine classifies every class once
and hands violations of that category to the rule, which resolves
suggestions and builds the Diagnostic.

Usage:
    class MyRule(TokenRule):
        @property
        def name(self) -> str:
            return "no-non-semantic-things"

        @property
        def category(self) -> Category:
            return Category.SPACING

        @property
        def priority(self) -> int:
            return 20
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Union

from ..analyzers.source_extractor import LineIndex
from ..analyzers.tokenizer import extract_tailwind_classes
from ..classifiers.dispatcher import DEFAULT_DISPATCHER, ClassificationDispatcher
from ..contracts.categories import Category, Severity
from ..contracts.options import RuleOptions
from ..contracts.suggestions import Resolution, SuggestionCandidate
from ..contracts.tokens import ClassToken, ClassValue
from ..contracts.validation import ClassificationResult, Diagnostic
from ..suggestions.resolver import DEFAULT_RESOLVER, SuggestionResolver


class TokenRule(ABC):
    """
    Abstract base class for token rules.

    Subclasses must implement:
    - name: Rule id, e.g. 'no-non-semantic-spacing'
    - category: Category this rule reports
    - priority: Reporting order for classes at the same offset (lower first)

    Severity defaults to the category's severity.
    """

    MESSAGE = (
        'Use semantic {noun} token instead of "{class_name}". '
        'Consider using "{suggestion}" or another semantic token.'
    )

    def __init__(
        self,
        resolver: Optional[SuggestionResolver] = None,
        dispatcher: Optional[ClassificationDispatcher] = None,
    ):
        """
        Initialize the rule.

        Args:
            resolver: Suggestion resolver (defaults to exact matches only)
            dispatcher: Category dispatcher used by check()
        """
        self._resolver = resolver or DEFAULT_RESOLVER
        self._dispatcher = dispatcher or DEFAULT_DISPATCHER

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule id."""
        pass

    @property
    @abstractmethod
    def category(self) -> Category:
        """Category this rule reports."""
        pass

    @property
    @abstractmethod
    def priority(self) -> int:
        """Execution priority. Lower values run first."""
        pass

    @property
    def severity(self) -> Severity:
        return self.category.severity

    @property
    def resolver(self) -> SuggestionResolver:
        return self._resolver

    # =========================================================================
    # REPORTING
    # =========================================================================

    def can_report(self, result: ClassificationResult) -> bool:
        """Check if a classification is a violation owned by this rule."""
        return result.is_violation and result.category == self.category

    def create_diagnostic(
        self,
        token: ClassToken,
        value: ClassValue,
        options: RuleOptions,
        filename: str = "",
        lines: Optional[LineIndex] = None,
    ) -> Diagnostic:
        """
        Build the Diagnostic for one offending token.

        Args:
            token: Offending token (offsets relative to `value.text`)
            value: Class string the token was found in
            options: Rule options in effect
            filename: File being linted
            lines: Line index of the source, for exact positions

        Returns:
            Diagnostic with ranked candidates and absolute position
        """
        resolution = self._resolver.resolve(self.category, token, options)
        start = value.source_offset(token.start)
        if not value.located:
            start = value.start
            line, column = value.line, value.column
        elif lines is not None:
            line, column = lines.position(start)
        else:
            line, column = value.line, value.column + token.start

        return Diagnostic(
            rule=self.name,
            category=self.category,
            severity=self.severity,
            token=token,
            message=self.message_for(token, resolution),
            resolution=resolution,
            filename=filename,
            line=line,
            column=column,
            start=start,
            fixable=value.fixable,
        )

    def check(
        self,
        value: Union[str, ClassValue, None],
        options: Optional[RuleOptions] = None,
        filename: str = "",
    ) -> List[Diagnostic]:
        """
        Run this rule alone over one class string.

        Args:
            value: Raw class string or extracted ClassValue
            options: Rule options in effect
            filename: File name echoed into diagnostics

        Returns:
            Diagnostics in token order
        """
        if isinstance(value, str):
            value = ClassValue(text=value, start=0)
        if value is None:
            return []

        options = options or RuleOptions()
        diagnostics = []
        for token in extract_tailwind_classes(value.text):
            if self.can_report(self._dispatcher.classify(token, options)):
                diagnostics.append(self.create_diagnostic(token, value, options, filename))
        return diagnostics

    # =========================================================================
    # MESSAGES
    # =========================================================================

    def message_for(self, token: ClassToken, resolution: Resolution) -> str:
        """Diagnostic message for a token."""
        return self.MESSAGE.format(
            noun=self.category.noun,
            class_name=token.raw,
            suggestion=self.suggestion_text(resolution),
        )

    def suggestion_text(self, resolution: Resolution) -> str:
        """Suggestion quoted in the message: first candidate, hint, or a generic token."""
        return resolution.suggestion or f"a semantic {self.category.noun} token"

    @staticmethod
    def fix_message(candidate: SuggestionCandidate) -> str:
        """Label for one suggested fix."""
        if candidate.is_removal:
            return "Remove class"
        return f'Replace with "{candidate.replacement}"'

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name}, priority={self.priority})"

    def __eq__(self, other: object) -> bool:
        """Equality check based on class type."""
        if not isinstance(other, TokenRule):
            return False
        return self.__class__ == other.__class__

    def __hash__(self) -> int:
        return hash(self.__class__.__name__)
