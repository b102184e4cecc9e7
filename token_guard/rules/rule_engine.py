"""
RuleEngine - Runs the token rules over a source file.

Maintains a registry of rules indexed by the Category they report.
Linting a file:
1. Checks the file against the exceptions list once
2. Extracts class strings (JSX/TS source or HTML)
3. Classifies every class once with the dispatcher
4. Hands each violation to the rules registered for its category

Usage:
    from token_guard.rules import create_default_engine

    engine = create_default_engine({"exceptions": ["src/styles/"]})
    diagnostics = engine.lint("src/Button.tsx", source)
    fixed = engine.fix("src/Button.tsx", source).source
"""

import logging
from typing import Any, Dict, List, Optional, Type, Union

from ..analyzers.html_extractor import HTMLExtractor
from ..analyzers.source_extractor import LineIndex, SourceExtractor
from ..analyzers.tokenizer import extract_tailwind_classes
from ..classifiers.dispatcher import DEFAULT_DISPATCHER, ClassificationDispatcher
from ..contracts.categories import Category
from ..contracts.options import RuleOptions
from ..contracts.tokens import ClassValue
from ..contracts.validation import Diagnostic
from ..suggestions.resolver import SuggestionResolver
from .base_rule import TokenRule
from .fix_applier import FixResult, apply_fixes


logger = logging.getLogger(__name__)


HTML_SUFFIXES = (".html", ".htm")


class RuleEngine:
    """
    Orchestrates token rule execution.

    Options are validated once, when the engine is built, so a bad
    configuration fails before any file is scanned.
    """

    def __init__(
        self,
        options: Union[RuleOptions, Dict[str, Any], None] = None,
        dispatcher: Optional[ClassificationDispatcher] = None,
    ):
        """
        Initialize the rule engine.

        Args:
            options: RuleOptions or a raw options dict

        Raises:
            ConfigurationError: If raw options are invalid
        """
        if not isinstance(options, RuleOptions):
            options = RuleOptions.from_dict(options)
        self._options = options
        self._dispatcher = dispatcher or DEFAULT_DISPATCHER
        self._rules: List[TokenRule] = []
        self._category_index: Dict[Category, List[TokenRule]] = {}

    @property
    def options(self) -> RuleOptions:
        return self._options

    # =========================================================================
    # REGISTRY
    # =========================================================================

    def register(self, rule: TokenRule) -> None:
        """
        Register a token rule.

        Args:
            rule: TokenRule instance to register
        """
        self._rules.append(rule)
        self._rules.sort(key=lambda r: r.priority)
        self._rebuild_index()
        logger.debug(f"Registered rule: {rule.name}")

    def register_all(self, rules: List[TokenRule]) -> None:
        """Register multiple rules at once."""
        for rule in rules:
            self.register(rule)

    def unregister(self, rule_class: Type[TokenRule]) -> bool:
        """
        Unregister a rule by class.

        Returns:
            True if rule was found and removed
        """
        original_count = len(self._rules)
        self._rules = [r for r in self._rules if not isinstance(r, rule_class)]
        self._rebuild_index()
        removed = len(self._rules) < original_count
        if removed:
            logger.debug(f"Unregistered rule: {rule_class.__name__}")
        return removed

    def get_rules_for_category(self, category: Category) -> List[TokenRule]:
        """Get all rules reporting a category, sorted by priority."""
        return self._category_index.get(category, [])

    def _rebuild_index(self) -> None:
        """Rebuild the category index."""
        self._category_index.clear()
        for rule in self._rules:
            self._category_index.setdefault(rule.category, []).append(rule)

    @property
    def rules(self) -> List[TokenRule]:
        """Get all registered rules (sorted by priority)."""
        return self._rules.copy()

    # =========================================================================
    # LINTING
    # =========================================================================

    def is_excepted(self, filename: str) -> bool:
        """Check if a file is skipped entirely."""
        return self._options.is_excepted(filename)

    def extract(self, filename: str, source: str) -> List[ClassValue]:
        """Extract class strings with the extractor matching the file type."""
        if filename.lower().endswith(HTML_SUFFIXES):
            return HTMLExtractor(source).extract()
        return SourceExtractor(source).extract()

    def lint(self, filename: str, source: Optional[str]) -> List[Diagnostic]:
        """
        Lint one file.

        Args:
            filename: Path of the file (matched against exceptions)
            source: File contents

        Returns:
            Diagnostics in source order
        """
        if self.is_excepted(filename):
            logger.debug(f"Skipping excepted file: {filename}")
            return []
        if not source:
            return []

        values = self.extract(filename, source)
        diagnostics = self.lint_values(values, filename, LineIndex(source))
        logger.debug(f"Linted {filename}: {len(diagnostics)} diagnostic(s)")
        return diagnostics

    def lint_values(
        self,
        values: List[ClassValue],
        filename: str = "",
        lines: Optional[LineIndex] = None,
    ) -> List[Diagnostic]:
        """
        Run the rules over already extracted class strings.

        Exceptions are not checked here; callers that bypass lint() are
        responsible for that.

        Args:
            values: Class strings in source order
            filename: File name echoed into diagnostics
            lines: Line index for exact positions

        Returns:
            Diagnostics in source order
        """
        diagnostics = []
        for value in values:
            for token in extract_tailwind_classes(value.text):
                result = self._dispatcher.classify(token, self._options)
                if not result.is_violation:
                    continue
                for rule in self.get_rules_for_category(result.category):
                    diagnostics.append(
                        rule.create_diagnostic(token, value, self._options, filename, lines)
                    )
        return diagnostics

    def fix(self, filename: str, source: str) -> FixResult:
        """
        Lint a file and apply every preferred fix.

        Returns:
            FixResult with the rewritten source
        """
        return apply_fixes(source, self.lint(filename, source))

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleEngine({len(self._rules)} rules)"


def create_default_engine(
    options: Union[RuleOptions, Dict[str, Any], None] = None,
    resolver: Optional[SuggestionResolver] = None,
) -> RuleEngine:
    """
    Create a RuleEngine with all five category rules registered.

    Args:
        options: RuleOptions or raw options dict
        resolver: Suggestion resolver shared by all rules

    Returns:
        Configured RuleEngine ready to use

    Raises:
        ConfigurationError: If raw options are invalid
    """
    from .category_rules import (
        NoNonSemanticBorderRadiusRule,
        NoNonSemanticColorsRule,
        NoNonSemanticShadowsRule,
        NoNonSemanticSizingRule,
        NoNonSemanticSpacingRule,
    )

    engine = RuleEngine(options)
    engine.register_all([
        NoNonSemanticColorsRule(resolver),         # Priority 10
        NoNonSemanticSpacingRule(resolver),        # Priority 20
        NoNonSemanticSizingRule(resolver),         # Priority 30
        NoNonSemanticShadowsRule(resolver),        # Priority 40
        NoNonSemanticBorderRadiusRule(resolver),   # Priority 50
    ])

    logger.debug(f"Created default engine with {len(engine)} rules")
    return engine
