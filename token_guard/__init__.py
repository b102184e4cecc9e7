"""
token-guard - Semantic design token classification and suggestion engine.

Classifies Tailwind-style utility classes into governed categories
(sizing, spacing, color, shadow, border radius), flags raw values that
should use semantic tokens, and suggests ranked replacements.

Usage:
    from token_guard import classify, get_suggestion, create_default_engine

    classify("hover:h-10").is_non_semantic      # True
    get_suggestion(Category.SHADOW, "shadow-xl")  # [shadow-lg, shadow-highlight]
"""

from .analyzers import extract_class_values, extract_tailwind_classes
from .classifiers import classify, is_non_semantic
from .contracts import (
    REMOVE_CLASS,
    Category,
    ClassificationResult,
    ClassToken,
    Diagnostic,
    Resolution,
    RuleOptions,
    Severity,
    SuggestionCandidate,
    Violation,
)
from .exceptions import ConfigurationError, TokenGuardError
from .rules import RuleEngine, create_default_engine
from .suggestions import SuggestionResolver, get_suggestion

__version__ = "0.1.0"

__all__ = [
    "extract_class_values",
    "extract_tailwind_classes",
    "classify",
    "is_non_semantic",
    "REMOVE_CLASS",
    "Category",
    "ClassificationResult",
    "ClassToken",
    "Diagnostic",
    "Resolution",
    "RuleOptions",
    "Severity",
    "SuggestionCandidate",
    "Violation",
    "ConfigurationError",
    "TokenGuardError",
    "RuleEngine",
    "create_default_engine",
    "SuggestionResolver",
    "get_suggestion",
]
