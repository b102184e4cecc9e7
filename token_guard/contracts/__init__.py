"""
Contracts - Data structures shared by the engine and its callers.

Provides:
- Category, Severity: governed class families
- ClassToken, ClassValue: tokens and the class strings they come from
- SuggestionCandidate, Resolution: ranked replacements
- ClassificationResult, Violation, Diagnostic: engine and lint results
- RuleOptions: validated rule configuration
"""

from .categories import Category, Severity
from .tokens import ClassToken, ClassValue
from .suggestions import REMOVE_CLASS, Resolution, SuggestionCandidate, rank_candidates
from .validation import ClassificationResult, Diagnostic, Violation
from .options import RuleOptions

__all__ = [
    "Category",
    "Severity",
    "ClassToken",
    "ClassValue",
    "REMOVE_CLASS",
    "Resolution",
    "SuggestionCandidate",
    "rank_candidates",
    "ClassificationResult",
    "Diagnostic",
    "Violation",
    "RuleOptions",
]
