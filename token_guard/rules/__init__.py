"""
Rules - Lint-time adapters over the classification engine.

Provides:
- TokenRule: Abstract base for category rules
- One rule per category (colors, spacing, sizing, shadows, border radius)
- RuleEngine / create_default_engine: per-file linting with exceptions
- apply_fixes / FixResult: in-place fix application
"""

from .base_rule import TokenRule
from .category_rules import (
    NoNonSemanticBorderRadiusRule,
    NoNonSemanticColorsRule,
    NoNonSemanticShadowsRule,
    NoNonSemanticSizingRule,
    NoNonSemanticSpacingRule,
)
from .fix_applier import FixResult, apply_fixes
from .rule_engine import RuleEngine, create_default_engine

__all__ = [
    "TokenRule",
    "NoNonSemanticBorderRadiusRule",
    "NoNonSemanticColorsRule",
    "NoNonSemanticShadowsRule",
    "NoNonSemanticSizingRule",
    "NoNonSemanticSpacingRule",
    "FixResult",
    "apply_fixes",
    "RuleEngine",
    "create_default_engine",
]
