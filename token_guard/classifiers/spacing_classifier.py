"""
SpacingClassifier - Padding, margin, gap and space-between.

Every plain numeric value is non-semantic, including negative margins
(-m-2) and decimals (p-0.5). Keywords, fractions and arbitrary values
are allowed.
"""

from typing import Optional

from ..analyzers.numeric import is_exempt_value, match_prefix, parse_scale_value
from ..contracts.categories import Category
from ..contracts.options import RuleOptions
from ..semantic_tokens import SemanticTokens
from .base_classifier import CategoryClassifier, UtilityParts


class SpacingClassifier(CategoryClassifier):
    """Classifier for spacing classes."""

    @property
    def category(self) -> Category:
        return Category.SPACING

    def match(self, base: str) -> Optional[UtilityParts]:
        negative = base.startswith("-")
        unsigned = base[1:] if negative else base

        matched = match_prefix(unsigned, SemanticTokens.SPACING_PREFIXES)
        if matched is None:
            return None
        return UtilityParts(prefix=matched[0], value=matched[1], negative=negative)

    def is_non_semantic_parts(self, parts: UtilityParts, options: RuleOptions) -> bool:
        if is_exempt_value(parts.value):
            return False
        return parse_scale_value(parts.value) is not None
