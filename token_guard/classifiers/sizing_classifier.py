"""
SizingClassifier - Element dimensions (h-*, w-*, min-*/max-*).

Flags numeric values in the element-size band [4, 16]. Smaller values
are sub-element detail and larger values are layout dimensions; both
pass through, as do keywords, fractions and arbitrary values.

Examples:
    h-8, w-10, min-h-6, hover:h-16   → non-semantic
    h-full, w-1/2, h-[50%], h-3, w-48 → allowed
"""

from typing import Optional

from ..analyzers.numeric import in_range, is_exempt_value, match_prefix, parse_scale_value
from ..contracts.categories import Category
from ..contracts.options import RuleOptions
from ..semantic_tokens import SemanticTokens
from .base_classifier import CategoryClassifier, UtilityParts


class SizingClassifier(CategoryClassifier):
    """Classifier for element sizing classes."""

    @property
    def category(self) -> Category:
        return Category.SIZING

    def match(self, base: str) -> Optional[UtilityParts]:
        matched = match_prefix(base, SemanticTokens.SIZING_PREFIXES)
        if matched is None:
            return None
        return UtilityParts(prefix=matched[0], value=matched[1])

    def is_non_semantic_parts(self, parts: UtilityParts, options: RuleOptions) -> bool:
        if is_exempt_value(parts.value):
            return False

        number = parse_scale_value(parts.value)
        if number is None:
            return False

        return in_range(
            number,
            SemanticTokens.SIZING_ELEMENT_MIN,
            SemanticTokens.SIZING_ELEMENT_MAX,
        )
