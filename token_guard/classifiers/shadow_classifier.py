"""
ShadowClassifier - Elevation shadows.

Standard Tailwind shadows without a semantic meaning (`shadow`,
`shadow-none`, `shadow-inner`, `shadow-xl`, `shadow-2xl`) are flagged;
the semantic set (`shadow-sm/md/lg`, interactive, highlight and inset
families) is allowed.
"""

from typing import Optional

from ..contracts.categories import Category
from ..contracts.options import RuleOptions
from ..semantic_tokens import SemanticTokens
from .base_classifier import CategoryClassifier, UtilityParts


class ShadowClassifier(CategoryClassifier):
    """Classifier for shadow classes."""

    @property
    def category(self) -> Category:
        return Category.SHADOW

    def match(self, base: str) -> Optional[UtilityParts]:
        if base == "shadow":
            return UtilityParts(prefix="shadow", value="")
        if base.startswith("shadow-") and len(base) > len("shadow-"):
            return UtilityParts(prefix="shadow", value=base[len("shadow-"):])
        return None

    def is_non_semantic_parts(self, parts: UtilityParts, options: RuleOptions) -> bool:
        base = parts.rebuild(parts.value)
        if SemanticTokens.is_allowed_shadow(base):
            return False
        return base in SemanticTokens.SHADOW_REPLACEMENTS
