"""
BorderRadiusClassifier - rounded-* classes.

Semantic radius values (none, sm, md, lg, xl, full), bare `rounded` and
named design-system radii (e.g. `rounded-card`) are allowed. Oversized
values (2xl, 3xl), arbitrary values and bare numerics are flagged.
Directional forms (rounded-t-*, rounded-tl-*, rounded-s-*, ...) follow
the same rules.
"""

from typing import Optional

from ..analyzers.numeric import is_arbitrary, parse_scale_value
from ..contracts.categories import Category
from ..contracts.options import RuleOptions
from ..semantic_tokens import SemanticTokens
from .base_classifier import CategoryClassifier, UtilityParts


class BorderRadiusClassifier(CategoryClassifier):
    """Classifier for border radius classes."""

    @property
    def category(self) -> Category:
        return Category.BORDER_RADIUS

    def match(self, base: str) -> Optional[UtilityParts]:
        if base == "rounded":
            return UtilityParts(prefix="rounded", value="")
        if not base.startswith("rounded-"):
            return None

        rest = base[len("rounded-"):]
        for direction in SemanticTokens.RADIUS_DIRECTIONS:
            if rest == direction:
                return UtilityParts(prefix=f"rounded-{direction}", value="")
            if rest.startswith(f"{direction}-"):
                return UtilityParts(
                    prefix=f"rounded-{direction}", value=rest[len(direction) + 1:]
                )
        return UtilityParts(prefix="rounded", value=rest)

    def is_non_semantic_parts(self, parts: UtilityParts, options: RuleOptions) -> bool:
        value = parts.value
        if not value or value in SemanticTokens.RADIUS_ALLOWED:
            return False
        if value in SemanticTokens.RADIUS_OVERSIZED:
            return True
        return is_arbitrary(value) or parse_scale_value(value) is not None

    @staticmethod
    def direction(parts: UtilityParts) -> str:
        """Direction suffix including its dash ('-tl'), or '' for all corners."""
        return parts.prefix[len("rounded"):]
