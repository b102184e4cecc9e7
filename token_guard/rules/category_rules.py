"""
Category rules - One non-semantic token rule per governed category.

Priorities follow the dispatch order so diagnostics for the same
offset come out color first.
"""

from ..contracts.categories import Category
from ..contracts.suggestions import Resolution
from .base_rule import TokenRule


class NoNonSemanticColorsRule(TokenRule):
    """Raw palette colors (bg-neutral-100, text-white, border-[#f00])."""

    @property
    def name(self) -> str:
        return "no-non-semantic-colors"

    @property
    def category(self) -> Category:
        return Category.COLOR

    @property
    def priority(self) -> int:
        return 10


class NoNonSemanticSpacingRule(TokenRule):
    """Numeric padding, margin and gaps (p-4, -m-2, gap-x-3)."""

    @property
    def name(self) -> str:
        return "no-non-semantic-spacing"

    @property
    def category(self) -> Category:
        return Category.SPACING

    @property
    def priority(self) -> int:
        return 20


class NoNonSemanticSizingRule(TokenRule):
    """Numeric element sizes in the 4-16 band (h-8, w-10)."""

    @property
    def name(self) -> str:
        return "no-non-semantic-sizing"

    @property
    def category(self) -> Category:
        return Category.SIZING

    @property
    def priority(self) -> int:
        return 30


class NoNonSemanticShadowsRule(TokenRule):
    """Standard Tailwind shadows (shadow, shadow-none, shadow-xl)."""

    @property
    def name(self) -> str:
        return "no-non-semantic-shadows"

    @property
    def category(self) -> Category:
        return Category.SHADOW

    @property
    def priority(self) -> int:
        return 40

    def suggestion_text(self, resolution: Resolution) -> str:
        """Every replacing candidate ('shadow-lg or shadow-highlight')."""
        replacements = [c.replacement for c in resolution.candidates if not c.is_removal]
        return " or ".join(replacements) or super().suggestion_text(resolution)


class NoNonSemanticBorderRadiusRule(TokenRule):
    """Oversized, numeric and arbitrary radii (rounded-2xl, rounded-[3px])."""

    MESSAGE = 'Use semantic border radius instead of "{class_name}". {suggestion}'

    @property
    def name(self) -> str:
        return "no-non-semantic-border-radius"

    @property
    def category(self) -> Category:
        return Category.BORDER_RADIUS

    @property
    def priority(self) -> int:
        return 50

    def suggestion_text(self, resolution: Resolution) -> str:
        if resolution.has_candidates:
            quoted = " or ".join(f'"{r}"' for r in resolution.replacements())
            return f"Consider using {quoted}."
        if resolution.hint:
            return f"{resolution.hint}."
        return "Use semantic border radius tokens."
