"""
ColorClassifier - Raw palette colors versus semantic color roles.

Claims a class when its value is either a raw color (palette shade,
white/black, hex arbitrary value) or a semantic color role. Only raw
colors are non-semantic; palettes listed in `allowed_palettes` pass.

Examples:
    bg-neutral-100, text-white, border-[#ff0000], hover:bg-primary-500 → non-semantic
    bg-surface-muted, text-foreground, border-border                → allowed
"""

import re
from typing import Optional

from ..analyzers.numeric import match_prefix
from ..contracts.categories import Category
from ..contracts.options import RuleOptions
from ..semantic_tokens import SemanticTokens
from .base_classifier import CategoryClassifier, UtilityParts


class ColorClassifier(CategoryClassifier):
    """Classifier for color utility classes."""

    HEX_VALUE = re.compile(r"^\[#[0-9a-fA-F]{3,8}\]$")

    @property
    def category(self) -> Category:
        return Category.COLOR

    def match(self, base: str) -> Optional[UtilityParts]:
        matched = match_prefix(base, SemanticTokens.COLOR_PREFIXES)
        if matched is None:
            return None

        prefix, value = matched
        value = self.strip_opacity(value)

        if self.raw_palette(prefix, value) is not None:
            return UtilityParts(prefix=prefix, value=value)
        # shadow-interactive and friends belong to the shadow category
        if prefix != "shadow" and SemanticTokens.is_semantic_color(value):
            return UtilityParts(prefix=prefix, value=value)
        return None

    def is_non_semantic_parts(self, parts: UtilityParts, options: RuleOptions) -> bool:
        palette = self.raw_palette(parts.prefix, parts.value)
        if palette is None:
            return False
        return palette not in options.allowed_palettes

    # =========================================================================
    # HELPERS
    # =========================================================================

    @staticmethod
    def strip_opacity(value: str) -> str:
        """Drop an opacity modifier ('neutral-100/50' → 'neutral-100', '[#fff]/50' → '[#fff]')."""
        if value.startswith("["):
            end = value.find("]")
            if end >= 0 and value[end + 1:].startswith("/"):
                return value[:end + 1]
            return value
        return value.split("/", 1)[0]

    def raw_palette(self, prefix: str, value: str) -> Optional[str]:
        """
        Identify a raw color value.

        Args:
            prefix: Utility prefix
            value: Color value without opacity modifier

        Returns:
            Palette name ('neutral', 'white', 'hex'), or None for non-raw values
        """
        split = SemanticTokens.split_palette_color(value)
        if split is not None:
            return split[0]
        if value in SemanticTokens.RAW_COLOR_KEYWORDS and prefix in SemanticTokens.RAW_COLOR_PREFIXES:
            return value
        if self.HEX_VALUE.match(value):
            return "hex"
        return None
