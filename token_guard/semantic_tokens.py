"""
Semantic Tokens - The closed vocabulary of design-system classes.

This module is the single source of truth for every scale, allow-list
and lookup table used by the classifiers and the suggestion resolver.
Nothing in here is mutated at runtime.

Usage:
    from token_guard.semantic_tokens import SemanticTokens

    SemanticTokens.SIZE_SCALE[0]
    # ScaleStep(name="size-xs", rem=1.5)
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class ScaleStep:
    """A named step on a semantic scale."""

    name: str
    """Semantic suffix (e.g. 'size-md', 'base')."""

    rem: float
    """Step value in rem."""

    def describe(self) -> str:
        """Render the rem value the way Tailwind configs spell it."""
        return f"{self.rem:g}rem"


@dataclass(frozen=True)
class ColorMapping:
    """One row of the color suggestion table."""

    prefix: str
    palette: str
    shades: Optional[Tuple[str, ...]]
    """Matching shades, or None for any shade."""

    replacement: str


class SemanticTokens:
    """
    Centralized token definitions.

    Organized by governed category with helper methods for
    membership tests.
    """

    # =========================================================================
    # SIZING
    # =========================================================================

    SIZING_PREFIXES: Tuple[str, ...] = ("h", "min-h", "max-h", "w", "min-w", "max-w")

    SIZE_SCALE: Tuple[ScaleStep, ...] = (
        ScaleStep("size-xs", 1.5),
        ScaleStep("size-sm", 2.0),
        ScaleStep("size-md", 2.5),
        ScaleStep("size-lg", 3.0),
        ScaleStep("size-xl", 3.5),
    )
    """Element sizes: compact badges through hero buttons."""

    SIZING_ELEMENT_MIN = 4
    """Numeric values below this are sub-element detail, not flagged."""

    SIZING_ELEMENT_MAX = 16
    """Numeric values above this are layout dimensions, not flagged."""

    # =========================================================================
    # SPACING
    # =========================================================================

    SPACING_PREFIXES: Tuple[str, ...] = (
        # Padding
        "p", "px", "py", "pt", "pr", "pb", "pl", "ps", "pe",
        # Margin (negatives handled by the classifier)
        "m", "mx", "my", "mt", "mr", "mb", "ml", "ms", "me",
        # Gap
        "gap", "gap-x", "gap-y",
        # Space between
        "space-x", "space-y",
    )

    SPACING_SCALE: Tuple[ScaleStep, ...] = (
        ScaleStep("2xs", 0.125),
        ScaleStep("xs", 0.25),
        ScaleStep("sm", 0.5),
        ScaleStep("md", 0.75),
        ScaleStep("base", 1.0),
        ScaleStep("lg", 2.0),
        ScaleStep("xl", 4.0),
        ScaleStep("2xl", 8.0),
    )

    # =========================================================================
    # SHARED EXEMPTIONS
    # =========================================================================

    EXEMPT_VALUES = frozenset({
        "0", "px", "auto", "full", "screen", "svh", "lvh", "dvh",
        "min", "max", "fit", "none",
    })
    """Keyword values that never count as raw magnitudes."""

    REM_PER_STEP = 0.25
    """Tailwind numeric step in rem (h-4 == 1rem)."""

    # =========================================================================
    # SHADOW
    # =========================================================================

    SHADOW_ALLOWED = frozenset({"shadow-sm", "shadow-md", "shadow-lg"})

    SHADOW_ALLOWED_FAMILIES: Tuple[str, ...] = (
        "shadow-interactive",
        "shadow-highlight",
        "shadow-inset-",
    )

    REMOVE_CLASS = "remove class"
    """Sentinel replacement: drop the class instead of swapping it."""

    SHADOW_REPLACEMENTS: Dict[str, Tuple[str, ...]] = {
        "shadow": ("shadow-sm", "shadow-interactive"),
        "shadow-none": (REMOVE_CLASS, "shadow-sm"),
        "shadow-inner": ("shadow-inset-sm", "shadow-inset-md"),
        "shadow-xl": ("shadow-lg", "shadow-highlight"),
        "shadow-2xl": ("shadow-lg",),
    }

    # =========================================================================
    # BORDER RADIUS
    # =========================================================================

    RADIUS_ALLOWED = frozenset({"none", "sm", "md", "lg", "xl", "full"})

    RADIUS_DIRECTIONS: Tuple[str, ...] = (
        "tl", "tr", "br", "bl", "ss", "se", "es", "ee",
        "t", "r", "b", "l", "s", "e",
    )
    """Longest first so 'tl' wins over 't'."""

    RADIUS_SCALE: Tuple[ScaleStep, ...] = (
        ScaleStep("sm", 0.25),
        ScaleStep("md", 0.375),
        ScaleStep("lg", 0.5),
        ScaleStep("xl", 0.75),
    )

    RADIUS_OVERSIZED: Dict[str, Tuple[str, ...]] = {
        "2xl": ("xl", "full"),
        "3xl": ("xl", "full"),
    }

    # =========================================================================
    # COLOR
    # =========================================================================

    COLOR_PREFIXES: Tuple[str, ...] = (
        "bg", "text", "border", "outline", "ring", "fill", "stroke",
        "placeholder", "decoration", "accent", "caret", "divide", "shadow",
        "from", "via", "to",
    )

    COLOR_PALETTES: Tuple[str, ...] = (
        "primary", "neutral", "success", "warning", "error", "info",
        "accent-1", "accent-2", "accent-3", "accent-4", "accent-5",
    )

    SHADES: Tuple[str, ...] = (
        "50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950",
    )

    SEMANTIC_COLOR_FAMILIES: Tuple[str, ...] = (
        "surface", "foreground", "border", "ring", "interactive", "status",
        "disabled", "tooltip", "accent",
    )

    RAW_COLOR_KEYWORDS = frozenset({"white", "black"})

    RAW_COLOR_PREFIXES = frozenset({"bg", "text", "border", "ring"})
    """Only these prefixes flag white/black."""

    COLOR_MAPPINGS: Tuple[ColorMapping, ...] = (
        # Background
        ColorMapping("bg", "neutral", ("50", "100"), "bg-surface-muted"),
        ColorMapping("bg", "neutral", ("200",), "bg-surface-subtle"),
        ColorMapping("bg", "neutral", ("900", "950"), "bg-surface"),
        ColorMapping("bg", "primary", ("500", "600"), "bg-interactive-primary"),
        ColorMapping("bg", "primary", ("50", "100"), "bg-status-info-muted"),
        ColorMapping("bg", "error", ("50",), "bg-status-error-muted"),
        ColorMapping("bg", "success", ("50",), "bg-status-success-muted"),
        ColorMapping("bg", "warning", ("50",), "bg-status-warning-muted"),
        ColorMapping("bg", "white", None, "bg-surface"),
        # Text
        ColorMapping("text", "neutral", ("900",), "text-foreground"),
        ColorMapping("text", "neutral", ("400", "500", "600"), "text-foreground-muted"),
        ColorMapping("text", "neutral", ("50", "100"), "text-foreground-filled"),
        ColorMapping("text", "error", None, "text-status-error-foreground"),
        ColorMapping("text", "success", None, "text-status-success-foreground"),
        ColorMapping("text", "warning", None, "text-status-warning-foreground"),
        ColorMapping("text", "primary", None, "text-status-info-foreground"),
        # Border
        ColorMapping("border", "neutral", ("100", "800"), "border-border-muted"),
        ColorMapping("border", "neutral", ("200", "700"), "border-border"),
        ColorMapping("border", "error", None, "border-status-error-border"),
        ColorMapping("border", "success", None, "border-status-success-border"),
        ColorMapping("border", "warning", None, "border-status-warning-border"),
        ColorMapping("border", "primary", None, "border-status-info-border"),
    )

    # =========================================================================
    # HELPER METHODS
    # =========================================================================

    @classmethod
    def is_allowed_shadow(cls, base: str) -> bool:
        """Check a variant-free shadow class against the allow-list."""
        if base in cls.SHADOW_ALLOWED:
            return True
        return any(base.startswith(family) for family in cls.SHADOW_ALLOWED_FAMILIES)

    @classmethod
    def split_palette_color(cls, value: str) -> Optional[Tuple[str, str]]:
        """
        Split a color value into (palette, shade).

        Args:
            value: Color part of a class (e.g., 'neutral-100', 'accent-2-500')

        Returns:
            Tuple of palette and shade, or None if not a palette color
        """
        palette, _, shade = value.rpartition("-")
        if palette in cls.COLOR_PALETTES and shade in cls.SHADES:
            return palette, shade
        return None

    @classmethod
    def is_semantic_color(cls, value: str) -> bool:
        """Check if a color value names a semantic family (e.g. 'surface-muted')."""
        return any(
            value == family or value.startswith(f"{family}-")
            for family in cls.SEMANTIC_COLOR_FAMILIES
        )

    @classmethod
    def lookup_color(cls, prefix: str, value: str) -> Optional[str]:
        """
        Find the semantic replacement for a raw color class.

        Args:
            prefix: Utility prefix ('bg', 'text', ...)
            value: Color value ('neutral-100', 'white', ...)

        Returns:
            Replacement class without variant prefix, or None
        """
        split = cls.split_palette_color(value)
        palette, shade = split if split else (value, None)

        for mapping in cls.COLOR_MAPPINGS:
            if mapping.prefix != prefix or mapping.palette != palette:
                continue
            if mapping.shades is None or shade in mapping.shades:
                return mapping.replacement
        return None

    @classmethod
    def radius_hint(cls, direction: str) -> str:
        """Generic border radius hint for values with no direct mapping."""
        names = [f"rounded{direction}-{step.name}" for step in cls.RADIUS_SCALE]
        return f"Use semantic border radius: {', '.join(names[:-1])}, or {names[-1]}"
