"""
Categories - The five governed utility-class families.

Each category maps to one classifier, one lint rule and one severity:
- SIZING → h-*, w-*, min-*/max-* element dimensions
- SPACING → padding, margin, gap, space-between
- COLOR → palette shades, white/black, hex arbitrary values
- SHADOW → box-shadow elevation
- BORDER_RADIUS → rounded-*
"""

from enum import Enum
from typing import Optional


class Severity(Enum):
    """Diagnostic severity, mirrored in validator reports."""

    ERROR = "error"
    WARNING = "warning"

    @classmethod
    def from_string(cls, value: str) -> "Severity":
        """Convert string to Severity, defaulting to WARNING."""
        try:
            return cls(value.lower())
        except ValueError:
            return cls.WARNING


class Category(Enum):
    """Governed category of a utility class."""

    SIZING = "sizing"
    """Element dimensions on the size-* scale."""

    SPACING = "spacing"
    """Padding, margin and gaps on the spacing scale."""

    COLOR = "color"
    """Raw palette colors that should use semantic color roles."""

    SHADOW = "shadow"
    """Elevation shadows outside the semantic shadow set."""

    BORDER_RADIUS = "borderRadius"
    """Corner radius outside the semantic radius set."""

    @classmethod
    def from_string(cls, value: str) -> Optional["Category"]:
        """Convert string (value or name) to Category, or None if unknown."""
        for category in cls:
            if value in (category.value, category.name, category.name.lower()):
                return category
        return None

    @property
    def noun(self) -> str:
        """Noun used in diagnostic messages ('semantic {noun} token')."""
        return {
            Category.SIZING: "size",
            Category.SPACING: "spacing",
            Category.COLOR: "color",
            Category.SHADOW: "shadow",
            Category.BORDER_RADIUS: "border radius",
        }[self]

    @property
    def severity(self) -> Severity:
        """Default severity for violations in this category."""
        if self == Category.COLOR:
            return Severity.ERROR
        return Severity.WARNING
