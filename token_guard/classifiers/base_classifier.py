"""
CategoryClassifier - Abstract base class for per-category classifiers.

Each classifier owns one governed category. It claims the classes it
recognizes (`match`) and decides whether a claimed class uses a raw
value instead of a semantic token (`is_non_semantic`).

Usage:
    class MyClassifier(CategoryClassifier):
        @property
        def category(self) -> Category:
            return Category.SPACING

        def match(self, base: str) -> Optional[UtilityParts]:
            ...

        def is_non_semantic_parts(self, parts, options) -> bool:
            ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..contracts.categories import Category
from ..contracts.options import RuleOptions
from ..contracts.tokens import ClassToken


@dataclass(frozen=True)
class UtilityParts:
    """A class split into its utility prefix and value."""

    prefix: str
    """Utility prefix, e.g. 'gap-x' or 'rounded-tl'."""

    value: str
    """Value after the prefix, e.g. '4', 'neutral-100', '[3px]'."""

    negative: bool = False
    """Leading '-' (negative margins)."""

    def rebuild(self, value: str) -> str:
        """Build a class with the same prefix and sign but another value."""
        sign = "-" if self.negative else ""
        return f"{sign}{self.prefix}-{value}" if value else f"{sign}{self.prefix}"


class CategoryClassifier(ABC):
    """
    Abstract base class for category classifiers.

    Subclasses must implement:
    - category: The Category this classifier owns
    - match(): Split a class it recognizes into UtilityParts
    - is_non_semantic_parts(): Decide non-semantic status of a match

    Classifiers are stateless; options are passed into every call.
    """

    @property
    @abstractmethod
    def category(self) -> Category:
        """Category this classifier governs."""
        pass

    @property
    def name(self) -> str:
        """Classifier name for logging and debugging."""
        return self.__class__.__name__

    @abstractmethod
    def match(self, base: str) -> Optional[UtilityParts]:
        """
        Split a variant-free class into parts if this category owns it.

        Args:
            base: Class without variant prefix

        Returns:
            UtilityParts, or None if the class is not in this category
        """
        pass

    @abstractmethod
    def is_non_semantic_parts(
        self, parts: UtilityParts, options: RuleOptions
    ) -> bool:
        """
        Decide if a matched class uses a raw value.

        Args:
            parts: Result of match()
            options: Rule options in effect

        Returns:
            True if the class should be replaced by a semantic token
        """
        pass

    def claims(self, token: ClassToken) -> bool:
        """Check if this classifier owns the token."""
        return self.match(token.base) is not None

    def is_non_semantic(
        self, token: ClassToken, options: Optional[RuleOptions] = None
    ) -> bool:
        """
        Check if a token belongs to this category and uses a raw value.

        Args:
            token: Token to evaluate
            options: Rule options (defaults apply when None)

        Returns:
            True for a non-semantic class of this category
        """
        parts = self.match(token.base)
        if parts is None:
            return False
        return self.is_non_semantic_parts(parts, options or RuleOptions())

    def __repr__(self) -> str:
        return f"{self.name}(category={self.category.value})"

    def __eq__(self, other: object) -> bool:
        """Equality check based on class type."""
        if not isinstance(other, CategoryClassifier):
            return False
        return self.__class__ == other.__class__

    def __hash__(self) -> int:
        return hash(self.__class__.__name__)
