"""
ClassificationDispatcher - Assign each class to at most one category.

Classifiers are held in an explicit, fixed priority list:
color → spacing → sizing → shadow → borderRadius. The first classifier
that claims a class decides its category, so categories stay mutually
exclusive no matter how the individual patterns overlap.

Usage:
    from token_guard.classifiers import classify

    result = classify("hover:h-10")
    result.category         # Category.SIZING
    result.is_non_semantic  # True
"""

import logging
from typing import Dict, List, Optional, Tuple, Union

from ..analyzers.tokenizer import split_variant
from ..contracts.categories import Category
from ..contracts.options import RuleOptions
from ..contracts.tokens import ClassToken
from ..contracts.validation import ClassificationResult
from .base_classifier import CategoryClassifier, UtilityParts
from .border_radius_classifier import BorderRadiusClassifier
from .color_classifier import ColorClassifier
from .shadow_classifier import ShadowClassifier
from .sizing_classifier import SizingClassifier
from .spacing_classifier import SpacingClassifier


logger = logging.getLogger(__name__)


def as_token(value: Union[ClassToken, str, None]) -> Optional[ClassToken]:
    """Coerce a class string into a ClassToken (None for non-class input)."""
    if isinstance(value, ClassToken):
        return value
    if not isinstance(value, str):
        return None
    raw = value.strip()
    if not raw or any(c.isspace() for c in raw):
        return None
    prefix, base = split_variant(raw)
    if not base:
        return None
    return ClassToken(raw=raw, base=base, variant_prefix=prefix)


class ClassificationDispatcher:
    """
    Ordered category dispatch.

    The order list is fixed at construction and never mutated, so the
    dispatcher can be shared across threads.
    """

    DEFAULT_ORDER: Tuple[Category, ...] = (
        Category.COLOR,
        Category.SPACING,
        Category.SIZING,
        Category.SHADOW,
        Category.BORDER_RADIUS,
    )

    def __init__(self, classifiers: Optional[List[CategoryClassifier]] = None):
        """
        Initialize the dispatcher.

        Args:
            classifiers: Classifiers in priority order (defaults to all five)
        """
        if classifiers is None:
            by_category = {c.category: c for c in _default_classifiers()}
            classifiers = [by_category[category] for category in self.DEFAULT_ORDER]

        self._entries: Tuple[Tuple[Category, CategoryClassifier], ...] = tuple(
            (c.category, c) for c in classifiers
        )
        self._by_category: Dict[Category, CategoryClassifier] = {
            category: classifier for category, classifier in self._entries
        }

    @property
    def order(self) -> List[Category]:
        """Categories in dispatch order."""
        return [category for category, _ in self._entries]

    def classifier_for(self, category: Category) -> Optional[CategoryClassifier]:
        """Get the classifier owning a category."""
        return self._by_category.get(category)

    def match(
        self, value: Union[ClassToken, str, None]
    ) -> Optional[Tuple[Category, CategoryClassifier, UtilityParts]]:
        """
        Find the first classifier that claims a class.

        Returns:
            Tuple of (category, classifier, parts), or None if not governed
        """
        token = as_token(value)
        if token is None:
            return None
        for category, classifier in self._entries:
            parts = classifier.match(token.base)
            if parts is not None:
                return category, classifier, parts
        return None

    def classify(
        self,
        value: Union[ClassToken, str, None],
        options: Optional[RuleOptions] = None,
    ) -> ClassificationResult:
        """
        Classify one class.

        Args:
            value: ClassToken or raw class string (variants allowed)
            options: Rule options in effect

        Returns:
            ClassificationResult; never raises on odd input
        """
        matched = self.match(value)
        if matched is None:
            return ClassificationResult.not_governed()

        category, classifier, parts = matched
        non_semantic = classifier.is_non_semantic_parts(parts, options or RuleOptions())
        logger.debug(f"Classified {value!r} as {category.value} (non_semantic={non_semantic})")
        return ClassificationResult(
            is_governed=True, category=category, is_non_semantic=non_semantic
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ClassificationDispatcher({[c.value for c in self.order]})"


def _default_classifiers() -> List[CategoryClassifier]:
    return [
        ColorClassifier(),
        SpacingClassifier(),
        SizingClassifier(),
        ShadowClassifier(),
        BorderRadiusClassifier(),
    ]


DEFAULT_DISPATCHER = ClassificationDispatcher()


def classify(
    value: Union[ClassToken, str, None], options: Optional[RuleOptions] = None
) -> ClassificationResult:
    """Classify one class with the default dispatcher."""
    return DEFAULT_DISPATCHER.classify(value, options)


def is_non_semantic(
    value: Union[ClassToken, str, None],
    category: Optional[Category] = None,
    options: Optional[RuleOptions] = None,
) -> bool:
    """
    Check if a class is a non-semantic member of a category.

    Args:
        value: Class to check
        category: Restrict to this category (None accepts any)
        options: Rule options in effect

    Returns:
        True if the class should be replaced by a semantic token
    """
    result = classify(value, options)
    if not result.is_violation:
        return False
    return category is None or result.category == category
