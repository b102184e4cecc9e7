"""
SuggestionResolver - Ranked semantic replacements for non-semantic classes.

Two strategies, picked by category:
- Scale categories (sizing, spacing): nearest-distance search over the
  semantic scale. Steps within `max_distance` rem become candidates,
  nearest first, ties to the lower step, then declaration order.
  Anything farther only produces a "nearest: ..." hint.
- Lookup categories (color, shadow, border radius): candidates come
  straight from the closed tables in their authored order.

Candidate order is assignment order; nothing downstream re-sorts it.

Usage:
    from token_guard.suggestions import SuggestionResolver

    resolver = SuggestionResolver()
    resolver.get_suggestion(Category.SHADOW, "shadow-xl")
    # [SuggestionCandidate("shadow-lg", 0), SuggestionCandidate("shadow-highlight", 1)]
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple, Union

from ..analyzers.numeric import parse_scale_value, rank_by_distance, to_rem
from ..classifiers.base_classifier import UtilityParts
from ..classifiers.border_radius_classifier import BorderRadiusClassifier
from ..classifiers.dispatcher import DEFAULT_DISPATCHER, ClassificationDispatcher, as_token
from ..contracts.categories import Category
from ..contracts.options import RuleOptions
from ..contracts.suggestions import REMOVE_CLASS, Resolution, SuggestionCandidate, rank_candidates
from ..contracts.tokens import ClassToken
from ..contracts.validation import ClassificationResult, Violation
from ..semantic_tokens import ScaleStep, SemanticTokens


logger = logging.getLogger(__name__)


class SuggestionResolver:
    """
    Resolves non-semantic classes to ranked semantic candidates.

    Stateless apart from its immutable threshold and dispatcher, so one
    instance can serve every file and every worker thread.
    """

    HINT_COUNT = 2
    """Nearest steps quoted in a hint."""

    def __init__(
        self,
        max_distance: float = 0.0,
        dispatcher: Optional[ClassificationDispatcher] = None,
    ):
        """
        Initialize the resolver.

        Args:
            max_distance: Largest rem distance still treated as a confident match
            dispatcher: Category dispatcher (defaults to the shared one)
        """
        self._max_distance = max(0.0, max_distance)
        self._dispatcher = dispatcher or DEFAULT_DISPATCHER
        self._strategies: Dict[Category, Callable[[ClassToken, UtilityParts], Resolution]] = {
            Category.SIZING: self._resolve_sizing,
            Category.SPACING: self._resolve_spacing,
            Category.COLOR: self._resolve_color,
            Category.SHADOW: self._resolve_shadow,
            Category.BORDER_RADIUS: self._resolve_border_radius,
        }

    @property
    def max_distance(self) -> float:
        return self._max_distance

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    def get_suggestion(
        self,
        category: Category,
        class_name: Union[ClassToken, str, None],
        options: Optional[RuleOptions] = None,
    ) -> List[SuggestionCandidate]:
        """
        Get ranked candidates for a class in a category.

        Args:
            category: Category to resolve in
            class_name: Class (variants allowed)
            options: Rule options in effect

        Returns:
            Candidates in rank order; empty when there is no confident match
        """
        return self.resolve(category, class_name, options).candidates

    def resolve(
        self,
        category: Category,
        class_name: Union[ClassToken, str, None],
        options: Optional[RuleOptions] = None,
    ) -> Resolution:
        """
        Resolve a class to candidates plus a hint.

        Classes that are not non-semantic members of `category` resolve
        to an empty Resolution.

        Args:
            category: Category to resolve in
            class_name: Class (variants allowed)
            options: Rule options in effect

        Returns:
            Resolution; never raises on odd input
        """
        token = as_token(class_name)
        classifier = self._dispatcher.classifier_for(category)
        if token is None or classifier is None:
            return Resolution()

        parts = classifier.match(token.base)
        if parts is None or not classifier.is_non_semantic_parts(parts, options or RuleOptions()):
            return Resolution()

        resolution = self._strategies[category](token, parts)
        logger.debug(
            f"Resolved {token.raw} ({category.value}) → "
            f"{resolution.replacements() or resolution.hint}"
        )
        return resolution

    def classify_and_resolve(
        self,
        class_name: Union[ClassToken, str, None],
        options: Optional[RuleOptions] = None,
    ) -> Tuple[ClassificationResult, Resolution]:
        """Classify a class with the dispatcher, then resolve it in its category."""
        result = self._dispatcher.classify(class_name, options)
        if not result.is_violation:
            return result, Resolution()
        return result, self.resolve(result.category, class_name, options)

    def violation_for(
        self,
        class_name: Union[ClassToken, str, None],
        options: Optional[RuleOptions] = None,
    ) -> Optional[Violation]:
        """
        Build the Violation for a class, or None if it is fine.

        Args:
            class_name: Class to evaluate
            options: Rule options in effect

        Returns:
            Violation with all candidates, or None
        """
        result, resolution = self.classify_and_resolve(class_name, options)
        if not result.is_violation:
            return None
        token = as_token(class_name)
        return Violation(
            class_name=token.raw,
            category=result.category,
            suggestion=resolution.first.replacement if resolution.first else None,
            all_candidates=list(resolution.candidates),
            hint=resolution.hint,
        )

    # =========================================================================
    # SCALE STRATEGIES
    # =========================================================================

    def _resolve_sizing(self, token: ClassToken, parts: UtilityParts) -> Resolution:
        return self._resolve_scale(token, parts, SemanticTokens.SIZE_SCALE)

    def _resolve_spacing(self, token: ClassToken, parts: UtilityParts) -> Resolution:
        return self._resolve_scale(token, parts, SemanticTokens.SPACING_SCALE)

    def _resolve_scale(
        self,
        token: ClassToken,
        parts: UtilityParts,
        scale: Tuple[ScaleStep, ...],
    ) -> Resolution:
        """Nearest-distance search over a semantic scale."""
        number = parse_scale_value(parts.value)
        if number is None:
            return Resolution()

        ranked = rank_by_distance(scale, to_rem(number))
        confident = [step for step, distance in ranked if distance <= self._max_distance]
        if confident:
            return Resolution(
                candidates=rank_candidates(
                    [token.with_base(parts.rebuild(step.name)) for step in confident]
                )
            )

        nearest = [
            (step, distance)
            for step, distance in ranked[: self.HINT_COUNT]
            if distance > 0
        ]
        if not nearest:
            return Resolution()
        hints = " or ".join(
            f"{token.with_base(parts.rebuild(step.name))} ({step.describe()})"
            for step, _ in nearest
        )
        return Resolution(hint=f"nearest: {hints}")

    # =========================================================================
    # LOOKUP STRATEGIES
    # =========================================================================

    def _resolve_color(self, token: ClassToken, parts: UtilityParts) -> Resolution:
        replacement = SemanticTokens.lookup_color(parts.prefix, parts.value)
        if replacement is None:
            return Resolution()
        # Keep an opacity modifier such as '/50'
        opacity = token.base[len(parts.prefix) + 1 + len(parts.value):]
        return Resolution(candidates=rank_candidates([token.with_base(replacement + opacity)]))

    def _resolve_shadow(self, token: ClassToken, parts: UtilityParts) -> Resolution:
        replacements = SemanticTokens.SHADOW_REPLACEMENTS.get(parts.rebuild(parts.value), ())
        return Resolution(
            candidates=rank_candidates(
                [r if r == REMOVE_CLASS else token.with_base(r) for r in replacements]
            )
        )

    def _resolve_border_radius(self, token: ClassToken, parts: UtilityParts) -> Resolution:
        direction = BorderRadiusClassifier.direction(parts)
        oversized = SemanticTokens.RADIUS_OVERSIZED.get(parts.value)
        if oversized is None:
            return Resolution(hint=SemanticTokens.radius_hint(direction))
        return Resolution(
            candidates=rank_candidates(
                [token.with_base(f"rounded{direction}-{value}") for value in oversized]
            )
        )


DEFAULT_RESOLVER = SuggestionResolver()


def get_suggestion(
    category: Category,
    class_name: Union[ClassToken, str, None],
    options: Optional[RuleOptions] = None,
) -> List[SuggestionCandidate]:
    """Get ranked candidates with the default (exact-match only) resolver."""
    return DEFAULT_RESOLVER.get_suggestion(category, class_name, options)
