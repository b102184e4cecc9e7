"""
Tests for SuggestionResolver: scale search, lookup tables and hints.
"""

import pytest

from token_guard.contracts import REMOVE_CLASS, Category, RuleOptions
from token_guard.suggestions import SuggestionResolver, get_suggestion


def replacements(candidates):
    return [c.replacement for c in candidates]


class TestScaleSuggestions:
    """Nearest-distance search over the size and spacing scales."""

    @pytest.mark.parametrize(
        "class_name,expected",
        [
            ("h-6", "h-size-xs"),
            ("h-8", "h-size-sm"),
            ("w-10", "w-size-md"),
            ("h-12", "h-size-lg"),
            ("h-14", "h-size-xl"),
            ("min-h-6", "min-h-size-xs"),
            ("hover:h-10", "hover:h-size-md"),
        ],
    )
    def test_exact_sizing(self, class_name, expected):
        assert replacements(get_suggestion(Category.SIZING, class_name)) == [expected]

    @pytest.mark.parametrize(
        "class_name,expected",
        [
            ("p-4", "p-base"),
            ("p-0.5", "p-2xs"),
            ("px-1", "px-xs"),
            ("-m-2", "-m-sm"),
            ("gap-x-3", "gap-x-md"),
            ("space-y-8", "space-y-lg"),
            ("md:mt-16", "md:mt-xl"),
            ("p-32", "p-2xl"),
        ],
    )
    def test_exact_spacing(self, class_name, expected):
        assert replacements(get_suggestion(Category.SPACING, class_name)) == [expected]

    @pytest.mark.parametrize(
        "class_name,hint",
        [
            ("h-9", "nearest: h-size-sm (2rem) or h-size-md (2.5rem)"),
            ("h-16", "nearest: h-size-xl (3.5rem) or h-size-lg (3rem)"),
            ("h-4", "nearest: h-size-xs (1.5rem) or h-size-sm (2rem)"),
        ],
    )
    def test_sizing_hint_without_candidates(self, resolver, class_name, hint):
        """Should give no candidates and quote the two nearest steps."""
        resolution = resolver.resolve(Category.SIZING, class_name)

        assert resolution.candidates == []
        assert resolution.hint == hint

    def test_spacing_hint(self, resolver):
        resolution = resolver.resolve(Category.SPACING, "p-5")

        assert resolution.candidates == []
        assert resolution.hint == "nearest: p-base (1rem) or p-md (0.75rem)"

    def test_hint_keeps_variant(self, resolver):
        resolution = resolver.resolve(Category.SIZING, "hover:h-9")

        assert resolution.hint == "nearest: hover:h-size-sm (2rem) or hover:h-size-md (2.5rem)"

    def test_threshold_widens_candidates(self):
        """Should turn steps within max_distance into ranked candidates."""
        resolver = SuggestionResolver(max_distance=0.25)

        assert replacements(resolver.get_suggestion(Category.SIZING, "h-9")) == [
            "h-size-sm",
            "h-size-md",
        ]
        assert replacements(resolver.get_suggestion(Category.SPACING, "p-5")) == ["p-base"]

    def test_candidate_ranks(self):
        candidates = SuggestionResolver(max_distance=0.25).get_suggestion(Category.SIZING, "h-9")

        assert [c.rank for c in candidates] == [0, 1]

    def test_negative_threshold_clamped(self):
        assert SuggestionResolver(max_distance=-1).max_distance == 0.0


class TestShadowSuggestions:
    """Shadow lookup table."""

    @pytest.mark.parametrize(
        "class_name,expected",
        [
            ("shadow", ["shadow-sm", "shadow-interactive"]),
            ("shadow-none", [REMOVE_CLASS, "shadow-sm"]),
            ("shadow-inner", ["shadow-inset-sm", "shadow-inset-md"]),
            ("shadow-xl", ["shadow-lg", "shadow-highlight"]),
            ("shadow-2xl", ["shadow-lg"]),
        ],
    )
    def test_table(self, class_name, expected):
        assert replacements(get_suggestion(Category.SHADOW, class_name)) == expected

    def test_variant_reapplied_except_removal(self):
        """Should prefix replacements but keep the removal sentinel bare."""
        candidates = get_suggestion(Category.SHADOW, "hover:shadow-none")

        assert replacements(candidates) == [REMOVE_CLASS, "hover:shadow-sm"]
        assert candidates[0].is_removal
        assert candidates[0].applied_text == ""

    def test_allowed_shadow_has_no_candidates(self):
        assert get_suggestion(Category.SHADOW, "shadow-lg") == []


class TestBorderRadiusSuggestions:
    """Oversized radii map to xl/full, everything else gets a hint."""

    def test_oversized(self):
        assert replacements(get_suggestion(Category.BORDER_RADIUS, "rounded-2xl")) == [
            "rounded-xl",
            "rounded-full",
        ]

    def test_oversized_with_direction(self):
        assert replacements(get_suggestion(Category.BORDER_RADIUS, "rounded-t-3xl")) == [
            "rounded-t-xl",
            "rounded-t-full",
        ]

    def test_arbitrary_value_hint(self, resolver):
        resolution = resolver.resolve(Category.BORDER_RADIUS, "rounded-[3px]")

        assert resolution.candidates == []
        assert resolution.hint == (
            "Use semantic border radius: rounded-sm, rounded-md, rounded-lg, or rounded-xl"
        )

    def test_directional_hint(self, resolver):
        resolution = resolver.resolve(Category.BORDER_RADIUS, "rounded-tl-[4px]")

        assert resolution.hint == (
            "Use semantic border radius: rounded-tl-sm, rounded-tl-md, rounded-tl-lg, or rounded-tl-xl"
        )


class TestColorSuggestions:
    """Color lookup table, first matching row wins."""

    @pytest.mark.parametrize(
        "class_name,expected",
        [
            ("bg-neutral-50", "bg-surface-muted"),
            ("bg-neutral-100", "bg-surface-muted"),
            ("bg-neutral-200", "bg-surface-subtle"),
            ("bg-neutral-900", "bg-surface"),
            ("bg-primary-500", "bg-interactive-primary"),
            ("bg-primary-100", "bg-status-info-muted"),
            ("bg-error-50", "bg-status-error-muted"),
            ("bg-white", "bg-surface"),
            ("text-neutral-900", "text-foreground"),
            ("text-neutral-500", "text-foreground-muted"),
            ("text-neutral-50", "text-foreground-filled"),
            ("text-error-600", "text-status-error-foreground"),
            ("text-primary-700", "text-status-info-foreground"),
            ("border-neutral-200", "border-border"),
            ("border-neutral-800", "border-border-muted"),
            ("border-warning-300", "border-status-warning-border"),
            ("hover:bg-primary-600", "hover:bg-interactive-primary"),
            ("bg-neutral-100/50", "bg-surface-muted/50"),
        ],
    )
    def test_table(self, class_name, expected):
        assert replacements(get_suggestion(Category.COLOR, class_name)) == [expected]

    @pytest.mark.parametrize(
        "class_name",
        ["text-black", "bg-[#123456]", "bg-neutral-500", "bg-error-100", "ring-primary-500"],
    )
    def test_no_mapping(self, class_name):
        """Should still be non-semantic but without candidates."""
        assert get_suggestion(Category.COLOR, class_name) == []

    def test_allowed_palette_resolves_to_nothing(self):
        options = RuleOptions(allowed_palettes=["neutral"])

        assert get_suggestion(Category.COLOR, "bg-neutral-100", options) == []


class TestResolverEdges:
    """Inputs outside the category or outside the governed set."""

    @pytest.mark.parametrize(
        "category,class_name",
        [
            (Category.SPACING, "h-8"),
            (Category.SIZING, "p-4"),
            (Category.COLOR, "shadow-xl"),
            (Category.SHADOW, "flex"),
            (Category.SIZING, None),
            (Category.SIZING, ""),
            (Category.SIZING, "h-size-md"),
        ],
    )
    def test_empty_result(self, category, class_name):
        assert get_suggestion(category, class_name) == []

    def test_classify_and_resolve(self, resolver):
        result, resolution = resolver.classify_and_resolve("hover:h-10")

        assert result.category == Category.SIZING
        assert resolution.replacements() == ["hover:h-size-md"]

    def test_classify_and_resolve_semantic(self, resolver):
        result, resolution = resolver.classify_and_resolve("p-base")

        assert result.category == Category.SPACING
        assert not result.is_non_semantic
        assert not resolution.has_candidates

    def test_violation_for(self, resolver):
        violation = resolver.violation_for("shadow-xl")

        assert violation.class_name == "shadow-xl"
        assert violation.category == Category.SHADOW
        assert violation.suggestion == "shadow-lg"
        assert replacements(violation.all_candidates) == ["shadow-lg", "shadow-highlight"]
        assert violation.has_fix

    def test_violation_for_hint_only(self, resolver):
        violation = resolver.violation_for("h-9")

        assert violation.suggestion is None
        assert violation.hint.startswith("nearest: ")
        assert not violation.has_fix

    def test_violation_for_clean_class(self, resolver):
        assert resolver.violation_for("shadow-md") is None
        assert resolver.violation_for("flex") is None
