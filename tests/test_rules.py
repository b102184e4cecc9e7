"""
Tests for the lint rules, RuleEngine and fix application.
"""

import pytest

from token_guard.analyzers import LineIndex
from token_guard.contracts import (
    Category,
    ClassValue,
    RuleOptions,
    Severity,
    SuggestionCandidate,
)
from token_guard.exceptions import ConfigurationError
from token_guard.rules import (
    NoNonSemanticBorderRadiusRule,
    NoNonSemanticColorsRule,
    NoNonSemanticShadowsRule,
    NoNonSemanticSizingRule,
    NoNonSemanticSpacingRule,
    RuleEngine,
    TokenRule,
    apply_fixes,
    create_default_engine,
)
from token_guard.suggestions import SuggestionResolver


# =============================================================================
# REGISTRY
# =============================================================================

class TestRuleRegistry:
    """Rule registration and the category index."""

    def test_default_engine_rules(self, engine):
        assert [r.name for r in engine.rules] == [
            "no-non-semantic-colors",
            "no-non-semantic-spacing",
            "no-non-semantic-sizing",
            "no-non-semantic-shadows",
            "no-non-semantic-border-radius",
        ]
        assert len(engine) == 5

    def test_rules_sorted_by_priority(self):
        engine = RuleEngine()
        engine.register_all([NoNonSemanticShadowsRule(), NoNonSemanticColorsRule()])

        assert [r.priority for r in engine.rules] == [10, 40]

    def test_category_index(self, engine):
        rules = engine.get_rules_for_category(Category.SHADOW)

        assert rules == [NoNonSemanticShadowsRule()]

    def test_unregister(self, engine):
        src = '<div className="shadow-xl p-4" />'

        assert engine.unregister(NoNonSemanticShadowsRule)
        assert not engine.unregister(NoNonSemanticShadowsRule)
        assert len(engine) == 4
        assert [d.class_name for d in engine.lint("a.tsx", src)] == ["p-4"]

    def test_severity_follows_category(self):
        assert NoNonSemanticColorsRule().severity == Severity.ERROR
        assert NoNonSemanticSpacingRule().severity == Severity.WARNING
        assert NoNonSemanticBorderRadiusRule().category == Category.BORDER_RADIUS


# =============================================================================
# OPTIONS
# =============================================================================

class TestRuleOptions:
    """Options are validated when the engine is built."""

    @pytest.mark.parametrize(
        "options,field",
        [
            ({"exceptions": [""]}, "exceptions"),
            ({"exceptions": ["  "]}, "exceptions"),
            ({"exceptions": "src/styles/"}, "exceptions"),
            ({"allowed_palettes": ["rainbow"]}, "allowed_palettes"),
            ({"exception": ["src/"]}, "exception"),
        ],
    )
    def test_invalid_options_raise(self, options, field):
        with pytest.raises(ConfigurationError) as exc_info:
            create_default_engine(options)

        assert exc_info.value.field == field

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            RuleOptions.from_dict({"exceptions": [""]})

    def test_valid_dict_options(self):
        engine = create_default_engine({"exceptions": ["src/styles/"], "allowed_palettes": ["neutral"]})

        assert engine.options.exceptions == ["src/styles/"]
        assert engine.options.allowed_palettes == ["neutral"]

    def test_empty_options(self):
        assert RuleOptions.from_dict(None) == RuleOptions()


# =============================================================================
# LINTING
# =============================================================================

class TestLint:
    """End-to-end lint over source text."""

    def test_messages(self, engine):
        src = '<div className="h-8 text-black h-9" />'
        messages = [d.message for d in engine.lint("a.tsx", src)]

        assert messages == [
            'Use semantic size token instead of "h-8". '
            'Consider using "h-size-sm" or another semantic token.',
            'Use semantic color token instead of "text-black". '
            'Consider using "a semantic color token" or another semantic token.',
            'Use semantic size token instead of "h-9". '
            'Consider using "nearest: h-size-sm (2rem) or h-size-md (2.5rem)" '
            "or another semantic token.",
        ]

    @pytest.mark.parametrize(
        "class_name,expected",
        [
            (
                "shadow-xl",
                'Use semantic shadow token instead of "shadow-xl". '
                'Consider using "shadow-lg or shadow-highlight" or another semantic token.',
            ),
            (
                "shadow-none",
                'Use semantic shadow token instead of "shadow-none". '
                'Consider using "shadow-sm" or another semantic token.',
            ),
            (
                "rounded-2xl",
                'Use semantic border radius instead of "rounded-2xl". '
                'Consider using "rounded-xl" or "rounded-full".',
            ),
            (
                "rounded-[3px]",
                'Use semantic border radius instead of "rounded-[3px]". '
                "Use semantic border radius: rounded-sm, rounded-md, rounded-lg, or rounded-xl.",
            ),
        ],
    )
    def test_shadow_and_radius_messages(self, engine, class_name, expected):
        """Should list every shadow candidate and phrase radius advice as a sentence."""
        diagnostic = engine.lint("a.tsx", f'<div className="{class_name}" />')[0]

        assert diagnostic.message == expected

    def test_source_order_across_categories(self, engine):
        src = '<div className="rounded-2xl shadow-xl p-4 bg-neutral-100 h-8" />'
        rules = [d.rule for d in engine.lint("a.tsx", src)]

        assert rules == [
            "no-non-semantic-border-radius",
            "no-non-semantic-shadows",
            "no-non-semantic-spacing",
            "no-non-semantic-colors",
            "no-non-semantic-sizing",
        ]

    def test_color_is_error(self, engine):
        diagnostic = engine.lint("a.tsx", '<p className="text-neutral-900" />')[0]

        assert diagnostic.severity == Severity.ERROR
        assert diagnostic.category == Category.COLOR

    def test_semantic_classes_pass(self, engine):
        src = '<div className="p-base h-size-md bg-surface shadow-md rounded-lg flex" />'

        assert engine.lint("a.tsx", src) == []

    def test_exceptions_short_circuit(self):
        engine = create_default_engine({"exceptions": ["src/styles/"]})
        src = '<div className="h-8" />'

        assert engine.is_excepted("packages/ui/src/styles/tokens.tsx")
        assert engine.lint("packages/ui/src/styles/tokens.tsx", src) == []
        assert len(engine.lint("packages/ui/src/Button.tsx", src)) == 1

    @pytest.mark.parametrize("src", [None, ""])
    def test_empty_source(self, engine, src):
        assert engine.lint("a.tsx", src) == []

    def test_positions(self, engine):
        src = (
            "export function Card() {\n"
            "  return (\n"
            '    <div className="flex p-4">\n'
            "  )\n"
            "}\n"
        )
        diagnostic = engine.lint("Card.tsx", src)[0]

        assert (diagnostic.line, diagnostic.column) == (3, 26)
        assert diagnostic.start == src.index("p-4")
        assert diagnostic.filename == "Card.tsx"

    def test_variant_preserved(self, engine):
        diagnostic = engine.lint("a.tsx", '<div className="dark:hover:bg-neutral-100" />')[0]

        assert diagnostic.suggestion == "dark:hover:bg-surface-muted"

    def test_resolver_threshold(self):
        engine = create_default_engine(resolver=SuggestionResolver(max_distance=0.25))
        diagnostic = engine.lint("a.tsx", '<div className="h-9" />')[0]

        assert [c.replacement for c in diagnostic.candidates] == ["h-size-sm", "h-size-md"]

    def test_allowed_palettes(self):
        engine = create_default_engine({"allowed_palettes": ["neutral"]})
        src = '<div className="bg-neutral-100 bg-primary-500" />'

        assert [d.class_name for d in engine.lint("a.tsx", src)] == ["bg-primary-500"]

    def test_html_file(self, engine):
        src = '<div class="rounded-2xl">x</div>'
        diagnostics = engine.lint("index.html", src)

        assert len(diagnostics) == 1
        assert diagnostics[0].start == src.index("rounded-2xl")
        assert engine.fix("index.html", src).source == '<div class="rounded-xl">x</div>'

    def test_html_position_after_quoted_gt(self, engine):
        src = '<p>a</p>\n<p>b</p>\n<div title="a > b" class="h-8">x</div>\n'
        diagnostic = engine.lint("page.html", src)[0]
        third_line = src.splitlines()[2]

        assert (diagnostic.line, diagnostic.column) == (3, third_line.index("h-8") + 1)
        assert diagnostic.has_fix

    def test_unlocated_value_reported_at_tag(self, engine):
        """Should keep the tag position when the class text has no source span."""
        src = "line one\nline two\n  <div>x</div>\n"
        value = ClassValue(
            text="p-4 h-8",
            start=src.index("<div"),
            line=3,
            column=3,
            fixable=False,
            located=False,
            origin="class",
        )
        diagnostics = engine.lint_values([value], "page.html", LineIndex(src))

        assert [(d.class_name, d.line, d.column) for d in diagnostics] == [
            ("p-4", 3, 3),
            ("h-8", 3, 3),
        ]
        assert all(d.start == value.start and not d.has_fix for d in diagnostics)

    def test_diagnostic_to_dict(self, engine):
        data = engine.lint("a.tsx", '<div className="shadow-2xl" />')[0].to_dict()

        assert data["rule"] == "no-non-semantic-shadows"
        assert data["category"] == "shadow"
        assert data["severity"] == "warning"
        assert data["class_name"] == "shadow-2xl"
        assert data["candidates"] == [{"replacement": "shadow-lg", "rank": 0}]
        assert data["hint"] is None

    def test_to_violation(self, engine):
        violation = engine.lint("a.tsx", '<div className="h-9" />')[0].to_violation()

        assert violation.class_name == "h-9"
        assert violation.suggestion is None
        assert violation.hint == "nearest: h-size-sm (2rem) or h-size-md (2.5rem)"


# =============================================================================
# FIXES
# =============================================================================

class TestFixes:
    """Applying candidates back to source text."""

    def test_shadow_none_candidates(self, engine):
        """Should remove the class or swap it, depending on the candidate."""
        src = '<div className="shadow-none" />'
        diagnostic = engine.lint("a.tsx", src)[0]

        assert diagnostic.apply(src) == '<div className="" />'
        assert diagnostic.apply(src, 1) == '<div className="shadow-sm" />'
        assert diagnostic.apply(src, diagnostic.candidates[1]) == '<div className="shadow-sm" />'

    def test_fix_labels(self):
        assert TokenRule.fix_message(SuggestionCandidate("remove class", 0)) == "Remove class"
        assert TokenRule.fix_message(SuggestionCandidate("shadow-sm", 1)) == 'Replace with "shadow-sm"'

    def test_independent_fixes_in_one_call(self, engine):
        src = 'const c = cn("h-8", "w-10");'
        diagnostics = engine.lint("a.tsx", src)

        assert diagnostics[0].apply(src) == 'const c = cn("h-size-sm", "w-10");'
        assert diagnostics[1].apply(src) == 'const c = cn("h-8", "w-size-md");'
        assert apply_fixes(src, diagnostics).source == 'const c = cn("h-size-sm", "w-size-md");'

    def test_duplicates_in_one_string(self, engine):
        src = '<div className="h-8 p-4 h-8" />'
        diagnostics = engine.lint("a.tsx", src)

        assert [d.start for d in diagnostics] == [16, 20, 24]
        assert engine.fix("a.tsx", src).source == '<div className="h-size-sm p-base h-size-sm" />'

    def test_hint_only_not_fixable(self, engine):
        src = '<div className="h-9" />'
        diagnostic = engine.lint("a.tsx", src)[0]

        assert not diagnostic.has_fix
        with pytest.raises(ValueError):
            diagnostic.apply(src)

        result = engine.fix("a.tsx", src)
        assert result.source == src
        assert not result.changed
        assert result.skipped == [diagnostic]

    def test_multi_fragment_template_not_fixable(self, engine):
        src = "<div className={`h-8 ${extra}`} />"
        diagnostic = engine.lint("a.tsx", src)[0]

        assert diagnostic.class_name == "h-8"
        assert diagnostic.candidates
        assert not diagnostic.has_fix
        assert engine.fix("a.tsx", src).source == src

    def test_single_fragment_template_fixable(self, engine):
        src = "<div className={`p-4`} />"

        assert engine.fix("a.tsx", src).source == "<div className={`p-base`} />"

    def test_apply_to_wrong_source(self, engine):
        diagnostic = engine.lint("a.tsx", '<div className="h-8" />')[0]

        with pytest.raises(ValueError):
            diagnostic.apply('<div className="xx-8" />')

    def test_apply_missing_candidate(self, engine):
        src = '<div className="h-8" />'
        diagnostic = engine.lint("a.tsx", src)[0]

        with pytest.raises(ValueError):
            diagnostic.apply(src, 3)

    def test_fix_result_describe(self, engine):
        result = engine.fix("a.tsx", '<div className="h-8 h-9" />')

        assert result.describe() == "1 fix(es) applied, 1 skipped"


# =============================================================================
# STANDALONE RULES
# =============================================================================

class TestStandaloneRule:
    """A rule run on its own over one class string."""

    def test_check_string(self):
        diagnostics = NoNonSemanticSpacingRule().check("p-4 h-8 m-2")

        assert [d.class_name for d in diagnostics] == ["p-4", "m-2"]
        assert [d.start for d in diagnostics] == [0, 8]
        assert diagnostics[1].column == 9

    def test_check_class_value(self):
        value = ClassValue(text="shadow-xl", start=40, line=2, column=10, fixable=False)
        diagnostic = NoNonSemanticShadowsRule().check(value, filename="a.tsx")[0]

        assert diagnostic.start == 40
        assert (diagnostic.line, diagnostic.column) == (2, 10)
        assert not diagnostic.has_fix

    def test_check_none(self):
        assert NoNonSemanticSizingRule().check(None) == []

    def test_rule_equality(self):
        assert NoNonSemanticSizingRule() == NoNonSemanticSizingRule()
        assert NoNonSemanticSizingRule() != NoNonSemanticSpacingRule()
        assert "no-non-semantic-sizing" in repr(NoNonSemanticSizingRule())
