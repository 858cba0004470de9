"""Tests for the fluent CSS selector builder."""

import pytest

from selector_mcp.builders.selector_builder import (
    Fragment,
    FragmentKind,
    Selector,
    SelectorBuilder,
    css_selector_builder,
    stringify,
)
from selector_mcp.utils.errors import (
    DuplicateFragmentError,
    FragmentOrderError,
    SelectorError,
    ValidationError,
)


class TestSelectorRendering:
    """Test cases for rendering built selectors."""

    def setup_method(self):
        """Set up test fixtures."""
        self.builder = SelectorBuilder()

    def test_single_fragments(self):
        """Test each fragment kind is rendered with its sigil."""
        assert self.builder.element("div").stringify() == "div"
        assert self.builder.id("main").stringify() == "#main"
        assert self.builder.class_("container").stringify() == ".container"
        assert self.builder.attr('href$=".png"').stringify() == '[href$=".png"]'
        assert self.builder.pseudo_class("focus").stringify() == ":focus"
        assert self.builder.pseudo_element("before").stringify() == "::before"

    def test_id_with_classes(self):
        """Test classes may occur several times after an id."""
        selector = self.builder.id("main").class_("container").class_("editable")

        assert selector.stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self):
        """Test element, attribute and pseudo-class in order."""
        selector = self.builder.element("a").attr('href$=".png"').pseudo_class("focus")

        assert selector.stringify() == 'a[href$=".png"]:focus'

    def test_full_compound(self):
        """Test every kind in the required order."""
        selector = (
            self.builder.element("li")
            .id("first")
            .class_("item")
            .class_("active")
            .attr("data-id")
            .attr('lang="en"')
            .pseudo_class("hover")
            .pseudo_class("not(.hidden)")
            .pseudo_element("after")
        )

        assert (
            selector.stringify()
            == 'li#first.item.active[data-id][lang="en"]:hover:not(.hidden)::after'
        )

    def test_class_then_attr(self):
        """Test an attribute may follow a class."""
        selector = self.builder.class_("c").attr('href$=".png"')

        assert selector.stringify() == '.c[href$=".png"]'

    def test_stringify_is_repeatable(self):
        """Test rendering twice yields the same string."""
        selector = self.builder.element("p").class_("lead")

        assert selector.stringify() == "p.lead"
        assert selector.stringify() == "p.lead"
        assert str(selector) == "p.lead"
        assert stringify(selector) == "p.lead"
        assert self.builder.stringify(selector) == "p.lead"

    def test_empty_selector(self):
        """Test an empty selector renders as an empty string."""
        assert Selector().stringify() == ""

    def test_module_builder_instance(self):
        """Test the shared builder instance."""
        assert isinstance(css_selector_builder, SelectorBuilder)
        assert css_selector_builder.element("nav").stringify() == "nav"


class TestSelectorImmutability:
    """Test that builder calls never modify existing selectors."""

    def test_branching_chains(self):
        """Test two chains sharing a prefix stay independent."""
        base = css_selector_builder.element("div")
        first = base.class_("a")
        second = base.class_("b")

        assert base.stringify() == "div"
        assert first.stringify() == "div.a"
        assert second.stringify() == "div.b"

    def test_independent_builder_calls(self):
        """Test builder calls do not share state."""
        first = css_selector_builder.element("a")
        second = css_selector_builder.element("b")

        assert first.stringify() == "a"
        assert second.stringify() == "b"

    def test_failed_append_leaves_selector_unchanged(self):
        """Test a rejected fragment does not alter the selector."""
        selector = css_selector_builder.element("a").id("x")

        with pytest.raises(DuplicateFragmentError):
            selector.element("b")

        assert selector.stringify() == "a#x"
        assert len(selector.fragments) == 2

    def test_failed_order_check_leaves_selector_unchanged(self):
        """Test an out-of-order fragment does not alter the selector."""
        selector = css_selector_builder.class_("c")

        with pytest.raises(FragmentOrderError):
            selector.id("x")

        assert selector.stringify() == ".c"
        assert len(selector.fragments) == 1

    def test_selector_is_frozen(self):
        """Test selectors cannot be reassigned."""
        selector = css_selector_builder.element("a")

        with pytest.raises(AttributeError):
            selector.fragments = ()  # type: ignore[misc]


class TestUniquenessRules:
    """Test element, id and pseudo-element uniqueness."""

    def test_duplicate_element(self):
        """Test a second element is rejected."""
        with pytest.raises(DuplicateFragmentError) as exc_info:
            css_selector_builder.element("a").id("x").element("b")

        assert "more than one time" in str(exc_info.value)
        assert exc_info.value.kind == "element"

    def test_duplicate_id(self):
        """Test a second id is rejected."""
        with pytest.raises(DuplicateFragmentError) as exc_info:
            css_selector_builder.id("a").id("b")

        assert exc_info.value.kind == "id"
        assert exc_info.value.selector == "#a"

    def test_duplicate_pseudo_element(self):
        """Test a second pseudo-element is rejected."""
        with pytest.raises(DuplicateFragmentError):
            css_selector_builder.pseudo_element("before").pseudo_element("after")

    def test_repeatable_kinds(self):
        """Test classes, attributes and pseudo-classes may repeat."""
        selector = (
            css_selector_builder.class_("a")
            .class_("b")
            .attr("x")
            .attr("y")
            .pseudo_class("hover")
            .pseudo_class("focus")
        )

        assert selector.stringify() == ".a.b[x][y]:hover:focus"

    def test_duplicate_error_is_validation_error(self):
        """Test duplicate errors belong to the validation error family."""
        with pytest.raises(ValidationError):
            css_selector_builder.element("a").element("b")


class TestOrderingRules:
    """Test the element, id, class, attribute, pseudo-class, pseudo-element order."""

    def test_element_after_id(self):
        """Test an element cannot follow an id."""
        with pytest.raises(FragmentOrderError) as exc_info:
            css_selector_builder.id("x").element("a")

        assert "following order" in str(exc_info.value)
        assert exc_info.value.kind == "element"

    def test_class_after_attr(self):
        """Test a class cannot follow an attribute."""
        with pytest.raises(FragmentOrderError):
            css_selector_builder.attr('href$=".png"').class_("c")

    @pytest.mark.parametrize(
        "build",
        [
            lambda b: b.class_("c").id("x"),
            lambda b: b.attr("x").id("x"),
            lambda b: b.pseudo_class("hover").id("x"),
            lambda b: b.pseudo_element("after").id("x"),
            lambda b: b.pseudo_class("hover").attr("x"),
            lambda b: b.pseudo_element("after").pseudo_class("hover"),
            lambda b: b.pseudo_element("after").class_("c"),
            lambda b: b.class_("c").element("div"),
        ],
    )
    def test_out_of_order_fragments(self, build):
        """Test every kind is rejected after a later kind."""
        with pytest.raises(FragmentOrderError):
            build(css_selector_builder)

    def test_order_error_is_selector_error(self):
        """Test ordering errors belong to the selector error family."""
        with pytest.raises(SelectorError):
            css_selector_builder.pseudo_class("hover").class_("c")


class TestCombine:
    """Test combinator composition."""

    def test_adjacent_sibling(self):
        """Test two selectors joined by '+'."""
        selector = css_selector_builder.combine(
            css_selector_builder.element("div"), "+", css_selector_builder.element("span")
        )

        assert selector.stringify() == "div + span"

    def test_nested_combine(self):
        """Test a combined selector used as an operand."""
        b = css_selector_builder
        selector = b.combine(b.combine(b.element("a"), ">", b.element("b")), "~", b.element("c"))

        assert selector.stringify() == "a > b ~ c"

    def test_deeply_nested_combine(self):
        """Test the nested example from the builder documentation."""
        b = css_selector_builder
        selector = b.combine(
            b.element("div").id("main").class_("container").class_("draggable"),
            "+",
            b.combine(
                b.element("table").id("data"),
                "~",
                b.combine(
                    b.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    b.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )

        assert selector.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_combine_keeps_operands(self):
        """Test combining does not modify the operands."""
        left = css_selector_builder.element("ul")
        right = css_selector_builder.element("li")

        css_selector_builder.combine(left, ">", right)

        assert left.stringify() == "ul"
        assert right.stringify() == "li"

    def test_combinator_fragment(self):
        """Test the combinator is stored padded with spaces."""
        selector = css_selector_builder.combine(
            css_selector_builder.element("a"), "~", css_selector_builder.element("b")
        )

        assert selector.fragments[1] == Fragment(FragmentKind.COMBINATOR, " ~ ")

    def test_append_after_combine_uses_last_compound(self):
        """Test rules restart after a combinator."""
        selector = css_selector_builder.combine(
            css_selector_builder.element("a").id("x"), ">", css_selector_builder.element("b")
        ).id("y")

        assert selector.stringify() == "a#x > b#y"

        with pytest.raises(DuplicateFragmentError):
            selector.id("z")


class TestSelectorAnalysis:
    """Test compounds and specificity helpers."""

    def test_compounds(self):
        """Test splitting a combined selector."""
        b = css_selector_builder
        selector = b.combine(b.element("a").class_("x"), ">", b.id("y"))

        compounds = selector.compounds()

        assert len(compounds) == 2
        assert [fragment.value for fragment in compounds[0]] == ["a", ".x"]
        assert [fragment.value for fragment in compounds[1]] == ["#y"]

    @pytest.mark.parametrize(
        "build, expected",
        [
            (lambda b: b.element("div"), (0, 0, 1)),
            (lambda b: b.class_("a"), (0, 1, 0)),
            (lambda b: b.id("x").class_("a").class_("b"), (1, 2, 0)),
            (lambda b: b.element("a").attr("href").pseudo_class("hover"), (0, 2, 1)),
            (lambda b: b.element("p").pseudo_element("first-line"), (0, 0, 2)),
        ],
    )
    def test_specificity(self, build, expected):
        """Test specificity counts per fragment kind."""
        assert build(css_selector_builder).specificity() == expected

    def test_combined_specificity(self):
        """Test specificity sums over compounds."""
        b = css_selector_builder
        selector = b.combine(b.id("nav"), " ", b.element("a").class_("active"))

        assert selector.specificity() == (1, 1, 1)


class TestFromParts:
    """Test building selectors from part mappings."""

    def test_from_parts(self, sample_parts):
        """Test parts with a combinator."""
        selector = Selector.from_parts(sample_parts)

        assert selector.stringify() == "div#main.container:hover > span.label"

    def test_kind_aliases(self):
        """Test camelCase and long kind names."""
        selector = Selector.from_parts(
            [
                {"kind": "element", "value": "a"},
                {"kind": "attribute", "value": "href"},
                {"kind": "pseudoClass", "value": "focus"},
                {"kind": "pseudoElement", "value": "after"},
            ]
        )

        assert selector.stringify() == "a[href]:focus::after"

    def test_unknown_kind(self):
        """Test an unknown kind is rejected."""
        with pytest.raises(SelectorError) as exc_info:
            Selector.from_parts([{"kind": "tag", "value": "a"}])

        assert "Unknown selector part kind 'tag'" in exc_info.value.message

    def test_rules_apply(self, builder):
        """Test parts are checked like fluent calls."""
        with pytest.raises(FragmentOrderError):
            builder.build([{"kind": "class", "value": "c"}, {"kind": "id", "value": "x"}])

    @pytest.mark.parametrize(
        "parts",
        [
            [{"kind": "combinator", "value": ">"}, {"kind": "element", "value": "a"}],
            [{"kind": "element", "value": "a"}, {"kind": "combinator", "value": ">"}],
            [
                {"kind": "element", "value": "a"},
                {"kind": "combinator", "value": ">"},
                {"kind": "combinator", "value": "+"},
                {"kind": "element", "value": "b"},
            ],
        ],
        ids=["leading", "trailing", "consecutive"],
    )
    def test_misplaced_combinator(self, parts):
        """Test combinators must sit between two compounds."""
        with pytest.raises(SelectorError) as exc_info:
            Selector.from_parts(parts)

        assert exc_info.value.kind == "combinator"

    def test_allowed_combinators(self):
        """Test combinator values are checked against an allowed set."""
        parts = [
            {"kind": "element", "value": "a"},
            {"kind": "combinator", "value": "||"},
            {"kind": "element", "value": "b"},
        ]

        with pytest.raises(SelectorError) as exc_info:
            Selector.from_parts(parts, combinators=[" ", "+", "~", ">"])

        assert "Unsupported combinator '||'" in exc_info.value.message
        # Without an allowed set any value is embedded verbatim
        assert Selector.from_parts(parts).stringify() == "a || b"
