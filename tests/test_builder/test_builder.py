"""Tests for the selector builder facade."""

import pytest

import selectorkit
from selectorkit import (
    CombinedSelector,
    CompoundSelector,
    DuplicateError,
    OrderError,
    SelectorBuilder,
    css_selector_builder as builder,
)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


class TestEntryPoints:
    def test_each_entry_point_starts_compound(self):
        assert builder.element("div").stringify() == "div"
        assert builder.id("main").stringify() == "#main"
        assert builder.class_("wide").stringify() == ".wide"
        assert builder.attr("disabled").stringify() == "[disabled]"
        assert builder.pseudo_class("hover").stringify() == ":hover"
        assert builder.pseudo_element("after").stringify() == "::after"

    def test_entry_points_return_compound(self):
        assert isinstance(builder.element("a"), CompoundSelector)

    def test_module_level_functions(self):
        sel = selectorkit.element("a").class_("x")
        assert sel.stringify() == "a.x"
        assert selectorkit.id_("top").stringify() == "#top"
        assert selectorkit.class_("c").stringify() == ".c"
        assert selectorkit.attr("href").stringify() == "[href]"
        assert selectorkit.pseudo_class("focus").stringify() == ":focus"
        assert selectorkit.pseudo_element("marker").stringify() == "::marker"

    def test_separate_builders_are_equivalent(self):
        assert SelectorBuilder().element("p").stringify() == builder.element("p").stringify()


# ---------------------------------------------------------------------------
# Worked examples
# ---------------------------------------------------------------------------


class TestExamples:
    def test_element_id_classes(self):
        sel = builder.element("div").id("main").class_("container").class_("draggable")
        assert sel.stringify() == "div#main.container.draggable"

    def test_id_classes(self):
        sel = builder.id("main").class_("container").class_("editable")
        assert sel.stringify() == "#main.container.editable"

    def test_attr_and_pseudo_class(self):
        sel = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert sel.stringify() == 'a[href$=".png"]:focus'

    def test_input_checked(self):
        sel = builder.element("input").pseudo_class("checked")
        assert sel.stringify() == "input:checked"

    def test_pseudo_element(self):
        sel = builder.element("p").pseudo_class("first-of-type").pseudo_element("first-letter")
        assert sel.stringify() == "p:first-of-type::first-letter"

    def test_deep_combination(self):
        sel = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert sel.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_combine_returns_combined(self):
        sel = builder.combine(builder.element("a"), ">", builder.element("b"))
        assert isinstance(sel, CombinedSelector)
        assert sel.stringify() == "a > b"

    def test_module_level_combine(self):
        sel = selectorkit.combine(selectorkit.element("ul"), ">", selectorkit.element("li"))
        assert sel.stringify() == "ul > li"


# ---------------------------------------------------------------------------
# Errors through the facade
# ---------------------------------------------------------------------------


class TestFacadeErrors:
    def test_second_element(self):
        with pytest.raises(DuplicateError):
            builder.element("div").element("span")

    def test_id_after_class(self):
        with pytest.raises(OrderError):
            builder.class_("x").id("main")

    def test_class_after_pseudo_element(self):
        with pytest.raises(OrderError):
            builder.element("p").pseudo_element("after").class_("x")

    def test_error_does_not_poison_next_build(self):
        with pytest.raises(DuplicateError):
            builder.element("div").element("span")
        assert builder.element("span").stringify() == "span"


# ---------------------------------------------------------------------------
# Isolation between builds
# ---------------------------------------------------------------------------


class TestIsolation:
    def test_interleaved_builds(self):
        a = builder.element("div").id("a")
        b = builder.element("span").class_("b").pseudo_class("hover")
        b_text = b.stringify()
        a = a.class_("done")
        assert a.stringify() == "div#a.done"
        assert b_text == "span.b:hover"
        assert b.stringify() == "span.b:hover"

    def test_build_while_combining(self):
        left = builder.element("ul")
        other = builder.id("side").class_("x")
        combined = builder.combine(left, ">", builder.element("li"))
        assert combined.stringify() == "ul > li"
        assert other.stringify() == "#side.x"

    def test_stringify_does_not_leak(self):
        builder.element("div").id("first").stringify()
        assert builder.element("p").stringify() == "p"

    def test_combine_does_not_leak(self):
        builder.combine(builder.element("a"), "+", builder.element("b")).stringify()
        assert builder.element("c").stringify() == "c"
