"""CSS selector builder facade.

Each entry point starts a fresh compound selector and returns it for
chaining::

    css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # 'a[href$=".png"]:focus'

    combine(element("div").id("main"), "+", element("table")).stringify()
    # 'div#main + table'
"""

from __future__ import annotations

from selectorkit.model.selector import (
    CombinedSelector,
    Combinator,
    CompoundSelector,
    Selector,
)

__all__ = [
    "SelectorBuilder",
    "css_selector_builder",
    "element",
    "id_",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]


class SelectorBuilder:
    """Stateless factory for selector values.

    The builder holds nothing between calls; all accumulation happens in the
    immutable selectors it returns.
    """

    def element(self, value: str) -> CompoundSelector:
        return CompoundSelector().element(value)

    def id(self, value: str) -> CompoundSelector:
        return CompoundSelector().id(value)

    def class_(self, value: str) -> CompoundSelector:
        return CompoundSelector().class_(value)

    def attr(self, value: str) -> CompoundSelector:
        return CompoundSelector().attr(value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_element(value)

    def combine(
        self,
        selector1: Selector,
        combinator: Combinator | str,
        selector2: Selector,
    ) -> CombinedSelector:
        """Join two selectors; *combinator* is inserted verbatim."""
        return selector1.combine(combinator, selector2)


css_selector_builder = SelectorBuilder()

element = css_selector_builder.element
id_ = css_selector_builder.id
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine
