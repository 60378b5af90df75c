"""Selectorkit model layer -- public type re-exports."""

from selectorkit.model.part import PartKind, SelectorPart
from selectorkit.model.selector import (
    CombinedSelector,
    Combinator,
    CompoundSelector,
    Selector,
    selector_from_dict,
)

__all__ = [
    # part
    "PartKind",
    "SelectorPart",
    # selector
    "Combinator",
    "CompoundSelector",
    "CombinedSelector",
    "Selector",
    "selector_from_dict",
]
