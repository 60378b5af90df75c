"""Selectorkit: build CSS selector strings from validated parts."""

from __future__ import annotations

from selectorkit.builder import (
    SelectorBuilder,
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id_,
    pseudo_class,
    pseudo_element,
)
from selectorkit.config import SelectorkitConfig
from selectorkit.errors import DuplicateError, OrderError, SelectorError
from selectorkit.model import (
    CombinedSelector,
    Combinator,
    CompoundSelector,
    PartKind,
    Selector,
    SelectorPart,
    selector_from_dict,
)
from selectorkit.objects import Rectangle, deserialize, make_rectangle, serialize

__version__ = "0.1.0"

__all__ = [
    # builder
    "SelectorBuilder",
    "css_selector_builder",
    "element",
    "id_",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    # model
    "PartKind",
    "SelectorPart",
    "Combinator",
    "CompoundSelector",
    "CombinedSelector",
    "Selector",
    "selector_from_dict",
    # errors
    "SelectorError",
    "DuplicateError",
    "OrderError",
    # objects
    "Rectangle",
    "make_rectangle",
    "serialize",
    "deserialize",
    # config
    "SelectorkitConfig",
]
