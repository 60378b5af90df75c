"""Selector model: compound selectors and combinator trees.

Both selector kinds are frozen dataclasses.  Every part-adding call returns a
new ``CompoundSelector`` and leaves the receiver untouched, so several
selectors can be built side by side without sharing state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from selectorkit.errors import DuplicateError, OrderError
from selectorkit.model.part import PartKind, SelectorPart

__all__ = [
    "Combinator",
    "CompoundSelector",
    "CombinedSelector",
    "Selector",
    "selector_from_dict",
]

log = logging.getLogger(__name__)


class Combinator(Enum):
    """The four CSS combinators.  Plain strings are accepted as well."""

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"


def _symbol(combinator: Combinator | str) -> str:
    if isinstance(combinator, Combinator):
        return combinator.value
    return combinator


@dataclass(frozen=True)
class CompoundSelector:
    """An ordered run of parts with no combinator, e.g. ``div#id.cls:hover``.

    Parts must follow element, id, class, attribute, pseudo-class,
    pseudo-element order; element, id and pseudo-element occur at most once.
    """

    parts: tuple[SelectorPart, ...] = ()

    @property
    def stage(self) -> PartKind | None:
        """Kind of the most recently added part, or None when empty."""
        if not self.parts:
            return None
        return self.parts[-1].kind

    def has(self, kind: PartKind) -> bool:
        return any(part.kind is kind for part in self.parts)

    def add(self, kind: PartKind, value: str) -> CompoundSelector:
        """Return a copy with one more part appended.

        Raises:
            DuplicateError: *kind* is not repeatable and is already present.
            OrderError: a part that must follow *kind* was already added.
        """
        if not kind.repeatable and self.has(kind):
            log.debug("Rejected %s %r: already present in %r", kind.value, value, self.stringify())
            raise DuplicateError(kind, value)
        stage = self.stage
        if stage is not None and stage.rank > kind.rank:
            log.debug("Rejected %s %r: cannot follow %s", kind.value, value, stage.value)
            raise OrderError(kind, value, after=stage)
        return CompoundSelector(parts=self.parts + (SelectorPart(kind, value),))

    # --- grammar slots --------------------------------------------------------

    def element(self, value: str) -> CompoundSelector:
        return self.add(PartKind.ELEMENT, value)

    def id(self, value: str) -> CompoundSelector:
        return self.add(PartKind.ID, value)

    def class_(self, value: str) -> CompoundSelector:
        return self.add(PartKind.CLASS, value)

    def attr(self, value: str) -> CompoundSelector:
        return self.add(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        return self.add(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        return self.add(PartKind.PSEUDO_ELEMENT, value)

    # --- output ---------------------------------------------------------------

    def combine(self, combinator: Combinator | str, other: Selector) -> CombinedSelector:
        """Join this selector (left) with *other* (right)."""
        return CombinedSelector(left=self, combinator=_symbol(combinator), right=other)

    def stringify(self) -> str:
        return "".join(part.render() for part in self.parts)

    def to_dict(self) -> dict[str, Any]:
        return {"parts": [part.to_dict() for part in self.parts]}

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator.

    Either operand may itself be a ``CombinedSelector``, so nested calls
    build a binary tree that renders left to right.
    """

    left: Selector
    combinator: str
    right: Selector

    def combine(self, combinator: Combinator | str, other: Selector) -> CombinedSelector:
        return CombinedSelector(left=self, combinator=_symbol(combinator), right=other)

    def stringify(self) -> str:
        # The combinator is always padded, so the descendant combinator
        # renders as three spaces.
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "left": self.left.to_dict(),
            "combinator": self.combinator,
            "right": self.right.to_dict(),
        }

    def __str__(self) -> str:
        return self.stringify()


Selector = Union[CompoundSelector, CombinedSelector]


def selector_from_dict(data: dict[str, Any]) -> Selector:
    """Rebuild a selector from the mapping produced by ``to_dict()``.

    Compound parts are replayed through :meth:`CompoundSelector.add`, so the
    usual ordering and cardinality errors apply.

    Raises:
        ValueError: a part kind is unknown or the mapping has neither
            ``parts`` nor ``left``/``combinator``/``right``.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Selector must be a mapping, got {type(data).__name__}")

    if "parts" in data:
        if not isinstance(data["parts"], list):
            raise ValueError(f"Invalid selector parts: {data['parts']!r}")
        selector = CompoundSelector()
        for raw in data["parts"]:
            try:
                kind = PartKind(raw["kind"])
                value = raw["value"]
            except (KeyError, TypeError) as exc:
                raise ValueError(f"Invalid selector part: {raw!r}") from exc
            selector = selector.add(kind, str(value))
        return selector

    if {"left", "combinator", "right"} <= data.keys():
        return CombinedSelector(
            left=selector_from_dict(data["left"]),
            combinator=str(data["combinator"]),
            right=selector_from_dict(data["right"]),
        )

    raise ValueError(f"Not a selector mapping: keys={sorted(data)}")
