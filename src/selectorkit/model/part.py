"""Selector part model: the tokens that make up one compound selector."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PartKind(Enum):
    """Kind of a compound selector token, in CSS grammar order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"

    @property
    def rank(self) -> int:
        """Position of this kind in the fixed grammar order."""
        return _RANKS[self]

    @property
    def repeatable(self) -> bool:
        return self in _REPEATABLE


_RANKS: dict[PartKind, int] = {kind: index for index, kind in enumerate(PartKind)}

_REPEATABLE = frozenset({PartKind.CLASS, PartKind.ATTRIBUTE, PartKind.PSEUDO_CLASS})

# (prefix, suffix) wrapped around the raw value when rendering.
_AFFIXES: dict[PartKind, tuple[str, str]] = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}


@dataclass(frozen=True)
class SelectorPart:
    """A single token of a compound selector.

    Attributes:
        kind: Which grammar slot the token occupies.
        value: Raw text without its prefix, e.g. ``"main"`` for ``#main``.
    """

    kind: PartKind
    value: str

    def render(self) -> str:
        prefix, suffix = _AFFIXES[self.kind]
        return f"{prefix}{self.value}{suffix}"

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "value": self.value}

    def __str__(self) -> str:
        return self.render()
