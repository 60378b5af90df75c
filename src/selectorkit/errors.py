"""Error types raised while assembling selectors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.model.part import PartKind


class SelectorError(Exception):
    """Base error for selector grammar violations.

    The rejected part is kept on the exception so callers can report it.
    """

    def __init__(self, message: str, *, kind: PartKind, value: str) -> None:
        self.kind = kind
        self.value = value
        super().__init__(message)


class DuplicateError(SelectorError):
    """Raised when element, id or pseudo-element occurs twice in one selector."""

    def __init__(self, kind: PartKind, value: str) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than one time "
            f"inside the selector (got a second {kind.value}: {value!r})",
            kind=kind,
            value=value,
        )


class OrderError(SelectorError):
    """Raised when a part is added after a part that must follow it."""

    def __init__(self, kind: PartKind, value: str, after: PartKind) -> None:
        self.after = after
        super().__init__(
            "Selector parts should be arranged in the following order: element, "
            "id, class, attribute, pseudo-class, pseudo-element "
            f"({kind.value} {value!r} cannot follow {after.value})",
            kind=kind,
            value=value,
        )
