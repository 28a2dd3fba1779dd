"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from object_tasks.selector.model import PartKind

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)


class SelectorError(ValueError):
    """Base class for errors raised while building a selector."""


class OrderViolation(SelectorError):
    """Raised when a fragment is appended out of rank order."""

    def __init__(self, attempted: PartKind, previous: PartKind | None = None):
        self.attempted = attempted
        self.previous = previous
        super().__init__(ORDER_MESSAGE)


class DuplicateSingleton(SelectorError):
    """Raised when element, id or pseudo-element is appended a second time."""

    def __init__(self, kind: PartKind):
        self.kind = kind
        super().__init__(DUPLICATE_MESSAGE)
