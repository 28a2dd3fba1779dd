"""Selector model: fragment kinds and the immutable selector accumulator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from object_tasks.selector.errors import OrderViolation


class PartKind(Enum):
    """Kinds of selector fragments, declared in canonical rank order.

    Each value is ``(rank, prefix, suffix, singleton)``::

        element#id.class[attr]:pseudoClass::pseudoElement
    """

    ELEMENT = (0, "", "", True)
    ID = (1, "#", "", True)
    CLASS = (2, ".", "", False)
    ATTRIBUTE = (3, "[", "]", False)
    PSEUDO_CLASS = (4, ":", "", False)
    PSEUDO_ELEMENT = (5, "::", "", True)

    def __init__(self, rank: int, prefix: str, suffix: str, singleton: bool) -> None:
        self.rank = rank
        self.prefix = prefix
        self.suffix = suffix
        self.singleton = singleton

    def format(self, value: str) -> str:
        """Decorate a raw payload with this kind's prefix and suffix."""
        return f"{self.prefix}{value}{self.suffix}"


@dataclass(frozen=True)
class Selector:
    """Selector text built so far plus the kinds appended to produce it.

    Attributes:
        text: The rendered selector, never escaped or normalised.
        kinds: Fragment kinds in the order they were appended. Empty for a
            selector produced by :meth:`combined`.
    """

    text: str
    kinds: tuple[PartKind, ...] = ()

    # --- construction ---------------------------------------------------------

    @classmethod
    def start(cls, value: str, kind: PartKind) -> Selector:
        """Create a selector seeded with a single formatted fragment."""
        return cls(text=kind.format(value), kinds=(kind,))

    @classmethod
    def combined(cls, left: Selector, combinator: str, right: Selector) -> Selector:
        """Join two selectors with *combinator*; the kind history is reset."""
        return cls(text=f"{left.text} {combinator} {right.text}")

    # --- accumulation ---------------------------------------------------------

    @property
    def last_kind(self) -> PartKind | None:
        return self.kinds[-1] if self.kinds else None

    def has_kind(self, kind: PartKind) -> bool:
        return kind in self.kinds

    def append(self, fragment_text: str, kind: PartKind) -> Selector:
        """Return a new selector with *fragment_text* appended.

        Raises:
            OrderViolation: if *kind* ranks below the last appended kind.
        """
        previous = self.last_kind
        if previous is not None and kind.rank < previous.rank:
            raise OrderViolation(kind, previous)
        return Selector(text=self.text + fragment_text, kinds=self.kinds + (kind,))

    # --- output ---------------------------------------------------------------

    def render(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text
