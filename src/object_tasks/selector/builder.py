"""Fluent CSS selector builder.

Usage::

    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data"),
    ).stringify()
    # 'div#main + table#data'

A bare :class:`Builder` starts a new :class:`Chain` on every fragment call.
A :class:`Chain` checks the singleton and ordering rules and returns a new
chain, so a shared prefix can be branched freely.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

from object_tasks.selector.errors import DuplicateSingleton, OrderViolation
from object_tasks.selector.model import PartKind, Selector

__all__ = ["COMBINATORS", "Builder", "Chain", "Chainable", "css_selector_builder"]

logger = logging.getLogger(__name__)

# Descendant, adjacent sibling, general sibling, child. Not enforced.
COMBINATORS = (" ", "+", "~", ">")


@runtime_checkable
class Chainable(Protocol):
    """Anything that can continue a selector chain and render it."""

    def element(self, value: str) -> Chain: ...

    def id(self, value: str) -> Chain: ...

    def class_(self, value: str) -> Chain: ...

    def attr(self, value: str) -> Chain: ...

    def pseudo_class(self, value: str) -> Chain: ...

    def pseudo_element(self, value: str) -> Chain: ...

    def combine(self, left: Operand, combinator: str, right: Operand) -> Chain: ...

    def render(self) -> str: ...

    def stringify(self) -> str: ...


Operand = Union[Chainable, Selector]


def _as_selector(operand: Operand) -> Selector:
    if isinstance(operand, Selector):
        return operand
    if isinstance(operand, Chain):
        return operand.selector
    return Selector(text=operand.render())


class _Combining:
    """The ``combine`` operation shared by the builder and every chain."""

    def combine(self, left: Operand, combinator: str, right: Operand) -> Chain:
        """Join two finished selectors as ``"<left> <combinator> <right>"``.

        The combinator is inserted verbatim. Neither operand is modified. The
        result is itself a chain with an empty kind history, so fragments may
        still be appended to it.
        """
        combined = Selector.combined(_as_selector(left), combinator, _as_selector(right))
        return Chain(combined)


@dataclass(frozen=True)
class Builder(_Combining):
    """Stateless entry point: every fragment method starts a new chain."""

    def _start(self, value: str, kind: PartKind) -> Chain:
        return Chain(Selector.start(value, kind))

    def element(self, value: str) -> Chain:
        return self._start(value, PartKind.ELEMENT)

    def id(self, value: str) -> Chain:
        return self._start(value, PartKind.ID)

    def class_(self, value: str) -> Chain:
        return self._start(value, PartKind.CLASS)

    def attr(self, value: str) -> Chain:
        return self._start(value, PartKind.ATTRIBUTE)

    def pseudo_class(self, value: str) -> Chain:
        return self._start(value, PartKind.PSEUDO_CLASS)

    def pseudo_element(self, value: str) -> Chain:
        return self._start(value, PartKind.PSEUDO_ELEMENT)

    def render(self) -> str:
        return ""

    stringify = render


@dataclass(frozen=True)
class Chain(_Combining):
    """A selector with at least one fragment (or a combination of two)."""

    selector: Selector

    def _extend(self, value: str, kind: PartKind) -> Chain:
        if kind.singleton and self.selector.has_kind(kind):
            logger.debug(
                "Rejected %s %r: already present in %r", kind.name, value, self.selector.text
            )
            raise DuplicateSingleton(kind)
        try:
            extended = self.selector.append(kind.format(value), kind)
        except OrderViolation:
            logger.debug(
                "Rejected %s %r: out of order after %r", kind.name, value, self.selector.text
            )
            raise
        return Chain(extended)

    def element(self, value: str) -> Chain:
        return self._extend(value, PartKind.ELEMENT)

    def id(self, value: str) -> Chain:
        return self._extend(value, PartKind.ID)

    def class_(self, value: str) -> Chain:
        return self._extend(value, PartKind.CLASS)

    def attr(self, value: str) -> Chain:
        return self._extend(value, PartKind.ATTRIBUTE)

    def pseudo_class(self, value: str) -> Chain:
        return self._extend(value, PartKind.PSEUDO_CLASS)

    def pseudo_element(self, value: str) -> Chain:
        return self._extend(value, PartKind.PSEUDO_ELEMENT)

    @property
    def kinds(self) -> tuple[PartKind, ...]:
        return self.selector.kinds

    def render(self) -> str:
        return self.selector.render()

    stringify = render

    def __str__(self) -> str:
        return self.selector.render()


css_selector_builder = Builder()
