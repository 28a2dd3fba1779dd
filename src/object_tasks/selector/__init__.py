from object_tasks.selector.builder import (
    COMBINATORS,
    Builder,
    Chain,
    Chainable,
    css_selector_builder,
)
from object_tasks.selector.errors import DuplicateSingleton, OrderViolation, SelectorError
from object_tasks.selector.model import PartKind, Selector

__all__ = [
    # builder
    "COMBINATORS",
    "Builder",
    "Chain",
    "Chainable",
    "css_selector_builder",
    # model
    "PartKind",
    "Selector",
    # errors
    "SelectorError",
    "OrderViolation",
    "DuplicateSingleton",
]
