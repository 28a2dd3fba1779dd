"""Object tasks: rectangle factory, JSON helpers and a CSS selector builder."""
from __future__ import annotations

from object_tasks.config import DEFAULT_CONFIG, SerializationConfig
from object_tasks.selector import (
    Builder,
    Chain,
    DuplicateSingleton,
    OrderViolation,
    Selector,
    SelectorError,
    css_selector_builder,
)
from object_tasks.serialization import from_json, to_json
from object_tasks.shapes import Rectangle, make_rectangle

__version__ = "0.1.0"

__all__ = [
    "Rectangle",
    "make_rectangle",
    "to_json",
    "from_json",
    "SerializationConfig",
    "DEFAULT_CONFIG",
    "Builder",
    "Chain",
    "Selector",
    "css_selector_builder",
    "SelectorError",
    "OrderViolation",
    "DuplicateSingleton",
]
