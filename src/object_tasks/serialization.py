"""JSON helpers: compact serialisation and positional reconstruction."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, Sequence, TypeVar

from object_tasks.config import DEFAULT_CONFIG, SerializationConfig

__all__ = ["to_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _encode_object(obj: Any) -> Any:
    """``json.dumps`` fallback for dataclasses and plain attribute objects."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if hasattr(obj, "__dict__") and not isinstance(obj, type):
        return dict(vars(obj))
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(value: Any, config: SerializationConfig = DEFAULT_CONFIG) -> str:
    """Return the JSON text of *value*.

    With the default config the output is compact (no whitespace) and keeps
    dict insertion order, e.g. ``{"width":10,"height":20}``.
    """
    return json.dumps(
        value,
        default=_encode_object,
        separators=config.separators,
        ensure_ascii=config.ensure_ascii,
        sort_keys=config.sort_keys,
        indent=config.indent,
    )


def _field_order(cls: type) -> Sequence[str] | None:
    """Return the declared constructor field order for *cls*, if it has one.

    A class may set ``__json_fields__`` explicitly; dataclasses fall back to
    their init fields. Anything else has no declared order.
    """
    declared = getattr(cls, "__json_fields__", None)
    if declared is not None:
        return tuple(declared)
    if dataclasses.is_dataclass(cls):
        return tuple(f.name for f in dataclasses.fields(cls) if f.init)
    return None


def from_json(prototype: type[T] | T, json_text: str) -> T:
    """Rebuild an instance of *prototype*'s class from JSON text.

    *prototype* may be a class or an instance of it. The decoded object's
    values are passed to the constructor. When the class declares its fields,
    the declared names present in the JSON are passed as keywords, so fields
    with defaults may be omitted. Otherwise the values are passed positionally
    in JSON key order, and the keys must already be in constructor parameter
    order.

    Raises:
        json.JSONDecodeError: if *json_text* is not valid JSON.
        TypeError: if the JSON is not an object, or the constructor rejects
            the arguments (including a missing required field).
    """
    cls = prototype if isinstance(prototype, type) else type(prototype)
    data = json.loads(json_text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

    order = _field_order(cls)
    if order is None:
        logger.debug("Rebuilding %s from JSON key order", cls.__name__)
        return cls(*data.values())

    logger.debug("Rebuilding %s from declared fields %s", cls.__name__, order)
    return cls(**{name: data[name] for name in order if name in data})
