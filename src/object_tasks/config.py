from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SerializationConfig:
    separators: tuple[str, str] = (",", ":")  # compact, no whitespace
    ensure_ascii: bool = False
    sort_keys: bool = False
    indent: int | None = None


DEFAULT_CONFIG = SerializationConfig()
