"""Rectangle value with a lazily computed area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A mutable width/height pair.

    The area is computed on every call, so changing ``width`` or ``height``
    after creation is reflected by :meth:`get_area`.
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


def make_rectangle(width: float, height: float) -> Rectangle:
    """Return a :class:`Rectangle` with the given dimensions."""
    return Rectangle(width=width, height=height)
