"""Rectangle value type and its factory."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """A width/height pair whose area is derived on demand, never stored."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def make_rectangle(width: float, height: float) -> Rectangle:
    """Return a :class:`Rectangle` with the given dimensions.

    Inputs are trusted: negative or non-numeric values are not rejected.
    """
    return Rectangle(width=width, height=height)
