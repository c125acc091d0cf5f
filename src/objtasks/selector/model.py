"""Selector model: fragment categories, fragments and combined selectors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Category(Enum):
    """Fragment category, declared in the order fragments must appear.

    element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def is_single(self) -> bool:
        """True for categories allowed at most once per selector."""
        return self in SINGLE_CATEGORIES

    def decorate(self, value: str) -> str:
        prefix, suffix = _DECORATIONS[self]
        return f"{prefix}{value}{suffix}"


_RANKS = {category: rank for rank, category in enumerate(Category)}

_DECORATIONS: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}

SINGLE_CATEGORIES = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})


@dataclass(frozen=True)
class Fragment:
    """One selector component, e.g. ``Fragment(Category.CLASS, "active")``."""

    category: Category
    value: str

    def render(self) -> str:
        return self.category.decorate(self.value)


class Renderable(Protocol):
    def render(self) -> str: ...


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator (``' '``, ``'+'``, ``'~'``, ``'>'``).

    The combinator is inserted verbatim between single spaces.
    """

    left: Renderable
    combinator: str
    right: Renderable

    def render(self) -> str:
        return f"{self.left.render()} {self.combinator} {self.right.render()}"

    def __str__(self) -> str:
        return self.render()
