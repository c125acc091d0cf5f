"""Fluent CSS selector builder.

    >>> css_selector_builder.id("main").class_("container").class_("editable").render()
    '#main.container.editable'

Fragments are kept as an ordered list of :class:`Fragment` objects.  Every
append validates the candidate list before committing it, and ``render``
joins the fragments only when asked.
"""

from __future__ import annotations

import logging

from objtasks.config import DEFAULT_SELECTOR_CONFIG, SelectorConfig
from objtasks.model.diagnostic import Diagnostic
from objtasks.selector.model import Category, CombinedSelector, Fragment, Renderable
from objtasks.selector.validator import error_for, validate, validate_or_raise

__all__ = ["SelectorBuilder", "CssSelectorBuilder", "css_selector_builder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates the fragments of one compound selector."""

    def __init__(self, config: SelectorConfig | None = None) -> None:
        self._config = config or DEFAULT_SELECTOR_CONFIG
        self._fragments: list[Fragment] = []
        self._diagnostics: list[Diagnostic] = []

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._append(Category.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(Category.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(Category.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Append an attribute selector; *value* is wrapped in brackets."""
        return self._append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_ELEMENT, value)

    def add(self, category: Category, value: str) -> SelectorBuilder:
        """Append a fragment by category."""
        return self._append(category, value)

    def _append(self, category: Category, value: str) -> SelectorBuilder:
        fragment = Fragment(category=category, value=value)
        candidate = [*self._fragments, fragment]
        position = len(self._fragments)
        # Earlier fragments were already checked; only report the new one.
        found = [d for d in validate(candidate) if d.position == position]

        if self._config.strict and any(d.is_error for d in found):
            logger.debug("Rejected %s %r at position %d", category.value, value, position)
            raise error_for(found)

        self._fragments = candidate
        self._diagnostics.extend(found)
        logger.debug("Appended %s %r at position %d", category.value, value, position)
        return self

    # --- inspection -----------------------------------------------------------

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        return tuple(self._fragments)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Diagnostics collected so far (warnings, plus errors in lenient mode)."""
        return list(self._diagnostics)

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        return "".join(fragment.render() for fragment in self._fragments)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.render()!r})"


class CssSelectorBuilder:
    """Facade whose methods each start a fresh :class:`SelectorBuilder`."""

    def __init__(self, config: SelectorConfig | None = None) -> None:
        self.config = config or DEFAULT_SELECTOR_CONFIG

    def _new(self) -> SelectorBuilder:
        return SelectorBuilder(self.config)

    def element(self, value: str) -> SelectorBuilder:
        return self._new().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return self._new().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._new().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._new().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_element(value)

    def combine(
        self, left: Renderable, combinator: str, right: Renderable
    ) -> CombinedSelector:
        """Join two selectors as ``"<left> <combinator> <right>"``.

        Builder operands are re-validated, so a lenient builder holding
        errors cannot be combined.
        """
        for operand in (left, right):
            if isinstance(operand, SelectorBuilder):
                validate_or_raise(operand.fragments)
        return CombinedSelector(left=left, combinator=combinator, right=right)


css_selector_builder = CssSelectorBuilder()
