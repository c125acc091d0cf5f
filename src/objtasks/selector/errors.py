"""Selector builder error types."""

from __future__ import annotations

from objtasks.model.diagnostic import Diagnostic


class SelectorError(ValueError):
    """Raised when a fragment breaks a selector rule."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [d.message for d in diagnostics if d.is_error]
        super().__init__("; ".join(messages))


class CardinalityError(SelectorError):
    """Element, id or pseudo-element appended more than once."""


class OrderError(SelectorError):
    """Fragment appended after a fragment of a later category."""
