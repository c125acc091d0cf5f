"""Selector validator: runs all rules over a fragment sequence."""

from __future__ import annotations

from typing import Callable, Sequence

from objtasks.model.diagnostic import Diagnostic
from objtasks.selector.errors import CardinalityError, OrderError, SelectorError
from objtasks.selector.model import Fragment
from objtasks.selector.rules import ALL_RULES

RuleFunc = Callable[[Sequence[Fragment]], list[Diagnostic]]

_ERROR_TYPES: dict[str, type[SelectorError]] = {
    "check_cardinality": CardinalityError,
    "check_order": OrderError,
}


def validate(
    fragments: Sequence[Fragment], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run all rules against *fragments* and return every diagnostic."""
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(fragments))
    return diagnostics


def error_for(diagnostics: list[Diagnostic]) -> SelectorError:
    """Build the exception matching the first ERROR diagnostic's rule."""
    errors = [d for d in diagnostics if d.is_error]
    error_type = _ERROR_TYPES.get(errors[0].rule, SelectorError) if errors else SelectorError
    return error_type(errors)


def validate_or_raise(
    fragments: Sequence[Fragment], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run validation; raises a :class:`SelectorError` subclass on any ERROR.

    Returns the non-error diagnostics when no errors are found.
    """
    diagnostics = validate(fragments, extra_rules=extra_rules)
    if any(d.is_error for d in diagnostics):
        raise error_for(diagnostics)
    return diagnostics
