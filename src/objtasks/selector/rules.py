"""Validation rules for selector fragment sequences.

Each rule is a function taking a sequence of Fragments and returning a list
of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from objtasks.model.diagnostic import Diagnostic, Severity
from objtasks.selector.model import Category, Fragment

CARDINALITY_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_cardinality(fragments: Sequence[Fragment]) -> list[Diagnostic]:
    """Element, id and pseudo-element may each appear at most once."""
    seen: Counter[Category] = Counter()
    diagnostics: list[Diagnostic] = []
    for pos, fragment in enumerate(fragments):
        if not fragment.category.is_single:
            continue
        seen[fragment.category] += 1
        if seen[fragment.category] > 1:
            diagnostics.append(
                Diagnostic(
                    rule="check_cardinality",
                    severity=Severity.ERROR,
                    message=CARDINALITY_MESSAGE,
                    position=pos,
                    fix=f"Remove the repeated {fragment.category.value} '{fragment.value}'.",
                )
            )
    return diagnostics


def check_order(fragments: Sequence[Fragment]) -> list[Diagnostic]:
    """Each fragment's category must not precede the one appended before it."""
    diagnostics: list[Diagnostic] = []
    for pos in range(1, len(fragments)):
        previous, current = fragments[pos - 1], fragments[pos]
        if current.category.rank < previous.category.rank:
            diagnostics.append(
                Diagnostic(
                    rule="check_order",
                    severity=Severity.ERROR,
                    message=ORDER_MESSAGE,
                    position=pos,
                    fix=(
                        f"Move {current.category.value} '{current.value}' before "
                        f"{previous.category.value} '{previous.value}'."
                    ),
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Style rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_empty_value(fragments: Sequence[Fragment]) -> list[Diagnostic]:
    """Fragments should carry a non-blank value."""
    return [
        Diagnostic(
            rule="check_empty_value",
            severity=Severity.WARNING,
            message=f"Empty {fragment.category.value} renders as {fragment.render()!r}.",
            position=pos,
        )
        for pos, fragment in enumerate(fragments)
        if not fragment.value.strip()
    ]


# Cardinality runs before order so a repeated single fragment is reported
# as a cardinality problem first.
ALL_RULES = [
    check_cardinality,
    check_order,
    check_empty_value,
]
