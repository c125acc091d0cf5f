"""CLI command: objtasks selector -- build a selector from kind:value parts."""

from __future__ import annotations

import sys

import click

from objtasks.config import SelectorConfig
from objtasks.selector import Category, SelectorBuilder

_KINDS = {category.value: category for category in Category}
_KINDS["attr"] = Category.ATTRIBUTE


def _split_part(part: str) -> tuple[Category, str]:
    kind, sep, value = part.partition(":")
    if not sep or kind not in _KINDS:
        raise click.BadParameter(
            f"{part!r} is not KIND:VALUE with KIND one of {', '.join(sorted(_KINDS))}",
            param_hint="PARTS",
        )
    return _KINDS[kind], value


@click.command()
@click.argument("parts", nargs=-1, required=True)
def selector(parts: tuple[str, ...]) -> None:
    """Build a CSS selector from PARTS given as KIND:VALUE, in order.

    Example: objtasks selector element:a 'attr:href$=".png"' pseudo-class:focus

    Prints the selector and exits 0, or prints every diagnostic and exits 1
    when a rule is broken.
    """
    builder = SelectorBuilder(SelectorConfig(strict=False))
    for part in parts:
        category, value = _split_part(part)
        builder.add(category, value)

    diagnostics = builder.diagnostics
    errors = [d for d in diagnostics if d.is_error]
    for diag in diagnostics:
        click.echo(str(diag), err=True)

    if errors:
        click.echo(f"Summary: {len(errors)} error(s)", err=True)
        sys.exit(1)
    click.echo(builder.render())
