"""CLI command: objtasks decode -- deserialize JSON into a known template."""

from __future__ import annotations

import sys

import click

from objtasks.codec import CodecError, deserialize
from objtasks.model import Circle, Rectangle

TEMPLATES: dict[str, type] = {
    "rectangle": Rectangle,
    "circle": Circle,
}


@click.command()
@click.argument("template", type=click.Choice(sorted(TEMPLATES)))
@click.argument("text")
def decode(template: str, text: str) -> None:
    """Parse JSON TEXT into a TEMPLATE instance and print it with its area."""
    try:
        value = deserialize(TEMPLATES[template], text)
    except CodecError as exc:
        click.echo(f"Decode error: {exc}", err=True)
        sys.exit(1)

    click.echo(repr(value))
    click.echo(f"Area: {value.area():g}")
