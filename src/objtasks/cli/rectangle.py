"""CLI command: objtasks rectangle -- build a rectangle and show its area."""

from __future__ import annotations

import click

from objtasks.codec import serialize
from objtasks.model import make_rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON.")
def rectangle(width: float, height: float, as_json: bool) -> None:
    """Create a WIDTH x HEIGHT rectangle and print its area."""
    rect = make_rectangle(width, height)
    if as_json:
        click.echo(serialize(rect))
        return
    click.echo(f"Width:  {rect.width:g}")
    click.echo(f"Height: {rect.height:g}")
    click.echo(f"Area:   {rect.area():g}")
