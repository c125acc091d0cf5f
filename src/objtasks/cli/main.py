"""objtasks CLI entry point: Click group with subcommands."""

import logging

import click

from objtasks import __version__


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """objtasks - rectangles, JSON templates and CSS selector building."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from objtasks.cli.decode import decode  # noqa: E402
from objtasks.cli.rectangle import rectangle  # noqa: E402
from objtasks.cli.selector import selector  # noqa: E402

cli.add_command(rectangle)
cli.add_command(decode)
cli.add_command(selector)
