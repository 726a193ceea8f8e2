"""Print the available daemon commands."""

import typer

from fifoctl import catalog
from fifoctl.app_context import use_context


def list_(ctx: typer.Context) -> None:
    """Print a list of available commands with their arguments."""
    use_context(ctx).out.print_lines(catalog.render())
