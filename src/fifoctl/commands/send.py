"""Send commands to the daemon and print its replies."""

import asyncio
import logging

import typer

from fifoctl.app_context import use_context
from fifoctl.dispatch import run_batch
from fifoctl.pipes import PipeError

logger = logging.getLogger(__name__)


def send(
    ctx: typer.Context,
    commands: list[str] | None = typer.Argument(default=None, help="Commands to send, in order. Quote a command with its arguments."),
) -> None:
    """Send commands to the daemon. See `fifoctl list` for the available commands."""
    app = use_context(ctx)
    try:
        result = asyncio.run(run_batch(app.cfg, commands or [], app.out))
    except PipeError as e:
        logger.error("Setup failed: %s", e)
        app.out.print_error_and_exit(e.code, str(e))
    if result.exit_code:
        raise typer.Exit(code=result.exit_code)
