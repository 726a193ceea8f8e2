"""Show the client log."""

import typer

from fifoctl.app_context import use_context
from fifoctl.log_viewer import view_log


def log(
    ctx: typer.Context,
    *,
    follow: bool = typer.Option(False, "--follow", "-f", help="Output appended data as the log grows"),
) -> None:
    """Show the client log, relaying the exit code of the log reader."""
    app = use_context(ctx)
    try:
        code = view_log(app.cfg.log_path, follow=follow)
    except FileNotFoundError as e:
        app.out.print_error_and_exit("reader_unavailable", f"Failed to execute log reader: {e}")
    raise typer.Exit(code=code)
