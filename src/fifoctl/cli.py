"""CLI entry point for fifoctl."""

from pathlib import Path
from typing import Annotated

import typer

from fifoctl.app_context import AppContext
from fifoctl.commands.list import list_
from fifoctl.commands.log import log
from fifoctl.commands.send import send
from fifoctl.config import Config
from fifoctl.log import setup_logging
from fifoctl.output import Output

app = typer.Typer(name="fifoctl", no_args_is_help=True)


@app.callback()
def callback(
    ctx: typer.Context,
    *,
    json_output: Annotated[bool, typer.Option("--json", help="Output results as JSON lines.")] = False,
    runtime_dir: Annotated[Path | None, typer.Option("--runtime-dir", help="Directory holding the daemon's pipes.")] = None,
    data_dir: Annotated[Path | None, typer.Option("--data-dir", help="Data directory path.")] = None,
) -> None:
    """Send commands to a daemon over its command pipe and report its replies."""
    cfg = Config.build(runtime_dir, data_dir)
    cfg.data_dir.mkdir(parents=True, exist_ok=True)
    setup_logging(cfg)
    ctx.obj = AppContext(out=Output(json_mode=json_output), cfg=cfg)


app.command()(send)
app.command("list")(list_)
app.command()(log)
