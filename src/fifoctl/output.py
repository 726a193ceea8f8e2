"""Structured output for CLI and JSON modes."""

# ruff: noqa: T201 (this module is the output layer; print() is its sole mechanism for producing CLI output)

import json
import sys
from typing import NoReturn

import typer

from fifoctl.config import COMMAND_PIPE_NAME

TIMEOUT_WARNING = "WARN: timeout connecting to return pipe. Command may have executed, but errors will not be displayed."


class Output:
    """Handles all CLI output in JSON or human-readable format."""

    def __init__(self, *, json_mode: bool) -> None:
        """Initialize output handler.

        Args:
            json_mode: If True, output JSON lines; otherwise human-readable text.

        """
        self._json_mode = json_mode

    def _outcome(self, command: str, status: str, message: str, text: str, *, stderr: bool = False) -> None:
        """Print one per-command line in JSON or human-readable format."""
        if self._json_mode:
            print(json.dumps({"command": command, "status": status, "message": message}))
        else:
            print(text, file=sys.stderr if stderr else sys.stdout)

    def print_error_and_exit(self, code: str, message: str) -> NoReturn:
        """Print an error in JSON or human-readable format and exit with code 1.

        Raises:
            typer.Exit: Always, with code 1.

        """
        if self._json_mode:
            print(json.dumps({"ok": False, "error": code, "message": message}))
        else:
            print(f"ERROR: {message}", file=sys.stderr)
        raise typer.Exit(code=1)

    # --- Replies ---

    def print_ok(self, command: str, message: str) -> None:
        """Print a command acknowledged with OK."""
        self._outcome(command, "ok", message, f"{command}: {message}")

    def print_reply_error(self, command: str, message: str) -> None:
        """Print a command rejected by the daemon."""
        self._outcome(command, "error", message, f"{command}: {message}", stderr=True)

    def print_unrecognized(self, command: str, raw: str) -> None:
        """Print a reply without a known status token, verbatim."""
        self._outcome(command, "unrecognized", raw, f"{command}: {raw}")

    def print_write_error(self, command: str, error: OSError) -> None:
        """Print a command that could not be written to the command pipe."""
        reason = error.strerror or str(error)
        self._outcome(command, "write_failed", reason, f"ERROR: Couldn't write to {COMMAND_PIPE_NAME}: {reason}", stderr=True)

    def print_timeout(self, command: str) -> None:
        """Print the warning for a reply that did not arrive in time."""
        self._outcome(command, "timeout", TIMEOUT_WARNING, TIMEOUT_WARNING, stderr=True)

    def print_closed(self, command: str) -> None:
        """Print the warning for a return pipe that reached EOF."""
        message = "WARN: return pipe closed. Command may have executed, but errors will not be displayed."
        self._outcome(command, "closed", message, message, stderr=True)

    # --- Catalog ---

    def print_lines(self, lines: list[str]) -> None:
        """Print static text lines."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": {"lines": lines}}))
        else:
            for line in lines:
                print(line)
