"""Show the client log through an external reader."""

import subprocess  # nosec B404
from pathlib import Path


def reader_cmd(path: Path, *, follow: bool) -> list[str]:
    """Return the reader command: `tail -f` when following, `cat` otherwise."""
    return ["tail", "-f", str(path)] if follow else ["cat", str(path)]


def view_log(path: Path, *, follow: bool = False) -> int:
    """Stream the log file to the console and return the reader's exit code.

    A reader killed by a signal reports exit code 1.

    Raises:
        FileNotFoundError: The reader executable is not installed.

    """
    # S603: args are controlled literals plus our own log path
    result = subprocess.run(reader_cmd(path, follow=follow), check=False)  # noqa: S603  # nosec B603
    return result.returncode if result.returncode >= 0 else 1
