"""Resolve the command and return pipe paths in the runtime directory."""

import logging
import os
import stat
from pathlib import Path

from fifoctl.config import Config
from fifoctl.pipes.errors import PipeError

logger = logging.getLogger(__name__)


def is_fifo(path: Path) -> bool:
    """Check whether a path exists and is a named pipe."""
    try:
        return stat.S_ISFIFO(path.stat().st_mode)
    except OSError:
        return False


class PipeLocator:
    """Locates the daemon's pipes for one configuration."""

    def __init__(self, cfg: Config) -> None:
        """Initialize locator with configuration.

        Args:
            cfg: Application configuration (provides runtime directory and pipe paths).

        """
        self._cfg = cfg

    def command_pipe(self) -> Path:
        """Return the command pipe path.

        The daemon owns this pipe; a missing pipe means the daemon is not running.

        Raises:
            PipeError: Pipe missing (code: ``command_pipe_missing``) or not a FIFO (code: ``not_a_pipe``).

        """
        path = self._cfg.command_pipe_path
        if not path.exists():
            raise PipeError("command_pipe_missing", f"Couldn't find {path}. Is the daemon running?")
        if not is_fifo(path):
            raise PipeError("not_a_pipe", f"{path} is not a named pipe.")
        return path

    def return_pipe(self) -> Path:
        """Return the return pipe path, creating the FIFO if it does not exist yet.

        Raises:
            PipeError: Path taken by a non-FIFO (code: ``not_a_pipe``) or creation failed
                (code: ``return_pipe_unavailable``).

        """
        path = self._cfg.return_pipe_path
        if path.exists():
            if not is_fifo(path):
                raise PipeError("not_a_pipe", f"{path} is not a named pipe.")
            return path
        try:
            path.parent.mkdir(parents=True, exist_ok=True, mode=0o700)
            os.mkfifo(path, 0o600)
        except FileExistsError:
            # Created concurrently by the daemon
            if not is_fifo(path):
                raise PipeError("not_a_pipe", f"{path} is not a named pipe.") from None
        except OSError as e:
            raise PipeError("return_pipe_unavailable", f"Couldn't create {path}: {e}") from e
        else:
            logger.debug("Created return pipe %s", path)
        return path
