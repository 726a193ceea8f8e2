"""Append command lines to the daemon's command pipe."""

import errno
import logging
import os
from pathlib import Path
from types import TracebackType

from fifoctl.pipes.errors import PipeError

logger = logging.getLogger(__name__)


class CommandWriter:
    """Write-only, append-mode, non-blocking handle on the command pipe."""

    def __init__(self, fd: int, path: Path) -> None:
        """Wrap an already opened pipe.

        Args:
            fd: File descriptor opened for writing in non-blocking mode.
            path: Pipe path, for messages.

        """
        self._fd: int | None = fd
        self._path = path

    @classmethod
    def open(cls, path: Path) -> "CommandWriter":
        """Open the command pipe for appending.

        The pipe stays non-blocking: a pipe without a reader fails to open at
        once, and a pipe the daemon stopped draining fails the write instead of
        stalling the event loop.

        Raises:
            PipeError: No reader on the pipe (code: ``daemon_not_listening``) or the pipe
                cannot be opened (code: ``command_pipe_unavailable``).

        """
        try:
            fd = os.open(path, os.O_WRONLY | os.O_APPEND | os.O_NONBLOCK)
        except OSError as e:
            if e.errno == errno.ENXIO:
                raise PipeError("daemon_not_listening", f"Nothing is reading {path}. Is the daemon running?") from e
            raise PipeError("command_pipe_unavailable", f"Couldn't open {path}: {e.strerror}") from e
        logger.debug("Opened command pipe %s", path)
        return cls(fd, path)

    @property
    def path(self) -> Path:
        """Command pipe path."""
        return self._path

    def send(self, command: str) -> None:
        """Append one command line.

        The command is sent verbatim, without validation or escaping. Lines up to
        PIPE_BUF bytes are written atomically; a longer line may be cut short
        when the pipe fills up.

        Raises:
            OSError: The line could not be written (closed handle, broken pipe,
                ``BlockingIOError`` when the pipe is full).

        """
        if self._fd is None:
            raise OSError(errno.EBADF, "command pipe is closed")
        data = memoryview(command.encode() + b"\n")
        while data:
            written = os.write(self._fd, data)
            data = data[written:]
        logger.debug("Sent: %s", command)

    def close(self) -> None:
        """Close the pipe. Safe to call more than once."""
        if self._fd is None:
            return
        fd, self._fd = self._fd, None
        os.close(fd)

    def __enter__(self) -> "CommandWriter":
        return self

    def __exit__(self, exc_type: type[BaseException] | None, exc: BaseException | None, tb: TracebackType | None) -> None:
        self.close()
