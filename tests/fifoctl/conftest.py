"""Shared fixtures: a daemon stand-in serving the pipes from a background thread."""

import os
import threading
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from fifoctl.config import Config

# Line that ends the serving thread; never recorded as a command
_STOP = b"\x00stop\n"


class ThreadedDaemon:
    """Reads the command pipe in a thread and answers on the return pipe.

    ``respond`` maps a command to its reply line, or None to stay silent.
    Works with clients running their own event loop, such as the CLI.
    """

    def __init__(self, cfg: Config, respond: Callable[[str], str | None]) -> None:
        self._cfg = cfg
        self._respond = respond
        self.received: list[str] = []
        self._thread: threading.Thread | None = None
        self._return_fd: int | None = None

    def start(self) -> None:
        self._cfg.runtime_dir.mkdir(parents=True, exist_ok=True)
        os.mkfifo(self._cfg.command_pipe_path)
        # read/write open returns at once and keeps the pipe from reporting EOF
        fd = os.open(self._cfg.command_pipe_path, os.O_RDWR)
        self._thread = threading.Thread(target=self._serve, args=(fd,), daemon=True)
        self._thread.start()

    def _serve(self, fd: int) -> None:
        with os.fdopen(fd, "rb") as pipe:
            for line in pipe:
                if line == _STOP:
                    return
                command = line.decode().rstrip("\n")
                self.received.append(command)
                reply = self._respond(command)
                if reply is None:
                    continue
                if self._return_fd is None:
                    # client opens the return pipe before its first command
                    self._return_fd = os.open(self._cfg.return_pipe_path, os.O_WRONLY | os.O_NONBLOCK)
                os.write(self._return_fd, reply.encode() + b"\n")

    def stop(self) -> None:
        if self._thread is not None:
            fd = os.open(self._cfg.command_pipe_path, os.O_WRONLY | os.O_NONBLOCK)
            try:
                os.write(fd, _STOP)
            finally:
                os.close(fd)
            self._thread.join(timeout=5.0)
        if self._return_fd is not None:
            os.close(self._return_fd)


@pytest.fixture
def start_daemon(tmp_path: Path) -> Iterator[Callable[[Callable[[str], str | None]], ThreadedDaemon]]:
    """Start a threaded daemon on tmp_path / "run" with the given responder."""
    daemons: list[ThreadedDaemon] = []

    def start(respond: Callable[[str], str | None]) -> ThreadedDaemon:
        cfg = Config(runtime_dir=tmp_path / "run", data_dir=tmp_path / "data")
        daemon = ThreadedDaemon(cfg, respond)
        daemon.start()
        daemons.append(daemon)
        return daemon

    yield start
    for daemon in daemons:
        daemon.stop()
