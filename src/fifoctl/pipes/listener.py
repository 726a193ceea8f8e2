"""Asynchronous line reader for the daemon's return pipe."""

import asyncio
import logging
import os
import stat
from pathlib import Path
from types import TracebackType

from fifoctl.pipes.errors import PipeError

logger = logging.getLogger(__name__)

# Stream buffer limit, in bytes; longer reply lines are collected in chunks of this size
_CHUNK_LIMIT = 1024 * 1024


class ReturnListener:
    """Yields reply lines from the return pipe, one call at a time."""

    def __init__(self, reader: asyncio.StreamReader, transport: asyncio.BaseTransport | None = None) -> None:
        """Wrap a stream reader attached to the return pipe.

        Args:
            reader: Stream reader fed by the pipe.
            transport: Read transport owning the pipe, closed by ``close()``.

        """
        self._reader = reader
        self._transport = transport

    @classmethod
    async def open(cls, path: Path) -> "ReturnListener":
        """Open an existing return pipe and attach it to the running event loop.

        The FIFO is opened read/write so the open does not wait for the daemon
        to connect, and the pipe never reports EOF between daemon writes.
        Lines the daemon wrote before this call are not seen.

        Raises:
            PipeError: Pipe missing or not accessible (code: ``return_pipe_unavailable``)
                or not a FIFO (code: ``not_a_pipe``).

        """
        try:
            mode = path.stat().st_mode
        except OSError as e:
            raise PipeError("return_pipe_unavailable", f"Couldn't connect to {path}: {e.strerror}") from e
        if not stat.S_ISFIFO(mode):
            raise PipeError("not_a_pipe", f"{path} is not a named pipe.")
        try:
            fd = os.open(path, os.O_RDWR | os.O_NONBLOCK)
        except OSError as e:
            raise PipeError("return_pipe_unavailable", f"Couldn't connect to {path}: {e.strerror}") from e

        pipe = os.fdopen(fd, "rb", buffering=0)
        loop = asyncio.get_running_loop()
        reader = asyncio.StreamReader(limit=_CHUNK_LIMIT)
        try:
            transport, _ = await loop.connect_read_pipe(lambda: asyncio.StreamReaderProtocol(reader), pipe)
        except BaseException:
            pipe.close()
            raise
        logger.debug("Listening on return pipe %s", path)
        return cls(reader, transport)

    async def read_next(self) -> str | None:
        """Wait for the next reply line.

        Returns:
            The line without its line terminator, or None once the pipe reports EOF.
            A final line without a newline is returned as is. Lines have no length limit.

        """
        data = await self._read_line()
        if not data:
            return None
        line = data.decode("utf-8", errors="replace")
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        logger.debug("Reply: %.200s", line)
        return line

    async def _read_line(self) -> bytes:
        """Read up to and including the next newline, or whatever is left at EOF."""
        chunks: list[bytes] = []
        while True:
            try:
                chunks.append(await self._reader.readuntil(b"\n"))
            except asyncio.IncompleteReadError as e:
                chunks.append(e.partial)
            except asyncio.LimitOverrunError as e:
                # Line longer than the buffer limit: take what is buffered and keep reading
                chunks.append(await self._reader.readexactly(e.consumed))
                continue
            return b"".join(chunks)

    def close(self) -> None:
        """Detach from the event loop and close the pipe. Safe to call more than once."""
        if self._transport is not None:
            self._transport.close()
            self._transport = None

    async def __aenter__(self) -> "ReturnListener":
        return self

    async def __aexit__(self, exc_type: type[BaseException] | None, exc: BaseException | None, tb: TracebackType | None) -> None:
        self.close()
