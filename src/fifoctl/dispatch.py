"""Command dispatch loop: send each command, wait for its reply, classify it.

Replies carry no request identifier. The reply read right after a command was
written is taken to belong to that command, so the daemon must answer every
command exactly once and in order. A reply that does not arrive in time breaks
that pairing for the rest of the batch, which is therefore abandoned.
"""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from fifoctl.config import DEFAULT_REPLY_TIMEOUT_MS, Config
from fifoctl.pipes.listener import ReturnListener
from fifoctl.pipes.locator import PipeLocator
from fifoctl.pipes.reply import Reply, ReplyStatus
from fifoctl.pipes.writer import CommandWriter

logger = logging.getLogger(__name__)


class CommandSender(Protocol):
    """Writes a single command line."""

    def send(self, command: str) -> None: ...


class ReplySource(Protocol):
    """Yields the next reply line, or None at end of stream."""

    async def read_next(self) -> str | None: ...


class Reporter(Protocol):
    """Console sink for per-command outcomes."""

    def print_ok(self, command: str, message: str) -> None: ...

    def print_reply_error(self, command: str, message: str) -> None: ...

    def print_unrecognized(self, command: str, raw: str) -> None: ...

    def print_write_error(self, command: str, error: OSError) -> None: ...

    def print_timeout(self, command: str) -> None: ...

    def print_closed(self, command: str) -> None: ...


class Outcome(Enum):
    """What happened to one command of a batch."""

    OK = "ok"
    ERROR = "error"
    UNRECOGNIZED = "unrecognized"
    WRITE_FAILED = "write_failed"
    TIMEOUT = "timeout"
    CLOSED = "closed"


_REPLY_OUTCOMES = {
    ReplyStatus.OK: Outcome.OK,
    ReplyStatus.ERROR: Outcome.ERROR,
    ReplyStatus.UNRECOGNIZED: Outcome.UNRECOGNIZED,
}

# Outcomes that leave the overall status successful
_SUCCESS_OUTCOMES = frozenset({Outcome.OK, Outcome.UNRECOGNIZED})

# Outcomes after which no further command is sent
_FATAL_OUTCOMES = frozenset({Outcome.TIMEOUT, Outcome.CLOSED})


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command, with the reply message or error text."""

    command: str
    outcome: Outcome
    message: str = ""


@dataclass
class DispatchResult:
    """Per-command results of a batch, in send order."""

    results: list[CommandResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True while every command was acknowledged without an error."""
        return all(r.outcome in _SUCCESS_OUTCOMES for r in self.results)

    @property
    def aborted(self) -> bool:
        """True if the batch stopped early because the return channel was lost."""
        return any(r.outcome in _FATAL_OUTCOMES for r in self.results)

    @property
    def timed_out(self) -> bool:
        """True if a reply did not arrive in time."""
        return any(r.outcome is Outcome.TIMEOUT for r in self.results)

    @property
    def exit_code(self) -> int:
        """Process exit code for the batch."""
        return 0 if self.ok else 1


async def dispatch(
    commands: Sequence[str],
    writer: CommandSender,
    listener: ReplySource,
    reporter: Reporter,
    timeout_ms: int = DEFAULT_REPLY_TIMEOUT_MS,
) -> DispatchResult:
    """Send commands one by one, pairing each with the next reply line.

    A command that cannot be written is reported and skipped without waiting
    for a reply. An ERROR reply is reported and the batch goes on. A missing
    reply (timeout or closed return pipe) is reported once and ends the batch.

    Args:
        commands: Command lines, sent in order and verbatim.
        writer: Command pipe.
        listener: Return pipe.
        reporter: Console sink for every outcome.
        timeout_ms: How long to wait for each reply.

    """
    result = DispatchResult()
    for command in commands:
        try:
            writer.send(command)
        except OSError as e:
            logger.warning("Couldn't write %r: %s", command, e)
            reporter.print_write_error(command, e)
            result.results.append(CommandResult(command, Outcome.WRITE_FAILED, str(e)))
            continue

        try:
            line = await asyncio.wait_for(listener.read_next(), timeout=timeout_ms / 1000)
        except TimeoutError:
            logger.warning("No reply to %r within %d ms, aborting batch", command, timeout_ms)
            reporter.print_timeout(command)
            result.results.append(CommandResult(command, Outcome.TIMEOUT))
            break

        if line is None:
            logger.warning("Return pipe closed while waiting for %r, aborting batch", command)
            reporter.print_closed(command)
            result.results.append(CommandResult(command, Outcome.CLOSED))
            break

        reply = Reply.parse(line)
        outcome = _REPLY_OUTCOMES[reply.status]
        match outcome:
            case Outcome.OK:
                reporter.print_ok(command, reply.message)
                result.results.append(CommandResult(command, outcome, reply.message))
            case Outcome.ERROR:
                logger.info("Daemon rejected %r: %s", command, reply.message)
                reporter.print_reply_error(command, reply.message)
                result.results.append(CommandResult(command, outcome, reply.message))
            case _:
                reporter.print_unrecognized(command, reply.raw)
                result.results.append(CommandResult(command, outcome, reply.raw))
    return result


async def run_batch(cfg: Config, commands: Sequence[str], reporter: Reporter) -> DispatchResult:
    """Resolve and open both pipes, dispatch the batch, and close the pipes.

    The return pipe is opened before the first command is written, so no reply
    can be missed. Both pipes are closed on every exit path.

    Raises:
        PipeError: A pipe could not be located or opened. Nothing was sent.

    """
    if not commands:
        return DispatchResult()

    locator = PipeLocator(cfg)
    command_path = locator.command_pipe()
    return_path = locator.return_pipe()

    async with await ReturnListener.open(return_path) as listener:
        with CommandWriter.open(command_path) as writer:
            logger.info("Dispatching %d command(s) to %s", len(commands), command_path)
            result = await dispatch(commands, writer, listener, reporter, timeout_ms=cfg.reply_timeout_ms)
    logger.info("Batch finished: exit code %d", result.exit_code)
    return result
