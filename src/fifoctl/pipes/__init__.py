"""Named-pipe transport: pipe paths, command writer, return listener, reply parsing."""

from fifoctl.pipes.errors import PipeError as PipeError
from fifoctl.pipes.listener import ReturnListener as ReturnListener
from fifoctl.pipes.locator import PipeLocator as PipeLocator
from fifoctl.pipes.reply import Reply as Reply
from fifoctl.pipes.reply import ReplyStatus as ReplyStatus
from fifoctl.pipes.writer import CommandWriter as CommandWriter
