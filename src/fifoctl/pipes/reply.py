"""Reply lines read from the return pipe.

A reply is one line of text. By convention it starts with a status token and a
space, followed by a message:

    OK: <message>
    ERROR: <message>

Anything else, including a line without a space, is an unrecognized reply.
"""

from dataclasses import dataclass
from enum import Enum

OK_TOKEN = "OK:"
ERROR_TOKEN = "ERROR:"


class ReplyStatus(Enum):
    """Classification of a reply by its leading token."""

    OK = "ok"
    ERROR = "error"
    UNRECOGNIZED = "unrecognized"


def split_reply(line: str) -> tuple[str, str]:
    """Split a reply at the first space into (token, message).

    A line without a space yields the whole line as the token and an empty message.
    """
    token, _, message = line.partition(" ")
    return token, message


@dataclass(frozen=True)
class Reply:
    """A parsed reply line."""

    raw: str
    token: str
    message: str
    status: ReplyStatus

    @staticmethod
    def parse(line: str) -> "Reply":
        """Parse and classify a reply line. Never raises."""
        token, message = split_reply(line)
        has_separator = " " in line
        if has_separator and token == OK_TOKEN:
            status = ReplyStatus.OK
        elif has_separator and token == ERROR_TOKEN:
            status = ReplyStatus.ERROR
        else:
            status = ReplyStatus.UNRECOGNIZED
        return Reply(raw=line, token=token, message=message, status=status)
