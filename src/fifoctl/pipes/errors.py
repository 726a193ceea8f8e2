"""Setup errors for the command and return pipes."""


class PipeError(Exception):
    """A pipe could not be located, created or opened."""

    def __init__(self, code: str, message: str) -> None:
        """Initialize with a machine-readable code and a human-readable message.

        Args:
            code: Machine-readable error code (e.g. "command_pipe_missing").
            message: Human-readable error description.

        """
        super().__init__(message)
        self.code = code
