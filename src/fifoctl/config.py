"""Centralized application configuration."""

import os
import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

DEFAULT_APP_NAME = "fifoctl"
DEFAULT_DATA_DIR = Path.home() / ".local" / "fifoctl"
DEFAULT_REPLY_TIMEOUT_MS = 5000
DEFAULT_LOG_LEVEL = "DEBUG"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

COMMAND_PIPE_NAME = "commands.pipe"
RETURN_PIPE_NAME = "return.pipe"


def default_runtime_dir(app_name: str) -> Path:
    """Per-application runtime directory under $XDG_RUNTIME_DIR, or a per-user /tmp fallback."""
    base = os.environ.get("XDG_RUNTIME_DIR")
    if base:
        return Path(base) / app_name
    return Path("/tmp") / f"{app_name}-{os.getuid()}"  # noqa: S108  # nosec B108


class Config(BaseModel):
    """Application-wide configuration."""

    model_config = ConfigDict(frozen=True)

    app_name: str = Field(default=DEFAULT_APP_NAME, min_length=1, description="Runtime directory prefix")
    runtime_dir: Path = Field(description="Directory holding the command and return pipes")
    data_dir: Path = Field(description="Directory holding config.toml and the log file")
    reply_timeout_ms: int = Field(default=DEFAULT_REPLY_TIMEOUT_MS, ge=1, description="Wait for a reply, in milliseconds")
    log_level: LogLevel = Field(default=DEFAULT_LOG_LEVEL, description="Minimum level written to the log file")

    @computed_field(description="Command pipe (client → daemon)")
    @property
    def command_pipe_path(self) -> Path:
        """Command pipe (client → daemon)."""
        return self.runtime_dir / COMMAND_PIPE_NAME

    @computed_field(description="Return pipe (daemon → client)")
    @property
    def return_pipe_path(self) -> Path:
        """Return pipe (daemon → client)."""
        return self.runtime_dir / RETURN_PIPE_NAME

    @computed_field(description="Optional TOML configuration file")
    @property
    def config_path(self) -> Path:
        """Optional TOML configuration file."""
        return self.data_dir / "config.toml"

    @computed_field(description="Log file")
    @property
    def log_path(self) -> Path:
        """Log file."""
        return self.data_dir / "fifoctl.log"

    @property
    def reply_timeout(self) -> float:
        """Reply timeout in seconds."""
        return self.reply_timeout_ms / 1000

    @staticmethod
    def build(runtime_dir: Path | None = None, data_dir: Path | None = None) -> "Config":
        """Build a Config from defaults, optional config.toml and CLI overrides."""
        resolved_data_dir = data_dir if data_dir is not None else DEFAULT_DATA_DIR
        config_path = resolved_data_dir / "config.toml"

        kwargs: dict[str, Any] = {"data_dir": resolved_data_dir}
        if config_path.is_file():
            with config_path.open("rb") as f:
                toml_data = tomllib.load(f)
            if isinstance(toml_data.get("app_name"), str):
                kwargs["app_name"] = toml_data["app_name"]
            # TOML booleans are ints to isinstance()
            timeout = toml_data.get("reply_timeout_ms")
            if isinstance(timeout, int) and not isinstance(timeout, bool):
                kwargs["reply_timeout_ms"] = timeout
            if isinstance(toml_data.get("log_level"), str):
                kwargs["log_level"] = toml_data["log_level"].upper()

        app_name = kwargs.get("app_name", DEFAULT_APP_NAME)
        kwargs["runtime_dir"] = runtime_dir if runtime_dir is not None else default_runtime_dir(app_name)
        return Config(**kwargs)
