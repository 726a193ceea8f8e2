"""Logging configuration for fifoctl."""

import logging
from logging.handlers import RotatingFileHandler

from fifoctl.config import Config


def setup_logging(cfg: Config) -> None:
    """Attach a rotating file handler to the package logger at the configured level.

    Records carry the client PID, since several clients may share one log file
    and one daemon. The first record names the pipes this invocation talks to.
    Idempotent: skips if a handler is already attached.
    """
    root = logging.getLogger("fifoctl")
    if root.handlers:
        return

    handler = RotatingFileHandler(cfg.log_path, maxBytes=1_000_000, backupCount=3)
    handler.setFormatter(
        logging.Formatter(fmt="%(asctime)s %(levelname)-8s [%(process)d] %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )

    root.setLevel(cfg.log_level)
    root.addHandler(handler)
    root.debug("Runtime dir %s, reply timeout %d ms", cfg.runtime_dir, cfg.reply_timeout_ms)
