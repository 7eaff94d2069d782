"""Server configuration and logging setup."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


LOG_LEVELS = ("debug", "info", "warning", "error")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 2087


@dataclass
class ServerConfig:
    """Settings the server is started with."""

    tcp: bool = False
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "warning"
    log_file: Optional[Path] = None


def configure_logging(config: ServerConfig) -> None:
    """
    Send log records to stderr or to the configured log file.

    stdout is never used: on the stdio transport it carries the protocol.

    Raises:
        OSError: If the log file cannot be opened.
    """
    if config.log_file is not None:
        handler: logging.Handler = logging.FileHandler(config.log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.addHandler(handler)
    apply_log_level(config.log_level)


def apply_log_level(raw: Optional[str]) -> None:
    """Set the root logger level from a string like 'debug', 'warning', etc."""
    if not raw:
        return
    level = getattr(logging, raw.upper(), None)
    if isinstance(level, int):
        logging.getLogger().setLevel(level)
