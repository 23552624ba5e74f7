"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Expose the package logger and an opt-in setup for console and file output.
Why: A library must stay silent until its consumer asks for handlers.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console

from fsguard.core.events import LOGGER_NAME, logger

from .handlers import PathRichHandler

LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
LOG_FILE_BACKUP_COUNT: Final[int] = 5


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Set up and configure the fsguard logger."""

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG)

    for handler in list(package_logger.handlers):
        handler.close()
    package_logger.handlers.clear()

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    rich_console = console or Console(stderr=True, soft_wrap=True)
    console_handler = PathRichHandler(console=rich_console)
    console_handler.setLevel(console_level)
    package_logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        package_logger.addHandler(file_handler)

    return package_logger


__all__ = ["LOGGER_NAME", "logger", "setup_logger"]
