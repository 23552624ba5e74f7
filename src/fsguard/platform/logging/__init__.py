"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the package logger, setup helper, and custom Rich handler.
Why: Provide a single canonical import path for logging concerns.
"""

from __future__ import annotations

from fsguard.core.events import LOGGER_NAME, FsEvent, logger

from .config import setup_logger
from .handlers import PathRichHandler

__all__ = [
    "FsEvent",
    "LOGGER_NAME",
    "PathRichHandler",
    "logger",
    "setup_logger",
]
