"""Shared pytest fixtures for the fsguard test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from fsguard.platform.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_logger() -> Iterator[logging.Logger]:
    """Restore the package logger's handlers and level after each test."""

    package_logger = logging.getLogger(LOGGER_NAME)
    original_handlers = list(package_logger.handlers)
    original_level = package_logger.level

    try:
        yield package_logger
    finally:
        for handler in package_logger.handlers:
            if handler not in original_handlers:
                handler.close()
        package_logger.handlers[:] = original_handlers
        package_logger.setLevel(original_level)
