"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def settings_file(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes a TOML settings document and returns its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "config.toml"
        _ = path.write_text(content, encoding="utf-8")
        return path

    return _write
