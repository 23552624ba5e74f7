"""Tests for the core logger and its event identifiers."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

from fsguard.core.events import LOGGER_NAME, FsEvent, logger
from fsguard.platform import logging as platform_logging

SRC_DIR: Path = Path(__file__).resolve().parents[2] / "src"


def test_platform_logging_reexports_core_logger() -> None:
    assert platform_logging.logger is logger
    assert platform_logging.FsEvent is FsEvent
    assert logging.getLogger(LOGGER_NAME) is logger


def test_importing_core_does_not_load_rich() -> None:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))

    result = subprocess.run(
        [
            sys.executable,
            "-c",
            "import sys, fsguard; fsguard.classify_path('.'); print('rich' in sys.modules)",
        ],
        capture_output=True,
        text=True,
        env=env,
        check=True,
    )

    assert result.stdout.strip() == "False"
