"""Tests for logging setup."""

from __future__ import annotations

import json
import logging
import subprocess
import sys
import textwrap
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
import structlog

import copy_dir
from copy_dir.logger import logger, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator

PROJECT_ROOT = Path(copy_dir.__file__).resolve().parent.parent

IMPORT_CHECK = textwrap.dedent(
    """
    import json, logging
    import structlog

    structlog.configure(processors=[structlog.processors.JSONRenderer()])
    before = structlog.get_config()["processors"]
    handlers_before = list(logging.getLogger().handlers)

    import copy_dir

    print(json.dumps({
        "processors_unchanged": structlog.get_config()["processors"] == before,
        "root_handlers_unchanged": logging.getLogger().handlers == handlers_before,
    }))
    """
)


class TestImportSideEffects:
    def test_import_keeps_host_logging_config(self) -> None:
        result = subprocess.run(
            [sys.executable, "-c", IMPORT_CHECK], capture_output=True, text=True, check=True, cwd=PROJECT_ROOT
        )
        assert json.loads(result.stdout) == {"processors_unchanged": True, "root_handlers_unchanged": True}


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def _restore(self) -> Iterator[None]:
        root = logging.getLogger()
        handlers = list(root.handlers)
        level = root.level
        yield
        structlog.reset_defaults()
        for handler in root.handlers[:]:
            if handler not in handlers:
                root.removeHandler(handler)
        root.setLevel(level)

    def test_configures_console_renderer_on_request(self) -> None:
        returned = setup_logging("DEBUG")
        assert returned is logger
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_logger_routes_through_stdlib(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="copy_dir"):
            logger.warning("Routed message", path="/src/x")
        assert "Routed message" in caplog.text
        assert caplog.records[0].name == "copy_dir"
