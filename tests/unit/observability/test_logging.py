"""Unit tests for logging configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from qc_export.observability.logging import JsonLoggerFactory, get_logger


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestJsonLoggerFactory:
    def test_installs_single_root_handler(self) -> None:
        JsonLoggerFactory.configure(logging.DEBUG)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_accepts_level_name(self) -> None:
        JsonLoggerFactory.configure("warning")
        assert logging.getLogger().level == logging.WARNING

    def test_stdlib_records_render_as_json(self, capsys) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        logging.getLogger("qc_export.test").info("export.created rows=%d", 3)
        err = capsys.readouterr().err.strip().splitlines()[-1]
        parsed = json.loads(err)
        assert parsed["event"] == "export.created rows=3"
        assert parsed["level"] == "info"


class TestGetLogger:
    def test_bind_initial_values(self) -> None:
        logger = get_logger("x", model="export")
        assert logger is not None
        assert hasattr(logger, "info")
