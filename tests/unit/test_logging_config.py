# tests/unit/test_logging_config.py
"""
Tests for stderr logging configuration.
"""

import json
import logging
import sys

import pytest

from swms_compliance.logging_config import JsonFormatter, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJsonFormatter:
    def test_formats_json_line(self):
        record = logging.LogRecord(
            "swms_compliance.compliance.analyzer", logging.INFO, __file__, 1,
            "Analyzed %d assessment(s)", (3,), None,
        )

        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "swms_compliance.compliance.analyzer"
        assert data["msg"] == "Analyzed 3 assessment(s)"
        assert "ts" in data
        assert "exc" not in data

    def test_includes_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )

        data = json.loads(JsonFormatter().format(record))

        assert "ValueError: boom" in data["exc"]


class TestConfigureLogging:
    @pytest.mark.parametrize(
        "verbosity,level",
        [("quiet", logging.WARNING), ("normal", logging.INFO), ("verbose", logging.DEBUG)],
    )
    def test_levels(self, restore_root_logger, verbosity, level):
        configure_logging(verbosity)
        assert restore_root_logger.level == level

    def test_single_stderr_handler(self, restore_root_logger):
        configure_logging("normal", json_format=False)

        assert len(restore_root_logger.handlers) == 1
        handler = restore_root_logger.handlers[0]
        assert handler.stream is sys.stderr
        assert not isinstance(handler.formatter, JsonFormatter)

    def test_json_by_default(self, restore_root_logger):
        configure_logging()
        assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)

    def test_quiets_aiosqlite(self, restore_root_logger):
        configure_logging("verbose")
        assert logging.getLogger("aiosqlite").level == logging.WARNING
