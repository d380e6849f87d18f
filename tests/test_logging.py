"""Tests for logging configuration."""

import json
import logging

import pytest

from create_joji_app.logging_config import ConsoleFormatter, JSONFormatter, setup_logging


def make_record(msg="Test message", level=logging.INFO):
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestJSONFormatter:
    """Tests for JSON log formatter."""

    def test_basic_format(self):
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test"
        assert data["message"] == "Test message"
        assert data["timestamp"].endswith("Z")

    def test_extra_fields(self):
        record = make_record("Command finished")
        record.project = "my-app"
        record.command = "npm install"
        record.exit_code = 0
        record.duration_ms = 1500.5

        data = json.loads(JSONFormatter().format(record))

        assert data["project"] == "my-app"
        assert data["command"] == "npm install"
        assert data["exit_code"] == 0
        assert data["duration_ms"] == 1500.5
        assert "step" not in data

    def test_exception_included(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            import sys
            record = logging.LogRecord(
                "test", logging.ERROR, "test.py", 1, "failed", (), sys.exc_info()
            )

        data = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: boom" in data["exception"]


class TestConsoleFormatter:
    """Tests for console log formatter."""

    def test_basic_format(self):
        output = ConsoleFormatter().format(make_record())

        assert "INFO" in output
        assert "Test message" in output
        assert "test" in output

    def test_extra_fields_in_brackets(self):
        record = make_record("Step done")
        record.project = "my-app"
        record.step = "install"

        output = ConsoleFormatter().format(record)

        assert "[project=my-app, step=install]" in output


class TestSetupLogging:
    """Tests for logging setup."""

    @pytest.fixture(autouse=True)
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_single_handler(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_default_level_is_warning(self):
        setup_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_debug_mode_sets_debug_level(self):
        setup_logging(debug=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_json_formatter_selected(self):
        setup_logging(json_logs=True)
        assert isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)
