"""Tests for logging configuration."""

import json
import logging
import sys

import pytest

from botadmin.logging_config import ConsoleFormatter, JSONFormatter, setup_logging


def _record(msg: str = "Test message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after setup_logging runs."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJSONFormatter:
    """Tests for JSON log formatter."""

    def test_basic_format(self):
        """Test basic JSON log format."""
        data = json.loads(JSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test"
        assert data["message"] == "Test message"
        assert data["timestamp"].endswith("Z")

    def test_request_fields(self):
        """Test request extras are included."""
        record = _record("http_request")
        record.method = "GET"
        record.path = "/api/parameters"
        record.status_code = 200
        record.duration_ms = 12.5
        record.client_ip = "127.0.0.1"

        data = json.loads(JSONFormatter().format(record))

        assert data["method"] == "GET"
        assert data["path"] == "/api/parameters"
        assert data["status_code"] == 200
        assert data["duration_ms"] == 12.5
        assert data["client_ip"] == "127.0.0.1"

    def test_domain_fields(self):
        """Test parameter and command extras are included."""
        record = _record("Created parameter")
        record.parameter_id = 7
        record.command_count = 4

        data = json.loads(JSONFormatter().format(record))

        assert data["parameter_id"] == 7
        assert data["command_count"] == 4

    def test_absent_extras_omitted(self):
        """Test fields not on the record are left out."""
        data = json.loads(JSONFormatter().format(_record()))
        assert "method" not in data
        assert "parameter_id" not in data

    def test_exception_included(self):
        """Test exception text is captured."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("test", logging.ERROR, "test.py", 1, "failed", (), sys.exc_info())

        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in data["exception"]


class TestConsoleFormatter:
    """Tests for console log formatter."""

    def test_basic_format(self):
        """Test basic console format includes level and message."""
        output = ConsoleFormatter().format(_record())

        assert "INFO" in output
        assert "Test message" in output
        assert "test" in output

    def test_extra_fields_in_brackets(self):
        """Test extra fields appear in brackets."""
        record = _record("Request")
        record.method = "DELETE"
        record.path = "/api/parameters/3"
        record.parameter_id = 3

        output = ConsoleFormatter().format(record)

        assert "DELETE /api/parameters/3" in output
        assert "parameter=3" in output


class TestSetupLogging:
    """Tests for logging setup."""

    def test_replaces_handlers(self, restore_root_logger):
        """Test setup_logging leaves exactly one root handler."""
        setup_logging(debug=False, json_logs=True)
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)

    def test_debug_mode_sets_debug_level(self, restore_root_logger):
        """Test debug mode sets DEBUG level and console output."""
        setup_logging(debug=True, json_logs=True)
        assert restore_root_logger.level == logging.DEBUG
        assert isinstance(restore_root_logger.handlers[0].formatter, ConsoleFormatter)

    def test_non_debug_sets_info_level(self, restore_root_logger):
        """Test non-debug mode sets INFO level."""
        setup_logging(debug=False, json_logs=False)
        assert restore_root_logger.level == logging.INFO

    def test_quiets_sqlalchemy(self, restore_root_logger):
        """Test SQL echo noise is suppressed."""
        setup_logging()
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
