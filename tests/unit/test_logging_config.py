"""Unit tests for quadrature logging configuration."""

from __future__ import annotations

import json
import logging
import os
from logging.handlers import RotatingFileHandler
from unittest import mock

import quadrature
from quadrature.config import PrecisionConfig
from quadrature.logging_config import (
    LOGGER_NAME,
    JsonFormatter,
    _clear_handlers,
    _get_level,
    _get_logger,
)
from quadrature.request import IntegrationRequest


def degenerate_request() -> IntegrationRequest:
    return IntegrationRequest(limit_a=1.0, limit_b=1.0, n_splits=10, fn=lambda x: x)


class TestSilentByDefault:
    """Tests that the library is silent by default."""

    def test_import_produces_no_log_output(self, capfd):
        """Importing quadrature should not produce any log output."""
        import importlib

        importlib.reload(quadrature)

        captured = capfd.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_logger_has_null_handler(self):
        """The package logger carries a NullHandler."""
        logger = logging.getLogger(LOGGER_NAME)
        null_handlers = [h for h in logger.handlers if isinstance(h, logging.NullHandler)]
        assert len(null_handlers) >= 1


class TestEnableConsoleLogging:
    """Tests for enable_console_logging function."""

    def test_sets_level(self):
        """Console logging sets the logger level."""
        quadrature.enable_console_logging(level="DEBUG")
        assert _get_logger().level == logging.DEBUG

    def test_degenerate_interval_reported_on_stderr(self, capfd):
        """Validation failures reach the console once logging is enabled."""
        quadrature.enable_console_logging(level="INFO")

        assert quadrature.get_integral_value(degenerate_request(), "simpson") is None

        captured = capfd.readouterr()
        assert "Limits must differ" in captured.err
        assert "quadrature.dispatch" in captured.err

    def test_custom_format(self, capfd):
        """A custom format string is respected."""
        quadrature.enable_console_logging(level="INFO", format="[CUSTOM] %(message)s")

        logging.getLogger(f"{LOGGER_NAME}.test").info("hello")

        captured = capfd.readouterr()
        assert "[CUSTOM] hello" in captured.err


class TestEnableFileLogging:
    """Tests for enable_file_logging function."""

    def test_creates_parent_directories(self, tmp_path):
        """Missing parent directories are created."""
        log_file = tmp_path / "subdir" / "nested" / "test.log"
        quadrature.enable_file_logging(log_file)

        assert log_file.parent.exists()

    def test_writes_to_file(self, tmp_path):
        """Non-convergence warnings reach the log file."""
        log_file = tmp_path / "test.log"
        quadrature.enable_file_logging(log_file, level="WARNING")

        request = IntegrationRequest(0.0, 1.0, 10, lambda x: x)
        quadrature.evaluate(request, "left-square", True, PrecisionConfig(max_iterations=1))

        for handler in _get_logger().handlers:
            handler.flush()

        content = log_file.read_text()
        assert "adaptive integration stopped after 1 iterations" in content

    def test_respects_max_bytes(self, tmp_path):
        """Rotation limits are passed to the handler."""
        handler = quadrature.enable_file_logging(tmp_path / "test.log", max_bytes=1024, backup_count=3)

        assert handler.maxBytes == 1024
        assert handler.backupCount == 3


class TestEnableJsonLogging:
    """Tests for enable_json_logging function."""

    def test_outputs_valid_json(self, capfd):
        """Validation errors are emitted as JSON on stderr."""
        quadrature.enable_json_logging(level="INFO")

        quadrature.get_integral_value(degenerate_request(), "trapezoidal")

        captured = capfd.readouterr()
        data = json.loads(captured.err.strip())

        assert data["level"] == "ERROR"
        assert data["logger"] == "quadrature.dispatch"
        assert data["message"].startswith("Limits must differ")
        assert "timestamp" in data

    def test_writes_json_to_file(self, tmp_path):
        """JSON records are written to the given file."""
        log_file = tmp_path / "test.json"
        quadrature.enable_json_logging(level="INFO", path=log_file)

        logging.getLogger(f"{LOGGER_NAME}.test").info("json file test")

        for handler in _get_logger().handlers:
            handler.flush()

        data = json.loads(log_file.read_text().strip())
        assert data["message"] == "json file test"


class TestConfigureFromEnv:
    """Tests for configure_from_env function."""

    def test_respects_quad_logging_env(self):
        """QUAD_LOGGING sets the level."""
        with mock.patch.dict(os.environ, {"QUAD_LOGGING": "DEBUG"}, clear=False):
            quadrature.configure_from_env()

        assert _get_logger().level == logging.DEBUG

    def test_respects_quad_log_file_env(self, tmp_path):
        """QUAD_LOG_FILE enables rotating file logging."""
        log_file = tmp_path / "env_test.log"
        with mock.patch.dict(
            os.environ,
            {"QUAD_LOGGING": "INFO", "QUAD_LOG_FILE": str(log_file)},
            clear=False,
        ):
            quadrature.configure_from_env()

        rotating_handlers = [h for h in _get_logger().handlers if isinstance(h, RotatingFileHandler)]
        assert len(rotating_handlers) >= 1

    def test_respects_quad_log_json_env(self, capfd):
        """QUAD_LOG_JSON=1 switches to JSON output."""
        with mock.patch.dict(os.environ, {"QUAD_LOGGING": "INFO", "QUAD_LOG_JSON": "1"}, clear=False):
            quadrature.configure_from_env()

        logging.getLogger(f"{LOGGER_NAME}.test").info("json env test")

        captured = capfd.readouterr()
        data = json.loads(captured.err.strip())
        assert data["message"] == "json env test"

    def test_does_nothing_when_no_env_vars(self):
        """Without QUAD_* variables no handler is added."""
        initial_count = len(_get_logger().handlers)

        with mock.patch.dict(os.environ, {}, clear=True):
            quadrature.configure_from_env()

        assert len(_get_logger().handlers) == initial_count


class TestLevels:
    """Tests for set_level and set_module_level."""

    def test_sets_level_by_string(self):
        """set_level accepts level names."""
        quadrature.set_level("WARNING")
        assert _get_logger().level == logging.WARNING

    def test_sets_level_by_int(self):
        """set_level accepts level constants."""
        quadrature.set_level(logging.ERROR)
        assert _get_logger().level == logging.ERROR

    def test_module_level_filters_submodule(self, capfd):
        """Silencing dispatch hides its errors while adaptive warnings still appear."""
        quadrature.enable_console_logging(level="DEBUG")
        quadrature.set_module_level("dispatch", "CRITICAL")

        try:
            quadrature.get_integral_value(degenerate_request(), "simpson")
            request = IntegrationRequest(0.0, 1.0, 10, lambda x: x)
            quadrature.evaluate(request, "right-square", True, PrecisionConfig(max_iterations=1))
        finally:
            quadrature.set_module_level("dispatch", logging.NOTSET)

        captured = capfd.readouterr()
        assert "Limits must differ" not in captured.err
        assert "adaptive integration stopped" in captured.err


class TestDisableLogging:
    """Tests for disable_logging function."""

    def test_silences_all_output(self, capfd):
        """disable_logging silences even critical records."""
        quadrature.enable_console_logging(level="DEBUG")
        quadrature.disable_logging()

        logging.getLogger(f"{LOGGER_NAME}.test").critical("this should not appear")

        captured = capfd.readouterr()
        assert "this should not appear" not in captured.err

    def test_removes_non_null_handlers(self, tmp_path):
        """disable_logging removes every real handler."""
        quadrature.enable_console_logging()
        quadrature.enable_file_logging(tmp_path / "test.log")

        quadrature.disable_logging()

        non_null = [h for h in _get_logger().handlers if not isinstance(h, logging.NullHandler)]
        assert len(non_null) == 0


class TestJsonFormatter:
    """Tests for JsonFormatter class."""

    def test_format_with_exception(self):
        """Exception info is included in the JSON record."""
        formatter = JsonFormatter()
        try:
            raise ZeroDivisionError("n_splits is zero")
        except ZeroDivisionError:
            import sys

            exc_info = sys.exc_info()

        record = logging.LogRecord(
            name="quadrature.rules",
            level=logging.ERROR,
            pathname="rules.py",
            lineno=1,
            msg="error occurred",
            args=(),
            exc_info=exc_info,
        )

        data = json.loads(formatter.format(record))

        assert data["logger"] == "quadrature.rules"
        assert "ZeroDivisionError" in data["exception"]


class TestHelperFunctions:
    """Tests for internal helper functions."""

    def test_get_level_from_string(self):
        """Level names convert case-insensitively."""
        assert _get_level("DEBUG") == logging.DEBUG
        assert _get_level("info") == logging.INFO

    def test_get_level_default_for_invalid(self):
        """Unknown level names fall back to INFO."""
        assert _get_level("INVALID") == logging.INFO

    def test_clear_handlers_keeps_null_handler(self):
        """_clear_handlers keeps the NullHandler."""
        logger = _get_logger()
        logger.addHandler(logging.StreamHandler())

        _clear_handlers()

        null_handlers = [h for h in logger.handlers if isinstance(h, logging.NullHandler)]
        assert len(null_handlers) >= 1
