"""Logging configuration utilities for quadrature.

By default the library is silent (NullHandler). Validation failures and
non-converging adaptive runs are logged on the ``quadrature`` logger tree;
call one of the functions here to see them.

Example usage:
    import quadrature

    # Simple console logging
    quadrature.enable_console_logging(level="DEBUG")

    # Rotating file logging
    quadrature.enable_file_logging("quadrature.log", max_bytes=10_000_000)

    # JSON logging for log aggregation
    quadrature.enable_json_logging()

    # Configure from environment variables
    quadrature.configure_from_env()

Environment variables:
    QUAD_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    QUAD_LOG_FILE: Path to log file (enables rotating file logging)
    QUAD_LOG_JSON: Set to "1" for JSON output
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

__all__ = [
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 5

LOGGER_NAME = "quadrature"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonFormatter(logging.Formatter):
    """Formats log records as one JSON object per line.

    Example output:
        {"timestamp": "2024-01-15T10:30:00.123456+00:00", "level": "ERROR",
         "logger": "quadrature.dispatch", "message": "Limits must differ: ..."}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def _get_level(level: str | int) -> int:
    """Convert a level string or int to a logging level constant."""
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _clear_handlers() -> None:
    """Remove and close all handlers except NullHandler."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def _install(handler: logging.Handler, level: LogLevel | int) -> None:
    logger = _get_logger()
    logger.setLevel(_get_level(level))
    handler.setLevel(_get_level(level))
    logger.addHandler(handler)


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Enable console (stderr) logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) or int.
        format: Log message format string.
        date_format: Date format string for %(asctime)s.

    Returns:
        The created StreamHandler.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format, date_format))
    _install(handler, level)
    return handler


def enable_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> RotatingFileHandler:
    """Enable rotating file logging.

    Args:
        path: Path to the log file. Parent directories are created automatically.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) or int.
        max_bytes: Maximum size of each log file in bytes. Default 10 MB.
        backup_count: Number of backup files to keep. Default 5.
        format: Log message format string.
        date_format: Date format string for %(asctime)s.

    Returns:
        The created RotatingFileHandler.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)
    handler.setFormatter(logging.Formatter(format, date_format))
    _install(handler, level)
    return handler


def enable_json_logging(
    level: LogLevel | int = "INFO",
    path: str | Path | None = None,
) -> logging.Handler:
    """Enable JSON logging to stderr, or to a rotating file if path is given.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) or int.
        path: Optional log file path.

    Returns:
        The created handler with JsonFormatter.
    """
    if path is None:
        handler: logging.Handler = logging.StreamHandler()
    else:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            path, maxBytes=DEFAULT_MAX_BYTES, backupCount=DEFAULT_BACKUP_COUNT
        )
    handler.setFormatter(JsonFormatter())
    _install(handler, level)
    return handler


def configure_from_env() -> None:
    """Configure logging from QUAD_LOGGING, QUAD_LOG_FILE and QUAD_LOG_JSON.

    Does nothing if neither QUAD_LOGGING nor QUAD_LOG_FILE is set.
    """
    level = os.environ.get("QUAD_LOGGING", "").upper()
    log_file = os.environ.get("QUAD_LOG_FILE", "")
    use_json = os.environ.get("QUAD_LOG_JSON", "") == "1"

    if not level and not log_file:
        return

    level = level or "INFO"

    if use_json:
        enable_json_logging(level=level, path=log_file or None)
    elif log_file:
        enable_file_logging(log_file, level=level)
    else:
        enable_console_logging(level=level)


def set_level(level: LogLevel | int) -> None:
    """Set the log level of the quadrature logger."""
    _get_logger().setLevel(_get_level(level))


def set_module_level(module: str, level: LogLevel | int) -> None:
    """Set the log level for one submodule.

    Args:
        module: Module name relative to quadrature (e.g., "adaptive").
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) or int.

    Example:
        >>> quadrature.enable_console_logging(level="WARNING")
        >>> quadrature.set_module_level("adaptive", "DEBUG")  # per-level residuals
    """
    logging.getLogger(f"{LOGGER_NAME}.{module}").setLevel(_get_level(level))


def disable_logging() -> None:
    """Remove all handlers and silence the quadrature logger."""
    logger = _get_logger()
    _clear_handlers()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
