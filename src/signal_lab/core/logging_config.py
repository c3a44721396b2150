"""
Centralized Logging Configuration

Unified logging setup for all Signal Lab components.
Library modules only create loggers; handlers are installed by the
application (the CLI) through setup_logging().

Usage:
    from signal_lab.core.logging_config import setup_logging, get_logger

    # Initialize logging once at application startup
    setup_logging(level="DEBUG", log_file="signal_lab.log")

    # Get logger in any module
    logger = get_logger(__name__)
    logger.debug("Sweep started", extra={"steps": 20})
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path

# Attributes every LogRecord carries; anything else came from extra={}
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "message",
        "taskName",
    }
)

# =============================================================================
# Custom Formatters
# =============================================================================


class StructuredFormatter(logging.Formatter):
    """
    JSON structured log formatter.
    Includes timestamp, level, logger name, message, and any extra fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.pathname:
            log_entry["file"] = f"{record.pathname}:{record.lineno}"

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_entry[key] = value

        return json.dumps(log_entry, default=str)


class ColoredFormatter(logging.Formatter):
    """
    Colored console formatter for interactive use.
    Uses ANSI color codes for better readability.
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        # Work on a copy so other handlers see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


# =============================================================================
# Logger Setup Functions
# =============================================================================

_initialized = False

CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str | int = "INFO",
    log_file: str | None = None,
    structured: bool = False,
    colored: bool = True,
    max_bytes: int = 5_000_000,  # 5 MB
    backup_count: int = 3,
    force: bool = False,
) -> None:
    """
    Initialize logging configuration for the application.

    Should be called once at startup, typically in main().
    Subsequent calls are ignored unless force=True.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file (always JSON formatted)
        structured: Use JSON structured format on the console too
        colored: Use colored console output when attached to a terminal
        max_bytes: Max size of log file before rotation
        backup_count: Number of rotated log files to keep
        force: Reconfigure even if logging was already initialized
    """
    global _initialized
    if _initialized and not force:
        return

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing handlers (prevents duplicate logs)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    if structured:
        console_handler.setFormatter(StructuredFormatter())
    elif colored and sys.stderr.isatty():
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, DATE_FORMAT))
    else:
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))

    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    _initialized = True

    root_logger.debug(
        "Logging initialized",
        extra={
            "level_name": logging.getLevelName(level),
            "log_file": log_file,
            "structured": structured,
        },
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def set_level(logger_name: str, level: str | int) -> None:
    """
    Set the logging level for a specific logger.

    Args:
        logger_name: Name of the logger to configure
        level: New logging level
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.getLogger(logger_name).setLevel(level)


# =============================================================================
# Performance Logging
# =============================================================================


def log_performance(logger: logging.Logger, operation: str, duration_ms: float, **extra) -> None:
    """
    Log a performance metric at DEBUG level.

    Args:
        logger: Logger instance
        operation: Name of the operation being measured
        duration_ms: Duration in milliseconds
        **extra: Additional context fields
    """
    logger.debug(
        f"Performance: {operation} took {duration_ms:.2f} ms",
        extra={
            "operation": operation,
            "duration_ms": round(duration_ms, 2),
            "metric_type": "performance",
            **extra,
        },
    )
