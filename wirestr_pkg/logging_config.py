"""Structured logging configuration for wirestr.

All package loggers live under the ``wirestr`` namespace. Nothing is emitted
until ``setup_logging`` attaches handlers (the CLI does this on start-up).
"""

import logging
import sys
from datetime import datetime
from typing import Optional

LOGGER_NAME = "wirestr"


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs structured log entries with timestamp, module, level, and message."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        return f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"


def setup_logging(
    level: str = "INFO", log_file: Optional[str] = None
) -> logging.Logger:
    """Set up structured logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs (if None, logs to stderr)

    Returns:
        Configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False

    # Calling twice replaces the handlers instead of duplicating output
    logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

    return logger


def get_logger(name: str = "") -> logging.Logger:
    """Get the logger for one part of the package.

    Args:
        name: Short component name ("evaluator") or a module ``__name__``

    Returns:
        Logger named ``wirestr.<component>``
    """
    component = name.rsplit(".", 1)[-1]
    return logging.getLogger(f"{LOGGER_NAME}.{component}" if component else LOGGER_NAME)
