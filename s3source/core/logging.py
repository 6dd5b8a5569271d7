"""Structured logging configuration for s3source."""

import logging
import sys
from typing import Optional

from json_log_formatter import JSONFormatter


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    reference_name: Optional[str] = None,
) -> None:
    """Configure logging for s3source.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, use JSON format; otherwise use normal format
        reference_name: Optional source reference name to include in every record
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("s3source")
    logger.setLevel(log_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = StructuredFormatter()

    handler.setFormatter(formatter)
    if reference_name:
        handler.addFilter(_ReferenceNameFilter(reference_name))
    logger.addHandler(handler)


class _ReferenceNameFilter(logging.Filter):
    def __init__(self, reference_name: str):
        super().__init__()
        self._reference_name = reference_name

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "reference_name"):
            record.reference_name = self._reference_name
        return True


class StructuredFormatter(logging.Formatter):
    """Structured formatter that adds context to log messages."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with context."""
        context = getattr(record, "context", {})

        parts = [f"[{record.levelname}]"]

        if hasattr(record, "reference_name"):
            parts.append(f"source={record.reference_name}")

        for key, value in context.items():
            parts.append(f"{key}={value}")

        parts.append(record.getMessage())

        return " ".join(parts)
