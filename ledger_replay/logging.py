"""Structured logging configuration for ledger-replay.

Diagnostics (rejections, skipped rows, summaries) are written to stderr so
that stdout carries nothing but the account table.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

PACKAGE_LOGGER = "ledger_replay"
STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
QUIET_LOGGERS = ("confluent_kafka", "faker")


def _resolve_level(level: str) -> int:
    value = getattr(logging, level.upper(), None)
    return value if isinstance(value, int) else logging.INFO


def _build_formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return JsonFormatter()
    return logging.Formatter(fmt=STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Configure logging for ledger-replay.

    Parameters
    ----------
    level : str
        Log level name. Unknown names fall back to INFO.
    format_type : str
        Format type: "standard" or "json".
    stream : TextIO | None
        Destination stream. Defaults to stderr.
    """
    log_level = _resolve_level(level)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(_build_formatter(format_type))

    # One handler on the root logger; repeated calls replace it.
    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger(PACKAGE_LOGGER).setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # extra={"extra": {...}} on the logging call
        if hasattr(record, "extra"):
            log_data.update(record.extra)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name (usually ``__name__``)."""
    return logging.getLogger(name)
