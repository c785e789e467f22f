"""Structured logging helpers."""

from __future__ import annotations

from datetime import datetime, timezone
import json
import logging
from logging.handlers import RotatingFileHandler
from typing import Any

from .config import LoggingConfig

PACKAGE_LOGGER = "rf_link_budget"

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Format log records as JSON, one object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            # Include stack traces when provided.
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Configure the package logger and return it.

    Handlers are attached to the ``rf_link_budget`` logger rather than the root
    logger so a CGI invocation never writes log lines into the response stream.
    """

    # Map the string level to the logging module value.
    level = getattr(logging, config.level.upper(), logging.INFO)
    handler: logging.Handler
    if config.log_file:
        # Append-only request log with rotation.
        handler = RotatingFileHandler(
            config.log_file,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
        )
    else:
        # StreamHandler defaults to stderr.
        handler = logging.StreamHandler()

    formatter: logging.Formatter
    if config.json_logs:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    handler.setFormatter(formatter)

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    logger.addHandler(handler)
    logger.setLevel(level)
    # Records written to the log file must not also reach the last-resort stderr handler.
    logger.propagate = not config.log_file
    return logger
