"""
Centralised logging helper for the aslan environment client.

This module configures the ``aslan`` package logger so that it emits either
human-readable console lines (default) or structured JSON lines suitable for
log aggregators. Format and level are taken from ``ASLAN_LOG_FORMAT`` and
``ASLAN_LOG_LEVEL`` unless :func:`configure_logging` is called explicitly.

Usage
-----
from aslan.infrastructure.logging import get_logger
logger = get_logger(__name__)
logger.info("Something happened")
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone

from .request_context import current_request_id

PACKAGE_LOGGER = "aslan"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(message)s"

_configured: bool = False


class JsonFormatter(logging.Formatter):
    """Format log records as JSON for machine consumption."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        req_id = current_request_id.get(None)
        if req_id is not None:
            payload["request_id"] = req_id
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, separators=(",", ":"))


class RequestIdFilter(logging.Filter):
    """Inject the current request id into every record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.request_id = current_request_id.get(None)
        return True


def configure_logging(level: str | None = None, log_format: str | None = None) -> logging.Logger:
    """
    (Re)configure the package logger.

    Args:
        level: Logging level name; defaults to ``ASLAN_LOG_LEVEL`` or INFO
        log_format: ``console`` or ``json``; defaults to ``ASLAN_LOG_FORMAT``

    Returns:
        The configured ``aslan`` logger
    """
    global _configured

    level = (level or os.getenv("ASLAN_LOG_LEVEL", "INFO")).upper()
    log_format = (log_format or os.getenv("ASLAN_LOG_FORMAT", "console")).lower()

    handler: logging.Handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    if log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    # Reset handlers to avoid duplicate lines when reconfigured (e.g. in tests).
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.setLevel(getattr(logging, level, logging.INFO))
    logger.addHandler(handler)
    logger.propagate = False

    _configured = True
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger with the given *name*, ensuring package config is applied."""

    if not _configured:
        configure_logging()
    return logging.getLogger(name or PACKAGE_LOGGER)


def reset_logging_for_tests() -> None:
    """Clear handlers so tests can reconfigure logging cleanly."""

    global _configured
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    _configured = False
