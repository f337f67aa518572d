# testfacts/config/logging.py
"""
Logging setup for testfacts.

The library only emits records through ``logging.getLogger(__name__)``
loggers under the ``testfacts`` namespace; nothing is printed unless an
application attaches a handler. ``setup_logging`` is that opt-in.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

PACKAGE_LOGGER = "testfacts"


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in ("fact_kind", "truth", "messages_path"):
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Level name, e.g. "DEBUG"
        fmt: "text" for human-readable lines, "json" for structured records

    Returns:
        The handler that was attached, so callers can remove it again
    """
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
