"""JSON-lines logging to stderr for the wapp CLI.

stdout is reserved for the weather response body, so every log record goes
to stderr with API keys redacted.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

from .redaction import sanitize_text


class JsonConsoleFormatter(logging.Formatter):
    """One JSON object per record: ts, level, logger, message[, exception]."""

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": sanitize_text(record.getMessage()),
        }
        if record.exc_info:
            event["exception"] = sanitize_text(self.formatException(record.exc_info))
        return json.dumps(event, default=str)


def setup_logger(name: str = "wapp", level: int | str = logging.WARNING) -> logging.Logger:
    """Return the CLI logger, attaching the stderr JSON handler on first use.

    Provider loggers live under the same name (``wapp.weather.*``) and reuse
    this handler through propagation.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(JsonConsoleFormatter())
    logger.addHandler(handler)
    return logger
