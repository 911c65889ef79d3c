"""Structured logger utilities."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Attributes the encoder attaches through ``extra=``.
ENCODER_LOG_FIELDS = ("tag", "size", "declared", "written")


class JsonFormatter(logging.Formatter):
    def __init__(self, extra_fields: tuple[str, ...] = ENCODER_LOG_FIELDS) -> None:
        super().__init__()
        self.extra_fields = extra_fields

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in self.extra_fields:
            if hasattr(record, name):
                payload[name] = getattr(record, name)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, separators=(",", ":"), default=str)


def get_logger(name: str = "wabinary", level: int = logging.INFO) -> logging.Logger:
    """Return ``name``'s logger with a single JSON stream handler attached."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
    return logger
