"""JSON logging with stable schema."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from comparators.common.constants import JSON_LOG_FIELDS, LOGGER_NAMESPACE
from comparators.common.fs import ensure_dir
from comparators.common.time_utils import utc_timestamp_iso


class JsonLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": utc_timestamp_iso(),
            "logger": record.name,
            "level": record.levelname,
            "event": getattr(record, "event", None),
            "profile": getattr(record, "profile", None),
            "terms": getattr(record, "terms", None),
            "direction": getattr(record, "direction", None),
            "source": getattr(record, "source", None),
            "error_code": getattr(record, "error_code", None),
            "message": record.getMessage(),
        }
        for field in JSON_LOG_FIELDS:
            payload.setdefault(field, None)
        return json.dumps(payload, ensure_ascii=False, default=str)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def build_logger(level: str = "INFO", log_path: Path | None = None) -> logging.Logger:
    """Attach JSON handlers to the library's root logger.

    The library never configures handlers on import; applications call this
    once to see build and profile events.
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level.upper())
    logger.handlers.clear()

    stream = logging.StreamHandler()
    stream.setFormatter(JsonLineFormatter())
    logger.addHandler(stream)

    if log_path is not None:
        ensure_dir(log_path.parent)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(JsonLineFormatter())
        logger.addHandler(file_handler)

    return logger


def log_event(logger: logging.Logger, message: str, *, level: int = logging.DEBUG, **event_fields: Any) -> None:
    logger.log(level, message, extra=event_fields)
