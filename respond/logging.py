"""
JSON-lines logging for response writes and respond errors.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO

from .config import get_settings

# Extras attached by the responder (status, bytes) and the error handler.
RECORD_EXTRAS = ("request_id", "status", "bytes", "error_kind")


class JsonFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        payload.update(_extras(record))

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack_info"] = record.stack_info

        return json.dumps(payload, ensure_ascii=False)


def _extras(record: logging.LogRecord) -> Dict[str, Any]:
    found = {key: getattr(record, key, None) for key in RECORD_EXTRAS}
    return {key: value for key, value in found.items() if value is not None}


def configure_logging(stream: Optional[TextIO] = None) -> logging.Handler:
    """
    Route the root logger through a single JSON handler.

    Writes to stdout unless ``stream`` is given. Returns the installed handler.
    """

    root = logging.getLogger()
    root.setLevel(get_settings().log_level.upper())

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonFormatter())

    # Remove existing handlers so reconfiguration is idempotent.
    for existing in list(root.handlers):
        root.removeHandler(existing)

    root.addHandler(handler)
    return handler
