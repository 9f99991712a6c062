"""
Helpers for writing status codes, raw bodies and JSON payloads to HTTP responses.
"""

from __future__ import annotations

from .config import JSON_CONTENT_TYPE, Settings, get_settings
from .errors import RespondError, SerializationFailure, WriteFailure, register_exception_handlers
from .logging import configure_logging
from .responder import encode_json, write_json, write_raw
from .sink import HandlerSink, ResponseRecorder, ResponseSink

__all__ = [
    "JSON_CONTENT_TYPE",
    "HandlerSink",
    "RespondError",
    "ResponseRecorder",
    "ResponseSink",
    "SerializationFailure",
    "Settings",
    "WriteFailure",
    "configure_logging",
    "encode_json",
    "get_settings",
    "register_exception_handlers",
    "write_json",
    "write_raw",
]
