"""
Write status codes, raw bodies and JSON payloads onto a response sink.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, Optional

from pydantic import BaseModel

from .config import get_settings
from .errors import SerializationFailure, WriteFailure
from .sink import ResponseSink

logger = logging.getLogger(__name__)


def _default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json(payload: Any) -> bytes:
    """
    Encode ``payload`` into the compact UTF-8 JSON used for response bodies.

    Raises:
        SerializationFailure: the payload holds a value JSON cannot represent
            (callables, cyclic structures, NaN, unknown types).
    """
    try:
        text = json.dumps(
            payload,
            default=_default,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationFailure(exc) from exc
    return text.encode("utf-8")


def write_raw(sink: ResponseSink, status: int, data: Optional[bytes] = None) -> None:
    """
    Commit ``status`` on the sink, then write ``data`` as the body.

    ``Content-Length`` is left to the transport.

    Raises:
        WriteFailure: the sink failed while writing; the original error is
            chained and available as ``cause``.
    """
    body = data or b""
    sink.write_header(status)
    try:
        sink.write(body)
    except Exception as exc:
        raise WriteFailure(exc) from exc
    logger.debug("response_written", extra={"status": status, "bytes": len(body)})


def write_json(sink: ResponseSink, status: int, payload: Any = None) -> None:
    """
    Serialise ``payload`` to JSON and write it with a JSON content type.

    A ``None`` payload writes an empty body without touching headers. The
    sink is not touched at all when serialisation fails.

    Raises:
        SerializationFailure: ``payload`` is not representable as JSON.
        WriteFailure: the sink failed while writing.
    """
    if payload is None:
        write_raw(sink, status, None)
        return

    body = encode_json(payload)
    sink.headers["Content-Type"] = get_settings().json_content_type
    write_raw(sink, status, body)
