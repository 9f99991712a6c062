"""
Response sink protocol and the concrete sinks shipped with the library.
"""

from __future__ import annotations

from http.server import BaseHTTPRequestHandler
from typing import MutableMapping, Optional, Protocol, runtime_checkable

from fastapi.responses import Response
from starlette.datastructures import MutableHeaders


@runtime_checkable
class ResponseSink(Protocol):
    """Capability interface: header mutation, status commit and body write."""

    headers: MutableMapping[str, str]

    def write_header(self, status: int) -> None:
        ...

    def write(self, data: bytes) -> int:
        ...


class ResponseRecorder:
    """
    In-memory sink that records status, headers and body.

    Only the first committed status is kept. Writing before a status is
    committed implies 200. ``to_response`` hands the recorded result to
    FastAPI.
    """

    def __init__(self) -> None:
        self.headers: MutableHeaders = MutableHeaders()
        self.code: int = 200
        self.body = bytearray()
        self.committed = False

    def write_header(self, status: int) -> None:
        if self.committed:
            return
        self.code = status
        self.committed = True

    def write(self, data: bytes) -> int:
        if not self.committed:
            self.write_header(200)
        self.body.extend(data)
        return len(data)

    def to_response(self) -> Response:
        return Response(
            content=bytes(self.body),
            status_code=self.code,
            headers=dict(self.headers),
        )


class HandlerSink:
    """
    Sink over a ``BaseHTTPRequestHandler``.

    The status line and headers are buffered on ``write_header`` and flushed
    by the first ``write``, so every socket error surfaces from ``write``.
    """

    def __init__(self, handler: BaseHTTPRequestHandler) -> None:
        self.handler = handler
        self.headers: MutableHeaders = MutableHeaders()
        self.status: Optional[int] = None
        self._pending = False

    def write_header(self, status: int) -> None:
        self.status = status
        self.handler.send_response(status)
        for key, value in self.headers.items():
            self.handler.send_header(key, value)
        self._pending = True

    def write(self, data: bytes) -> int:
        if self.status is None:
            self.write_header(200)
        if self._pending:
            self._pending = False
            self.handler.end_headers()
        self.handler.wfile.write(data)
        return len(data)
