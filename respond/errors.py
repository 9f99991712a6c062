"""
Exception types and handler registration.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import get_settings

logger = logging.getLogger(__name__)


class RespondError(Exception):
    """Base class for failures while writing a response."""

    prefix = "respond"

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        self.detail = f"{self.prefix}: {cause}"
        super().__init__(self.detail)


class WriteFailure(RespondError):
    """Raised when the sink fails to accept body bytes."""

    prefix = "write"


class SerializationFailure(RespondError):
    """Raised when a payload cannot be encoded as JSON."""

    prefix = "json marshal"


def register_exception_handlers(app: FastAPI) -> None:
    """Attach respond exception handlers to the FastAPI app."""

    @app.exception_handler(RespondError)
    async def respond_error_handler(request: Request, exc: RespondError) -> JSONResponse:
        logger.error(
            "respond_error",
            exc_info=exc,
            extra={
                "request_id": request.headers.get("X-Request-ID"),
                "error_kind": type(exc).__name__,
            },
        )
        return JSONResponse(
            status_code=get_settings().error_status,
            content={"error": "Internal Server Error"},
        )
