from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from respond import ResponseRecorder  # noqa: E402

if TYPE_CHECKING:  # pragma: no cover - hints only
    from fastapi.testclient import TestClient


class ErrorRecorder(ResponseRecorder):
    """Recorder whose body writes always fail."""

    def __init__(self) -> None:
        super().__init__()
        self.write_calls = 0

    def write(self, data: bytes) -> int:
        self.write_calls += 1
        raise OSError("broken pipe")


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Drop cached settings around every test."""
    from respond import config

    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


@pytest.fixture
def recorder() -> ResponseRecorder:
    return ResponseRecorder()


@pytest.fixture
def error_recorder() -> ErrorRecorder:
    return ErrorRecorder()


@pytest.fixture
def make_client(monkeypatch: pytest.MonkeyPatch) -> Callable[[dict[str, str] | None], TestClient]:
    """Factory fixture to build a TestClient over a small app using the helpers."""

    def factory(env: dict[str, str] | None = None) -> TestClient:
        from fastapi import FastAPI
        from fastapi.responses import Response
        from fastapi.testclient import TestClient

        from respond import config, register_exception_handlers, write_json, write_raw

        for key, value in (env or {}).items():
            monkeypatch.setenv(key, value)
        config.get_settings.cache_clear()

        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/members")
        def members() -> Response:
            rec = ResponseRecorder()
            write_json(rec, 200, {"items": [{"id": 1, "name": "Alice"}]})
            return rec.to_response()

        @app.get("/text")
        def text() -> Response:
            rec = ResponseRecorder()
            rec.headers["Content-Type"] = "text/plain"
            write_raw(rec, 202, b"accepted")
            return rec.to_response()

        @app.delete("/members/1")
        def delete_member() -> Response:
            rec = ResponseRecorder()
            write_json(rec, 204, None)
            return rec.to_response()

        @app.get("/broken-payload")
        def broken_payload() -> Response:
            rec = ResponseRecorder()
            write_json(rec, 200, {"callback": print})
            return rec.to_response()

        @app.get("/broken-pipe")
        def broken_pipe() -> Response:
            write_raw(ErrorRecorder(), 200, b"lost")
            raise AssertionError("unreachable")

        return TestClient(app, raise_server_exceptions=False)

    return factory
