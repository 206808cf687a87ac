"""
Unit test configuration.

Patches dotenv so pydantic-settings never reads the project's real .env file
during unit tests. Tests control config exclusively through monkeypatch.setenv().

Also provides a recording httpx transport so client tests never touch the
network.
"""

from __future__ import annotations

from typing import Callable

import httpx
import pytest


@pytest.fixture(autouse=True)
def disable_dotenv_loading(monkeypatch):
    """Prevent pydantic-settings from loading .env files in all unit tests."""
    import pydantic_settings.sources.providers.dotenv as ps_dotenv

    monkeypatch.setattr(ps_dotenv, "dotenv_values", lambda *a, **kw: {})


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was asked to send."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def respond():
    """Build a RecordingTransport that answers every request the same way."""

    def _respond(
        status_code: int = 200,
        *,
        content: bytes = b"{}",
        stream: httpx.SyncByteStream | None = None,
    ) -> RecordingTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if stream is not None:
                return httpx.Response(status_code, stream=stream)
            return httpx.Response(status_code, content=content)

        return RecordingTransport(handler)

    return _respond


@pytest.fixture
def fail_with():
    """Build a RecordingTransport whose every request raises *exc*."""

    def _fail_with(exc: Exception) -> RecordingTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc

        return RecordingTransport(handler)

    return _fail_with
