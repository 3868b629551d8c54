"""
backend/tests/conftest.py

Purpose:
    Shared fixtures: import path bootstrap, settings with required secrets,
    and a stub Sportradar upstream backed by httpx.MockTransport.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import httpx
import pytest

_BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(_BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(_BACKEND_DIR))

from config import Settings  # noqa: E402

SOCCER_ROOT = "/soccer/trial/v4/es"


class FakeUpstream:
    """Canned responses keyed by decoded URL path; records every request."""

    def __init__(self):
        self.responses: dict[str, tuple[int, object]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, payload=None, status: int = 200, text: str | None = None) -> None:
        self.responses[SOCCER_ROOT + path] = (status, text if text is not None else payload)

    def fail(self, path: str, exc: Exception) -> None:
        self.responses[SOCCER_ROOT + path] = (0, exc)

    def calls_to(self, path: str) -> int:
        return sum(1 for r in self.requests if r.url.path == SOCCER_ROOT + path)

    async def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        # Yield so concurrent fetches interleave like real network calls.
        await asyncio.sleep(0)
        status, body = self.responses.get(request.url.path, (404, "Not found"))
        if isinstance(body, Exception):
            raise body
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)


@pytest.fixture
def test_settings(monkeypatch) -> Settings:
    monkeypatch.setenv("SR_API_KEY", "sr-key")
    monkeypatch.setenv("PROXY_API_KEY", "proxy-secret")
    monkeypatch.delenv("SR_SOCCER_BASE", raising=False)
    monkeypatch.delenv("SR_BASE_URL", raising=False)
    monkeypatch.delenv("RATE_LIMIT", raising=False)
    return Settings()


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def build_client(test_settings, upstream):
    """TestClient factory over the full app wired to the stub upstream."""
    from fastapi.testclient import TestClient

    from app import create_app

    def _build(**overrides) -> TestClient:
        for name, value in overrides.items():
            setattr(test_settings, name, value)
        return TestClient(create_app(test_settings, transport=upstream.transport))

    return _build

