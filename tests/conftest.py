"""Shared fixtures: a recording stub transport and a client wired to it."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import orjson
import pytest

from sendcloud.api import SendcloudAPI
from sendcloud.core.config import get_settings
from sendcloud.models import TransportResponse


class StubTransport:
    """Transport double that records calls and replays a canned response."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.response = TransportResponse(status_code=200, body=b"{}")
        self.exception: Optional[Exception] = None

    def reply(self, status_code: int = 200, payload: Any = None, body: Optional[bytes] = None,
              reason_phrase: str = "") -> None:
        if body is None:
            body = orjson.dumps(payload if payload is not None else {})
        self.response = TransportResponse(status_code=status_code, body=body, reason_phrase=reason_phrase)

    def send(self, method: str, uri: str, options: Mapping[str, Any]) -> TransportResponse:
        self.calls.append({"method": method, "uri": uri, "options": dict(options)})
        if self.exception is not None:
            raise self.exception
        return self.response

    @property
    def last(self) -> Dict[str, Any]:
        return self.calls[-1]


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for name in ("API_HOST", "USERNAME", "PASSWORD", "HTTP_TIMEOUT", "WEBHOOK_SECRET", "LOG_LEVEL"):
        monkeypatch.delenv(f"SENDCLOUD_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def api(transport: StubTransport) -> SendcloudAPI:
    return SendcloudAPI("public", "secret", transport=transport)
