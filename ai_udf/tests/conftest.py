"""Pytest configuration for the ai_udf test suite.

Keeps every test offline and independent of the developer's environment:
configuration variables are cleared, and helpers are provided to route the
real transport through ``httpx.MockTransport`` or to replace it entirely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

import httpx
import pytest

from ai_udf.base.models import TransportOutcome

_ENV_VARS = (
    "AI_UDF_CONFIG_FILE",
    "AI_UDF_HTTP_TIMEOUT_SECONDS",
    "AI_UDF_CA_BUNDLE",
    "AI_UDF_LOG_LEVEL",
    "ANTHROPIC_BASE_URL",
    "ANTHROPIC_VERSION",
    "ANTHROPIC_MAX_TOKENS",
    "GOOGLE_BASE_URL",
    "GOOGLE_API_VERSION",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove configuration overrides for the duration of each test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@dataclass
class RecordedCall:
    endpoint: str
    path: str
    body: str
    headers: Mapping[str, str]
    timeout: float

    @property
    def payload(self) -> Any:
        return json.loads(self.body)


@dataclass
class FakeTransport:
    """Stands in for ``ai_udf.base.http.post`` and records each call."""

    outcome: TransportOutcome
    calls: List[RecordedCall] = field(default_factory=list)

    def __call__(self, endpoint, path, body, headers, timeout, *, ctx=None) -> TransportOutcome:
        self.calls.append(RecordedCall(endpoint, path, body, dict(headers), timeout))
        return self.outcome


@pytest.fixture()
def fake_transport() -> Callable[..., FakeTransport]:
    """Factory: ``fake_transport(status, body)`` or ``fake_transport(error="...")``."""

    def _make(status: Optional[int] = None, body: Any = "", *, error: Optional[str] = None) -> FakeTransport:
        if error is not None:
            return FakeTransport(TransportOutcome.failure(error))
        text = body if isinstance(body, str) else json.dumps(body)
        return FakeTransport(TransportOutcome.response(status, text))

    return _make


@dataclass
class MockHTTP:
    """Routes the real transport through ``httpx.MockTransport``."""

    handler: Callable[[httpx.Request], httpx.Response]
    requests: List[httpx.Request] = field(default_factory=list)
    timeouts: List[Dict[str, Optional[float]]] = field(default_factory=list)

    def build_client(self, timeout: float) -> httpx.Client:
        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            self.timeouts.append(dict(request.extensions.get("timeout", {})))
            return self.handler(request)

        return httpx.Client(transport=httpx.MockTransport(_record), timeout=httpx.Timeout(timeout), follow_redirects=False)


@pytest.fixture()
def mock_http(monkeypatch: pytest.MonkeyPatch) -> Callable[[Callable[[httpx.Request], httpx.Response]], MockHTTP]:
    """Install a request handler behind ``ai_udf.base.http.client.build_client``."""

    def _install(handler: Callable[[httpx.Request], httpx.Response]) -> MockHTTP:
        mock = MockHTTP(handler)
        monkeypatch.setattr("ai_udf.base.http.client.build_client", mock.build_client)
        return mock

    return _install
