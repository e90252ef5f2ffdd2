"""Shared fixtures for Telldus API tests."""

import httpx
import pytest

from telldus_api import LiveConfig, LocalConfig


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingHandler:
    """MockTransport handler that records requests and routes them by path."""

    def __init__(self, routes=None, default=None):
        self.routes = routes or {}
        self.default = default or httpx.Response(200, json={})
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.routes.get(request.url.path, self.default)
        if callable(response):
            return response(request)
        # Fresh copy per request so the same route can answer repeatedly
        return httpx.Response(
            response.status_code, headers=response.headers, content=response.content
        )

    def paths(self):
        return [r.url.path for r in self.requests]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def http_client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def local_config():
    return LocalConfig(host="192.168.1.100", access_token="local-token")


@pytest.fixture
def live_config():
    return LiveConfig(
        key="consumer-key",
        secret="consumer-secret",
        token_key="token-key",
        token_secret="token-secret",
    )
