import json

import httpx
import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from prompt_relay.api.deps import get_http_client
from prompt_relay.core.config import settings
from prompt_relay.main import app

TEST_KEY = "test-key-123"


class FakeUpstream:
    """Stands in for the Gemini endpoint; records every outbound request."""

    def __init__(self):
        self.calls: list[httpx.Request] = []
        self.status_code = 200
        self.body = {"candidates": [{"content": {"parts": [{"text": "ok"}]}}]}
        self.exc: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.exc is not None:
            raise self.exc
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    def sent_payload(self, index: int = -1) -> dict:
        return json.loads(self.calls[index].content)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture(autouse=True)
def fake_credential(monkeypatch):
    monkeypatch.setattr(settings, "GEMINI_API_KEY", SecretStr(TEST_KEY))


@pytest.fixture
def client(upstream):
    def _http():
        with upstream.client() as c:
            yield c

    app.dependency_overrides[get_http_client] = _http
    try:
        with TestClient(app) as tc:
            yield tc
    finally:
        app.dependency_overrides.clear()
