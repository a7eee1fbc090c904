"""Pytest fixtures for testing the WebDriver client."""

import json

import httpx
import pytest
from unittest.mock import MagicMock

from webdriver_client.core.backends import W3C_ELEMENT_KEY
from webdriver_client.core.client import WebDriverClient

DRIVER_URL = "http://driver.test"
SESSION_ID = "abc123"


class FakeWebDriverServer:
    """
    MockTransport handler that records requests and replays canned responses.

    Responses are keyed by (method, path) with the path relative to the
    session root ("" is the root itself). Queued responses are consumed in
    order; the last one is repeated. Unknown routes answer {"value": null}.
    """

    def __init__(self, session_id: str = SESSION_ID):
        self.prefix = f"/session/{session_id}"
        self.requests: list[tuple[str, str, object]] = []
        self._responses: dict[tuple[str, str], list] = {}

    def respond(self, method: str, path: str, *payloads, status: int = 200) -> None:
        queue = self._responses.setdefault((method, path), [])
        for payload in payloads:
            queue.append((status, payload))

    def calls(self, method=None, path=None) -> list:
        return [
            r for r in self.requests
            if (method is None or r[0] == method) and (path is None or r[1] == path)
        ]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path[len(self.prefix):].lstrip("/")
        body = json.loads(request.content) if request.content else None
        self.requests.append((request.method, path, body))

        queue = self._responses.get((request.method, path))
        if queue:
            status, payload = queue.pop(0) if len(queue) > 1 else queue[0]
        else:
            status, payload = 200, {"value": None}
        return httpx.Response(status, json=payload)


@pytest.fixture
def server():
    """Fake WebDriver server for one session."""
    return FakeWebDriverServer()


@pytest.fixture
def http_client(server):
    """httpx.Client routed to the fake server."""
    client = httpx.Client(transport=httpx.MockTransport(server))
    yield client
    client.close()


@pytest.fixture
def client(http_client):
    """WebDriverClient using the W3C backend."""
    return WebDriverClient.connect(DRIVER_URL, SESSION_ID, client=http_client)


@pytest.fixture
def chrome_client(http_client):
    """WebDriverClient using the legacy chromedriver backend."""
    return WebDriverClient.connect(DRIVER_URL, SESSION_ID, backend="chrome", client=http_client)


@pytest.fixture
def owned_client(server):
    """WebDriverClient whose transport owns (and closes) its httpx.Client."""
    client = WebDriverClient.connect(
        DRIVER_URL,
        SESSION_ID,
        client=httpx.Client(transport=httpx.MockTransport(server)),
    )
    client.http._owns_client = True
    return client


@pytest.fixture
def mock_command():
    """Mock handle for a locally spawned driver process."""
    command = MagicMock()
    command.close = MagicMock()
    return command


def w3c_element(element_id: str) -> dict:
    """find-element response in W3C shape."""
    return {"value": {W3C_ELEMENT_KEY: element_id}}


def legacy_element(element_id: str) -> dict:
    """find-element response in legacy JSON wire shape."""
    return {"sessionId": SESSION_ID, "status": 0, "value": {"ELEMENT": element_id}}
