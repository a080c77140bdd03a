import json

import httpx
import pytest

from jira_client import JiraClient
from jira_client.backends.http import HttpBackend

BASE_URL = "https://jira.example.com"


class FakeJira:
    """Records requests and replays queued responses through httpx.MockTransport."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Exception] = []

    def queue(self, status_code=200, json_body=None, content=None, headers=None):
        if json_body is not None:
            content = json.dumps(json_body).encode()
            headers = {"Content-Type": "application/json", **(headers or {})}
        self._responses.append(
            httpx.Response(status_code, content=content or b"", headers=headers)
        )

    def fail(self, exc_class=httpx.ConnectError, message="connection refused"):
        self._responses.append(exc_class(message))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(500, json={"errorMessages": ["nothing queued"]})
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            item.request = request
            raise item
        return item

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def fake_jira():
    return FakeJira()


@pytest.fixture
def backend(fake_jira):
    b = HttpBackend(
        BASE_URL,
        username="bot",
        api_token="secret-token",
        transport=httpx.MockTransport(fake_jira.handler),
    )
    yield b
    b.close()


@pytest.fixture
def client(backend):
    return JiraClient(backend=backend)
