"""
Shared fixtures: a registrar client wired to an in-memory transport.
"""

import json

import httpx
import pytest

from launchkit.config import Config
from launchkit.registrar.client import RegistrarClient

BASE_URL = "https://api.test.ola.cv/v1"


class RecordingHandler:
    """
    httpx.MockTransport handler that replays queued responses.

    Queue httpx.Response objects, exceptions (raised as transport
    failures) or callables taking the request.
    """

    def __init__(self):
        self.responses = []
        self.requests = []

    def queue(self, *responses):
        self.responses.extend(responses)
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            return httpx.Response(500, json={"error": "no response queued"})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(request)
        return response

    def body(self, index: int = -1):
        content = self.requests[index].content
        return json.loads(content) if content else None


def ok(data, message=None, status=200) -> httpx.Response:
    """Registrar success envelope."""
    body = {"data": data}
    if message:
        body["message"] = message
    return httpx.Response(status, json=body)


def make_config(token: str = "test-token") -> Config:
    cfg = Config.fast_mode()
    cfg.registrar.api_token = token
    cfg.registrar.base_url = BASE_URL
    return cfg


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def registrar(handler, sleeps):
    async def record_sleep(delay):
        sleeps.append(delay)

    return RegistrarClient(
        make_config(),
        transport=httpx.MockTransport(handler),
        sleep=record_sleep,
    )


@pytest.fixture
def unconfigured_registrar(handler):
    return RegistrarClient(make_config(token=""), transport=httpx.MockTransport(handler))
