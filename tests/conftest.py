"""Shared fixtures."""

import json
from typing import Callable

import httpx
import pytest

from bank_of_thailand.client import BOTClient
from bank_of_thailand.core.config import Settings
from bank_of_thailand.core.http import HttpClient

BASE_URL = "https://gateway.api.bot.or.th"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real BOT_* variables out of the tests."""
    for var in (
        "BOT_API_TOKEN",
        "BOT_BASE_URL",
        "BOT_TIMEOUT",
        "BOT_MAX_RETRIES",
        "BOT_CONFIG_FILE",
        "BOT_LOG_LEVEL",
        "BOT_ENV",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def settings():
    """Settings with a test token."""
    return Settings(api_token="test_token", base_url=BASE_URL, timeout=5)


@pytest.fixture
def make_client(settings) -> Callable[..., BOTClient]:
    """
    Build a client whose requests are answered by ``handler``.

    The handler receives the httpx.Request; requests are recorded on
    ``client.requests``.
    """

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> BOTClient:
        requests = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        http = HttpClient(
            base_url=settings.base_url,
            timeout=settings.timeout,
            transport=httpx.MockTransport(recording_handler),
        )
        client = BOTClient(settings, http_client=http)
        client.requests = requests
        return client

    return _make


@pytest.fixture
def json_handler():
    """Factory for handlers returning a fixed JSON payload."""

    def _handler_for(payload, status: int = 200, headers=None):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                status,
                content=json.dumps(payload).encode(),
                headers={"Content-Type": "application/json", **(headers or {})},
            )

        return handler

    return _handler_for
