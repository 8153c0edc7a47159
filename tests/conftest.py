"""Shared test fixtures for all ghlink tests."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest
from pydantic import SecretStr

from ghlink.core.config import Settings
from ghlink.core.models import BasicAuth, OAuthToken

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, max_redirects=5)


@pytest.fixture
def basic_credentials() -> BasicAuth:
    return BasicAuth(username="octocat", password=SecretStr("hunter2"))


@pytest.fixture
def oauth_credentials() -> OAuthToken:
    return OAuthToken(token=SecretStr("T"))


@pytest.fixture
def make_transport() -> Callable[[Handler], RecordingTransport]:
    return RecordingTransport
