"""
Pytest configuration and fixtures for openrouter-structured tests.
"""

import os
from typing import Callable, List, Optional

import httpx
import pytest

from openrouter_structured import ClientConfig, CompletionClient


@pytest.fixture
def openrouter_api_key() -> Optional[str]:
    """Fixture for a real OpenRouter API key."""
    return os.getenv("OPENROUTER_TEST_API_KEY")


@pytest.fixture
def skip_if_no_openrouter_key(openrouter_api_key):
    """Fixture to skip tests if an OpenRouter API key is not available."""
    if not openrouter_api_key:
        pytest.skip("OPENROUTER_TEST_API_KEY not set, skipping test")


@pytest.fixture
def captured_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(captured_requests):
    """Build a ``CompletionClient`` whose transport answers with *handler*.

    Every request that reaches the transport is appended to
    ``captured_requests``.
    """
    transports: List[httpx.Client] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> CompletionClient:
        def _recording(request: httpx.Request) -> httpx.Response:
            captured_requests.append(request)
            return handler(request)

        http = httpx.Client(transport=httpx.MockTransport(_recording))
        transports.append(http)
        return CompletionClient(ClientConfig(), http_client=http)

    yield _make

    for http in transports:
        http.close()
