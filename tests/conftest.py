"""Pytest configuration and shared fixtures for ollama-binding tests.

This module provides a fake model host built on httpx.MockTransport that
records every request it receives and answers with canned JSON bodies.
"""

import json
from typing import Any

import httpx
import pytest

from ollama_binding import AsyncClient, Client


class FakeHost:
    """Canned responses keyed by (method, path), plus a log of requests."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, bytes]] = {}
        self.requests: list[httpx.Request] = []

    def reply(
        self,
        method: str,
        path: str,
        body: Any = None,
        status_code: int = 200,
        content: bytes | None = None,
    ) -> None:
        """Register the response for a method and path."""
        if content is None:
            content = json.dumps(body if body is not None else {}).encode()
        self.routes[(method, path)] = (status_code, content)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        status_code, content = route
        return httpx.Response(
            status_code,
            content=content,
            headers={"Content-Type": "application/json"},
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_payload(self) -> dict[str, Any]:
        """Decoded JSON body of the most recent request."""
        return json.loads(self.last_request.content)


@pytest.fixture
def fake_host():
    """Create an empty fake model host."""
    return FakeHost()


@pytest.fixture
def client(fake_host):
    """Create a blocking Client wired to the fake host.

    Args:
        fake_host: Fake host fixture.

    Returns:
        Client: Client sending every request to the fake host.
    """
    return Client(host="localhost", transport=httpx.MockTransport(fake_host.handle))


@pytest.fixture
def async_client(fake_host):
    """Create an AsyncClient wired to the fake host."""
    return AsyncClient(
        host="localhost", transport=httpx.MockTransport(fake_host.handle)
    )


@pytest.fixture
def model_descriptor_data():
    """A model entry as returned by /api/tags."""
    return {
        "name": "llama3.2:latest",
        "model": "llama3.2:latest",
        "modified_at": "2024-10-15T10:30:00.000000Z",
        "size": 2019393189,
        "digest": "a80c4f17acd55265feec403c7aef86be0c25983ab279d83f3bcd3abbcb5b8b72",
        "details": {
            "parent_model": "",
            "format": "gguf",
            "family": "llama",
            "families": ["llama"],
            "parameter_size": "3.2B",
            "quantization_level": "Q4_K_M",
        },
    }


@pytest.fixture
def timing_fields():
    """Statistics fields that accompany generate and chat responses."""
    return {
        "total_duration": 5043500667,
        "load_duration": 5025959,
        "prompt_eval_count": 26,
        "prompt_eval_duration": 325953000,
        "eval_count": 290,
        "eval_duration": 4709213000,
    }
