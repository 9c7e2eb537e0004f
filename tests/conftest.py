"""Shared fixtures: a respx-backed client and a client wired to the fake service."""

from collections.abc import Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from pubsub_client import PubSubClient
from pubsub_client.observability import Metrics
from tests.fake_server import FakeRegistry, create_app

BASE_URL = "http://pubsub.test"


@pytest.fixture
def client() -> Iterator[PubSubClient]:
    """Client on a real httpx transport, for respx mocking."""
    with httpx.Client(timeout=5.0) as http_client:
        yield PubSubClient(BASE_URL, http_client, metrics=Metrics())


@pytest.fixture
def registry() -> FakeRegistry:
    return FakeRegistry()


@pytest.fixture
def fake_client(registry: FakeRegistry) -> Iterator[PubSubClient]:
    """Client whose transport is a TestClient over the in-memory service."""
    with TestClient(create_app(registry)) as test_client:
        yield PubSubClient("http://testserver", test_client)
