"""E2E fixtures: the full app over a container with mocked components."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from gather.adapter.google import GoogleGateway
from gather.adapter.kakao import KakaoGateway
from gather.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def container():
    """Fresh test container per test, closed afterwards."""
    container = build_test_container()
    yield container
    asyncio.run(container.close())


@pytest.fixture
def client(container):
    """Test client for an app wired to the test container."""
    return TestClient(create_app(container=container))


@pytest.fixture
def kakao_gateway(container):
    """Scripted Kakao gateway the app talks to."""
    return asyncio.run(container.get(KakaoGateway))


@pytest.fixture
def google_gateway(container):
    """Scripted Google gateway the app talks to."""
    return asyncio.run(container.get(GoogleGateway))
