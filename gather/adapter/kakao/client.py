"""Kakao OAuth 2.0 client implementation."""

import httpx

from gather.adapter.oauth.client import HttpProviderGateway
from gather.adapter.oauth.mock import ScriptedProviderGateway
from gather.config import ProviderSettings
from gather.domain.service.auth_service import ProviderGateway
from gather.domain.value.types import AuthProvider


class KakaoGateway(ProviderGateway):
    """Base class for Kakao gateways.

    Provides type distinction for dependency injection.
    """

    provider = AuthProvider.KAKAO


class RealKakaoGateway(HttpProviderGateway, KakaoGateway):
    """Kakao gateway talking to kauth.kakao.com and kapi.kakao.com."""

    def __init__(
        self,
        settings: ProviderSettings,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Kakao gateway.

        Args:
            settings: Kakao app credentials and endpoints
            timeout: Per-call timeout in seconds
            transport: httpx transport override
        """
        super().__init__(AuthProvider.KAKAO, settings, timeout, transport)


class MockKakaoGateway(ScriptedProviderGateway, KakaoGateway):
    """Mock Kakao gateway for testing.

    Returns deterministic test data without making real API calls.
    """

    authorize_url = "https://kauth.kakao.com/oauth/authorize"
    default_profile = {
        "id": 1234567890,
        "properties": {"nickname": "Mock Kakao User"},
        "kakao_account": {"email": "mock@kakao.com"},
    }
