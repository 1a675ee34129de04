"""Google OAuth 2.0 client implementation."""

import httpx

from gather.adapter.oauth.client import HttpProviderGateway
from gather.adapter.oauth.mock import ScriptedProviderGateway
from gather.config import ProviderSettings
from gather.domain.service.auth_service import ProviderGateway
from gather.domain.value.types import AuthProvider


class GoogleGateway(ProviderGateway):
    """Base class for Google gateways.

    Provides type distinction for dependency injection.
    """

    provider = AuthProvider.GOOGLE


class RealGoogleGateway(HttpProviderGateway, GoogleGateway):
    """Google gateway using the OpenID Connect userinfo endpoint."""

    def __init__(
        self,
        settings: ProviderSettings,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Google gateway.

        Args:
            settings: Google client credentials and endpoints
            timeout: Per-call timeout in seconds
            transport: httpx transport override
        """
        super().__init__(AuthProvider.GOOGLE, settings, timeout, transport)


class MockGoogleGateway(ScriptedProviderGateway, GoogleGateway):
    """Mock Google gateway for testing.

    Returns deterministic test data without making real API calls.
    """

    authorize_url = "https://accounts.google.com/o/oauth2/v2/auth"
    default_profile = {
        "sub": "109876543210987654321",
        "name": "Mock Google User",
        "email": "mock@gmail.com",
        "email_verified": True,
    }
