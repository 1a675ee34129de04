"""Google infrastructure providers."""

from dishka import Scope, provide

from gather.adapter.google.client import GoogleGateway, RealGoogleGateway
from gather.config import Settings
from gather.util.di.base import ProviderBase
from gather.util.error import ConfigurationError


class GoogleProvider(ProviderBase):
    """Google component base."""

    __mock_component__ = "google"


class ProdGoogleProvider(GoogleProvider):
    """Production Google provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_google_gateway(self, settings: Settings) -> GoogleGateway:
        """Provide Google gateway.

        Raises:
            ConfigurationError: If Google credentials are not configured
        """
        if not settings.google.client_id:
            raise ConfigurationError("GOOGLE__CLIENT_ID")
        if not settings.google.client_secret:
            raise ConfigurationError("GOOGLE__CLIENT_SECRET")

        return RealGoogleGateway(
            settings=settings.google, timeout=settings.http.timeout_seconds
        )
