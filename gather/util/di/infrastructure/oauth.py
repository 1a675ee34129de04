"""OAuth infrastructure provider for multi-provider authentication."""

from dishka import Scope, provide

from gather.adapter.google.client import GoogleGateway
from gather.adapter.kakao.client import KakaoGateway
from gather.domain.service.auth_service import ProviderGateway
from gather.domain.value import AuthProvider
from gather.util.di.base import ProviderBase


class OAuthAggregatorProvider(ProviderBase):
    """Provider that aggregates all provider gateways into a dictionary."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_provider_gateways(
        self,
        kakao_gateway: KakaoGateway,
        google_gateway: GoogleGateway,
    ) -> dict[AuthProvider, ProviderGateway]:
        """Provide dictionary of all gateways by provider.

        Args:
            kakao_gateway: Kakao gateway (specific type)
            google_gateway: Google gateway (specific type)

        Returns:
            Dictionary mapping AuthProvider to ProviderGateway
        """
        return {
            AuthProvider.KAKAO: kakao_gateway,
            AuthProvider.GOOGLE: google_gateway,
        }
