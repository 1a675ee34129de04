"""Kakao infrastructure providers."""

from dishka import Scope, provide

from gather.adapter.kakao.client import KakaoGateway, RealKakaoGateway
from gather.config import Settings
from gather.util.di.base import ProviderBase
from gather.util.error import ConfigurationError


class KakaoProvider(ProviderBase):
    """Kakao component base."""

    __mock_component__ = "kakao"


class ProdKakaoProvider(KakaoProvider):
    """Production Kakao provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_kakao_gateway(self, settings: Settings) -> KakaoGateway:
        """Provide Kakao gateway.

        Raises:
            ConfigurationError: If Kakao credentials are not configured
        """
        if not settings.kakao.client_id:
            raise ConfigurationError("KAKAO__CLIENT_ID")
        if not settings.kakao.redirect_uri:
            raise ConfigurationError("KAKAO__REDIRECT_URI")

        return RealKakaoGateway(
            settings=settings.kakao, timeout=settings.http.timeout_seconds
        )
