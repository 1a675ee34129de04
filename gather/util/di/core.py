"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from gather.config import AuthSettings, NicknameSettings, Settings
from gather.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and the sections services depend on directly.

    ``Settings`` reads the environment (and ``.env``) once per container;
    every other config object is a view of it.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Token signing settings for ``JWTService``."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_nickname_settings(self, settings: Settings) -> NicknameSettings:
        """Generated handle settings for ``NicknameGenerator``."""
        return settings.nickname
