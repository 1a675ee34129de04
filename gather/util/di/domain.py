"""Domain layer DI providers."""

import random

from dishka import Scope, provide

from gather.config import AuthSettings, NicknameSettings
from gather.domain.repository import OwnedRecordRepository, UserRepository
from gather.domain.service import (
    AuthService,
    GoogleProfileNormalizer,
    JWTService,
    KakaoProfileNormalizer,
    NicknameGenerator,
    PasswordService,
    ProfileNormalizer,
    ProviderGateway,
    UserService,
)
from gather.domain.value import AuthProvider
from gather.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services touching repositories are REQUEST-scoped to align with the
    repository/session lifecycle. Stateless helpers live for the whole app.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_nickname_generator(
        self, nickname_settings: NicknameSettings
    ) -> NicknameGenerator:
        """Provide nickname generator backed by the OS random source."""
        return NicknameGenerator(
            rng=random.SystemRandom(), max_attempts=nickname_settings.max_attempts
        )

    @provide(scope=Scope.APP)
    def get_profile_normalizers(
        self, nickname_generator: NicknameGenerator
    ) -> dict[AuthProvider, ProfileNormalizer]:
        """Provide profile normalizers by provider."""
        return {
            AuthProvider.KAKAO: KakaoProfileNormalizer(nickname_generator),
            AuthProvider.GOOGLE: GoogleProfileNormalizer(nickname_generator),
        }

    @provide(scope=Scope.APP)
    def get_password_service(self) -> PasswordService:
        """Provide password hashing service."""
        return PasswordService()

    @provide
    def get_auth_service(
        self,
        gateways: dict[AuthProvider, ProviderGateway],
        normalizers: dict[AuthProvider, ProfileNormalizer],
    ) -> AuthService:
        """Provide multi-provider authentication domain service.

        Args:
            gateways: Dictionary mapping providers to their gateways
            normalizers: Dictionary mapping providers to their normalizers

        Returns:
            AuthService configured with all available providers
        """
        return AuthService(gateways=gateways, normalizers=normalizers)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        owned_record_repositories: list[OwnedRecordRepository],
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            owned_record_repositories=owned_record_repositories,
        )
