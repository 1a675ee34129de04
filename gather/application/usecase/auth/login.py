"""Local login use case."""

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from gather.application.usecase.user.response import UserResponse
from gather.config import Settings
from gather.domain.error import CredentialMismatchError, RecordNotFoundError
from gather.domain.service import JWTService, PasswordService, UserService
from gather.domain.value import AuthProvider
from gather.domain.value.types import Handle

from .response import AuthResponse


class LoginRequest(BaseModel):
    """Local login request."""

    handle: str
    password: str


class LocalLoginUseCase:
    """Use case for handle/password login."""

    def __init__(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
        settings: Settings,
    ) -> None:
        """Initialize local login use case.

        Args:
            user_service: User domain service
            password_service: Password hashing service
            jwt_service: JWT token domain service
            settings: Application settings
        """
        self.user_service = user_service
        self.password_service = password_service
        self.jwt_service = jwt_service
        self.settings = settings

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute local login.

        Args:
            request: Handle and password

        Returns:
            Bearer token and user

        Raises:
            RecordNotFoundError: If no user has the handle
            CredentialMismatchError: If the password does not match
        """
        handle = request.handle
        with logfire.span("local_login", handle=handle):
            try:
                valid_handle = Handle(handle)
            except PydanticValidationError as e:
                logfire.info("Local login rejected - malformed handle", handle=handle)
                raise RecordNotFoundError("User", handle) from e

            user = await self.user_service.get_by_handle(valid_handle)

            if self._is_placeholder_secret(user.provider, request.password):
                logfire.warn(
                    "Local login rejected - federated placeholder secret",
                    handle=handle,
                    provider=user.provider.value,
                )
                raise CredentialMismatchError(handle)

            if not await self.password_service.verify(
                request.password, user.password_hash
            ):
                logfire.warn("Local login rejected - wrong password", handle=handle)
                raise CredentialMismatchError(handle)

            token = self.jwt_service.create_token(user.stable_id)
            logfire.info("User logged in", stable_id=user.stable_id, handle=handle)
            return AuthResponse(token=token, user=UserResponse.from_user(user))

    def _is_placeholder_secret(self, provider: AuthProvider, password: str) -> bool:
        if provider == AuthProvider.LOCAL:
            return False
        provider_settings = self.settings.provider_settings(provider.value)
        return (
            provider_settings is not None
            and password == provider_settings.placeholder_secret
        )
