"""Federated login use case."""

import logfire
from pydantic import BaseModel, Field

from gather.adapter.error import ProviderError
from gather.application.usecase.user.response import UserResponse
from gather.config import Settings
from gather.domain.error import (
    DuplicateHandleError,
    DuplicateStableIdError,
    IdentityExtractionError,
    ProviderAccountConflictError,
    RequiredProfileFieldMissingError,
)
from gather.domain.model import User
from gather.domain.service import (
    AuthService,
    JWTService,
    NicknameGenerator,
    PasswordService,
    UserService,
)
from gather.domain.value import AuthProvider, CanonicalProfile

from .response import AuthResponse

# Inserts tried when a generated handle is taken between check and insert
HANDLE_INSERT_ATTEMPTS = 3


class FederatedLoginRequest(BaseModel):
    """Federated login request from an OAuth callback."""

    provider: AuthProvider  # Which provider issued the code
    code: str = Field(min_length=1)  # OAuth authorization code


class FederatedLoginUseCase:
    """Use case for login through Kakao or Google.

    Creates the user on first login and refreshes its profile on every
    later one. Nothing is written unless the provider round-trip and
    profile extraction both succeed.
    """

    def __init__(
        self,
        auth_service: AuthService,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
        nickname_generator: NicknameGenerator,
        settings: Settings,
    ) -> None:
        """Initialize federated login use case.

        Args:
            auth_service: Authentication domain service (handles all providers)
            user_service: User domain service
            password_service: Password hashing service
            jwt_service: JWT token domain service
            nickname_generator: Source of generated handles
            settings: Application settings
        """
        self.auth_service = auth_service
        self.user_service = user_service
        self.password_service = password_service
        self.jwt_service = jwt_service
        self.nickname_generator = nickname_generator
        self.settings = settings

    async def execute(self, request: FederatedLoginRequest) -> AuthResponse:
        """Execute federated login flow.

        Steps:
        1. Exchange the code and fetch the normalized profile
        2. Look the user up by stable id
        3. If new: create with a generated handle
        4. If existing: refresh display name and email
        5. Generate JWT token

        Args:
            request: Provider and authorization code

        Returns:
            Bearer token and user

        Raises:
            ProviderError: If the provider round-trip fails
            IdentityExtractionError: If the profile has no stable id
            RequiredProfileFieldMissingError: If the profile has no email
            ProviderAccountConflictError: If the stable id belongs to an account
                of another provider
        """
        profile = await self._fetch_profile(request)

        with logfire.span(
            "federated_login",
            provider=request.provider.value,
            stable_id=profile.stable_id,
        ):
            existing = await self.user_service.find_by_stable_id(profile.stable_id)
            if existing is None:
                try:
                    user = await self._create_user(profile)
                except DuplicateStableIdError:
                    # Concurrent first login for the same account won the insert
                    existing = await self.user_service.get_by_stable_id(
                        profile.stable_id
                    )
                    user = await self._refresh_user(existing, profile)
            else:
                user = await self._refresh_user(existing, profile)

            token = self.jwt_service.create_token(user.stable_id)
            return AuthResponse(token=token, user=UserResponse.from_user(user))

    async def _fetch_profile(self, request: FederatedLoginRequest) -> CanonicalProfile:
        provider = request.provider.value
        try:
            return await self.auth_service.fetch_profile(request.provider, request.code)
        except ProviderError as e:
            if e.provider is None:
                e.provider = provider
            logfire.error(
                "Federated login failed",
                provider=e.provider,
                phase=e.phase,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise
        except (IdentityExtractionError, RequiredProfileFieldMissingError) as e:
            logfire.error(
                "Federated login failed",
                provider=provider,
                phase="profile_extraction",
                error_type=type(e).__name__,
                field=e.field,
            )
            raise

    async def _create_user(self, profile: CanonicalProfile) -> User:
        provider_settings = self.settings.provider_settings(profile.provider.value)
        password_hash = await self.password_service.placeholder_hash(
            provider_settings.placeholder_secret
        )

        attempt = 0
        while True:
            attempt += 1
            handle = await self.nickname_generator.unique_handle(
                self.user_service.is_handle_taken
            )
            user = User(
                stable_id=profile.stable_id,
                handle=handle,
                display_name=profile.display_name,
                email=profile.email,
                password_hash=password_hash,
                provider=profile.provider,
            )
            try:
                created = await self.user_service.create(user)
            except DuplicateHandleError:
                if attempt >= HANDLE_INSERT_ATTEMPTS:
                    raise
                logfire.warn(
                    "Generated handle taken on insert, retrying",
                    handle=handle.root,
                    attempt=attempt,
                )
                continue

            logfire.info(
                "New federated user created",
                stable_id=created.stable_id,
                provider=profile.provider.value,
                handle=handle.root,
            )
            return created

    async def _refresh_user(self, user: User, profile: CanonicalProfile) -> User:
        if user.provider != profile.provider:
            logfire.error(
                "Federated login rejected - stable id belongs to another provider",
                stable_id=user.stable_id,
                account_provider=user.provider.value,
                login_provider=profile.provider.value,
            )
            raise ProviderAccountConflictError(
                user.stable_id, user.provider.value, profile.provider.value
            )

        changes: dict = {"email": profile.email}

        # Generated names never overwrite a stored name
        if not profile.display_name_generated:
            changes["display_name"] = profile.display_name

        if user.handle is None and self.auth_service.backfills_missing_handle(
            profile.provider
        ):
            changes["handle"] = await self.nickname_generator.unique_handle(
                self.user_service.is_handle_taken
            )
            logfire.info(
                "Backfilled missing handle",
                stable_id=user.stable_id,
                handle=changes["handle"].root,
            )

        if not user.differs_from(changes):
            logfire.info("Returning user logged in", stable_id=user.stable_id)
            return user

        updated = await self.user_service.update(user.with_changes(**changes))
        logfire.info(
            "Returning user profile refreshed",
            stable_id=user.stable_id,
            provider=profile.provider.value,
        )
        return updated
