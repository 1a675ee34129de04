"""Application layer DI providers."""

from dishka import Scope, provide

from gather.application.usecase.auth import (
    AuthorizeUseCase,
    FederatedLoginUseCase,
    GetCurrentUserUseCase,
    LocalLoginUseCase,
    RegisterUseCase,
)
from gather.application.usecase.user import (
    ChangeHandleUseCase,
    CheckAvailabilityUseCase,
    DeleteAccountUseCase,
    GetUserUseCase,
    UpdateUserProfileUseCase,
)
from gather.config import Settings
from gather.domain.service import (
    AuthService,
    JWTService,
    NicknameGenerator,
    PasswordService,
    UserService,
)
from gather.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self, user_service: UserService, password_service: PasswordService
    ) -> RegisterUseCase:
        """Provide local signup use case."""
        return RegisterUseCase(
            user_service=user_service, password_service=password_service
        )

    @provide(scope=Scope.REQUEST)
    def get_local_login_use_case(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
        settings: Settings,
    ) -> LocalLoginUseCase:
        """Provide local login use case."""
        return LocalLoginUseCase(
            user_service=user_service,
            password_service=password_service,
            jwt_service=jwt_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_federated_login_use_case(
        self,
        auth_service: AuthService,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
        nickname_generator: NicknameGenerator,
        settings: Settings,
    ) -> FederatedLoginUseCase:
        """Provide federated login use case."""
        return FederatedLoginUseCase(
            auth_service=auth_service,
            user_service=user_service,
            password_service=password_service,
            jwt_service=jwt_service,
            nickname_generator=nickname_generator,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_authorize_use_case(self, auth_service: AuthService) -> AuthorizeUseCase:
        """Provide authorization URL use case."""
        return AuthorizeUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self, user_service: UserService, password_service: PasswordService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(
            user_service=user_service, password_service=password_service
        )

    @provide(scope=Scope.REQUEST)
    def get_change_handle_use_case(
        self, user_service: UserService
    ) -> ChangeHandleUseCase:
        """Provide change handle use case."""
        return ChangeHandleUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_account_use_case(
        self, user_service: UserService
    ) -> DeleteAccountUseCase:
        """Provide delete account use case."""
        return DeleteAccountUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_check_availability_use_case(
        self, user_service: UserService
    ) -> CheckAvailabilityUseCase:
        """Provide availability check use case."""
        return CheckAvailabilityUseCase(user_service=user_service)
