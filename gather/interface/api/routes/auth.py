"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status

from gather.application.usecase.auth import (
    AuthorizeUseCase,
    AuthResponse,
    FederatedLoginUseCase,
    GetCurrentUserUseCase,
    LocalLoginUseCase,
    RegisterUseCase,
)
from gather.application.usecase.auth.authorize import (
    AuthorizeRequest,
    AuthorizeResponse,
)
from gather.application.usecase.auth.federated_login import FederatedLoginRequest
from gather.application.usecase.auth.get_current_user import GetCurrentUserRequest
from gather.application.usecase.auth.login import LoginRequest
from gather.application.usecase.auth.register import RegisterRequest
from gather.application.usecase.user import UserResponse
from gather.domain.value import AuthProvider
from gather.interface.api.security import bearer_token

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.post(
    "/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> UserResponse:
    """Create a local handle/password account.

    Example:
        POST /auth/signup

        Request:
        {"handle": "alice", "password": "s3cret", "display_name": "Alice"}

    Raises:
        DuplicateHandleError: Handle taken (409)
    """
    return await register_use_case.execute(request)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LocalLoginUseCase],
) -> AuthResponse:
    """Log in with handle and password.

    Raises:
        RecordNotFoundError: Unknown handle (404)
        CredentialMismatchError: Wrong password (401)
    """
    return await login_use_case.execute(request)


@router.get("/{provider}/authorize", response_model=AuthorizeResponse)
async def authorize(
    provider: AuthProvider,
    authorize_use_case: FromDishka[AuthorizeUseCase],
    state: str | None = Query(default=None),
) -> AuthorizeResponse:
    """Return the consent screen URL of a provider.

    The frontend redirects the browser there; the provider then calls back
    with a code.
    """
    return await authorize_use_case.execute(
        AuthorizeRequest(provider=provider, state=state)
    )


@router.get("/callback/kakao", response_model=AuthResponse)
async def kakao_callback(
    federated_login_use_case: FromDishka[FederatedLoginUseCase],
    code: str = Query(min_length=1),
) -> AuthResponse:
    """Handle Kakao OAuth callback.

    Example:
        GET /auth/callback/kakao?code=abc
    """
    return await federated_login_use_case.execute(
        FederatedLoginRequest(provider=AuthProvider.KAKAO, code=code)
    )


@router.get("/callback/google", response_model=AuthResponse)
async def google_callback(
    federated_login_use_case: FromDishka[FederatedLoginUseCase],
    code: str = Query(min_length=1),
) -> AuthResponse:
    """Handle Google OAuth callback.

    Example:
        GET /auth/callback/google?code=abc
    """
    return await federated_login_use_case.execute(
        FederatedLoginRequest(provider=AuthProvider.GOOGLE, code=code)
    )


@router.get("/me", response_model=UserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> UserResponse:
    """Get the user the bearer token was issued for.

    Raises:
        MissingCredentialsError: No bearer token (401)
        JWTError: Invalid or expired token (401)
    """
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=bearer_token(authorization))
    )
