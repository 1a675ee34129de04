"""Provider authorization URL use case."""

from pydantic import BaseModel

from gather.domain.service import AuthService
from gather.domain.value import AuthProvider


class AuthorizeRequest(BaseModel):
    """Authorization URL request."""

    provider: AuthProvider
    state: str | None = None


class AuthorizeResponse(BaseModel):
    """Authorization URL response."""

    provider: AuthProvider
    authorization_url: str


class AuthorizeUseCase:
    """Use case for building a provider consent screen URL."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: AuthorizeRequest) -> AuthorizeResponse:
        """Raises UnsupportedProviderError for providers without a gateway."""
        url = self.auth_service.authorization_url(request.provider, request.state)
        return AuthorizeResponse(provider=request.provider, authorization_url=url)
