"""Get current user use case."""

from pydantic import BaseModel

from gather.application.usecase.user.response import UserResponse
from gather.domain.service import JWTService, UserService
from gather.domain.value import StableId


class GetCurrentUserRequest(BaseModel):
    """Bearer token taken from the ``Authorization`` header."""

    token: str


class GetCurrentUserUseCase:
    """Resolve a bearer token to the account it was issued for."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserResponse:
        """Verify the token, then load its subject.

        A token outlives the account it names: once the account is deleted
        the token still verifies but the lookup fails.

        Raises:
            JWTError: If token is invalid or expired
            RecordNotFoundError: If the account no longer exists
        """
        stable_id = StableId(self.jwt_service.verify_token(request.token).sub)
        user = await self.user_service.get_by_stable_id(stable_id)
        return UserResponse.from_user(user)
