"""Get user use case."""

from pydantic import BaseModel

from gather.domain.service import UserService
from gather.domain.value import StableId

from .response import UserResponse, require_owner


class GetUserRequest(BaseModel):
    """Get user request."""

    stable_id: str
    requester: str  # From authenticated user


class GetUserUseCase:
    """Use case for reading one's own account."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserResponse:
        """Load the account.

        Raises:
            NotAuthorizedError: If requester is not the account owner
            RecordNotFoundError: If user not found
        """
        require_owner(request.stable_id, request.requester)
        user = await self.user_service.get_by_stable_id(StableId(request.stable_id))
        return UserResponse.from_user(user)
