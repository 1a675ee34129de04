"""Delete account use case."""

from pydantic import BaseModel

from gather.domain.service import UserService
from gather.domain.value import StableId

from .response import UserResponse, require_owner


class DeleteAccountRequest(BaseModel):
    """Delete account request."""

    stable_id: str
    requester: str  # From authenticated user


class DeleteAccountUseCase:
    """Use case for deleting a user and every record it owns."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: DeleteAccountRequest) -> UserResponse:
        """Delete the account.

        Returns:
            The user as it was before deletion

        Raises:
            NotAuthorizedError: If requester is not the account owner
            RecordNotFoundError: If user not found
        """
        require_owner(request.stable_id, request.requester)

        user = await self.user_service.get_by_stable_id(StableId(request.stable_id))
        await self.user_service.delete(user)
        return UserResponse.from_user(user)
