"""Change handle use case."""

import logfire
from pydantic import BaseModel

from gather.domain.error import DuplicateHandleError
from gather.domain.service import UserService
from gather.domain.value import StableId
from gather.domain.value.types import Handle

from .response import UserResponse, require_owner


class ChangeHandleRequest(BaseModel):
    """Change handle request."""

    stable_id: str
    requester: str  # From authenticated user
    handle: Handle


class ChangeHandleUseCase:
    """Use case for replacing a user's handle.

    Lets federated users swap the handle generated at first login for one
    of their choosing.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize change handle use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ChangeHandleRequest) -> UserResponse:
        """Execute change handle flow.

        Steps:
        1. Check requester owns the account
        2. Return unchanged if the handle is already theirs
        3. Fast-path check that nobody else holds it
        4. Update (the store still enforces uniqueness)

        Raises:
            NotAuthorizedError: If requester is not the account owner
            RecordNotFoundError: If user not found
            DuplicateHandleError: If another user holds the handle
        """
        require_owner(request.stable_id, request.requester)

        user = await self.user_service.get_by_stable_id(StableId(request.stable_id))
        if user.handle == request.handle:
            return UserResponse.from_user(user)

        if await self.user_service.is_handle_taken(request.handle):
            raise DuplicateHandleError(request.handle.root)

        updated = await self.user_service.update(
            user.with_changes(handle=request.handle)
        )

        logfire.info(
            "Handle changed",
            stable_id=request.stable_id,
            old_handle=user.handle.root if user.handle else None,
            new_handle=request.handle.root,
        )
        return UserResponse.from_user(updated)
