"""Update user profile use case."""

import logfire
from pydantic import BaseModel, Field

from gather.domain.service import PasswordService, UserService
from gather.domain.value import StableId

from .response import UserResponse, require_owner


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request.

    Fields left as None are not changed.
    """

    stable_id: str  # Account to update
    requester: str  # From authenticated user
    display_name: str | None = Field(default=None, min_length=1, max_length=255)
    password: str | None = Field(default=None, min_length=1)


class UpdateUserProfileUseCase:
    """Use case for updating a user's profile.

    Users can change their display name and password. Handle changes go
    through ``ChangeHandleUseCase``; provider never changes.
    """

    def __init__(
        self,
        user_service: UserService,
        password_service: PasswordService,
    ) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
            password_service: Password hashing service
        """
        self.user_service = user_service
        self.password_service = password_service

    async def execute(self, request: UpdateUserProfileRequest) -> UserResponse:
        """Execute update user profile flow.

        Args:
            request: Request with account, requester and fields to update

        Returns:
            Updated user

        Raises:
            NotAuthorizedError: If requester is not the account owner
            RecordNotFoundError: If user not found
        """
        require_owner(request.stable_id, request.requester)

        user = await self.user_service.get_by_stable_id(StableId(request.stable_id))

        changes: dict = {}
        if request.display_name is not None:
            changes["display_name"] = request.display_name
        if request.password is not None:
            changes["password_hash"] = await self.password_service.hash(
                request.password
            )

        saved_user = await self.user_service.update(user.with_changes(**changes))

        logfire.info(
            "User profile updated",
            stable_id=request.stable_id,
            display_name_changed=request.display_name is not None,
            password_changed=request.password is not None,
        )
        return UserResponse.from_user(saved_user)
