"""Local signup use case."""

from uuid import uuid4

import logfire
from pydantic import BaseModel, Field

from gather.application.usecase.user.response import UserResponse
from gather.domain.error import DuplicateHandleError
from gather.domain.model import User
from gather.domain.service import PasswordService, UserService
from gather.domain.value import AuthProvider, StableId
from gather.domain.value.types import Handle


class RegisterRequest(BaseModel):
    """Local signup request."""

    handle: Handle
    password: str = Field(min_length=1)
    display_name: str = Field(min_length=1, max_length=255)
    email: str | None = None


class RegisterUseCase:
    """Use case for creating a local handle/password account."""

    def __init__(
        self,
        user_service: UserService,
        password_service: PasswordService,
    ) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            password_service: Password hashing service
        """
        self.user_service = user_service
        self.password_service = password_service

    async def execute(self, request: RegisterRequest) -> UserResponse:
        """Execute signup.

        The existence check only fails fast; a concurrent signup for the
        same handle is rejected by the store on insert.

        Args:
            request: Handle, password and display name

        Returns:
            Created user

        Raises:
            DuplicateHandleError: If the handle is taken
        """
        with logfire.span("register", handle=request.handle.root):
            if await self.user_service.is_handle_taken(request.handle):
                logfire.warn("Signup rejected - handle taken", handle=request.handle.root)
                raise DuplicateHandleError(request.handle.root)

            user = User(
                stable_id=StableId(str(uuid4())),
                handle=request.handle,
                display_name=request.display_name,
                email=request.email,
                password_hash=await self.password_service.hash(request.password),
                provider=AuthProvider.LOCAL,
            )
            created = await self.user_service.create(user)
            return UserResponse.from_user(created)
