"""User domain service."""

from typing import Optional

import logfire

from gather.domain.error import RecordNotFoundError
from gather.domain.model import User
from gather.domain.repository import OwnedRecordRepository, UserRepository
from gather.domain.value import StableId
from gather.domain.value.types import Handle

from .base import Service


class UserService(Service):
    """Domain service for reading and writing user records."""

    span_prefix = "user_service"

    def __init__(
        self,
        user_repository: UserRepository,
        owned_record_repositories: list[OwnedRecordRepository],
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            owned_record_repositories: Stores cleared when an account is deleted
        """
        self.user_repository = user_repository
        self.owned_record_repositories = owned_record_repositories

    async def get_by_stable_id(self, stable_id: StableId) -> User:
        """Get user by stable id.

        Args:
            stable_id: User stable id

        Returns:
            User entity

        Raises:
            RecordNotFoundError: If user not found
        """
        with self.span("get_by_stable_id", stable_id=stable_id):
            user = await self.user_repository.find_by_stable_id(stable_id)
            if not user:
                logfire.warn("User not found", stable_id=stable_id)
                raise RecordNotFoundError("User", stable_id)
            return user

    async def find_by_stable_id(self, stable_id: StableId) -> Optional[User]:
        """Get user by stable id, or None."""
        with self.span("find_by_stable_id", stable_id=stable_id):
            return await self.user_repository.find_by_stable_id(stable_id)

    async def get_by_handle(self, handle: Handle) -> User:
        """Get user by handle.

        Raises:
            RecordNotFoundError: If user not found
        """
        with self.span("get_by_handle", handle=handle.root):
            user = await self.user_repository.find_by_handle(handle)
            if not user:
                logfire.warn("User not found", handle=handle.root)
                raise RecordNotFoundError("User", handle.root)
            return user

    async def is_handle_taken(self, handle: Handle) -> bool:
        """Check whether any user holds the handle."""
        return await self.user_repository.exists_by_handle(handle)

    async def is_stable_id_taken(self, stable_id: StableId) -> bool:
        """Check whether any user has the stable id."""
        return await self.user_repository.exists_by_stable_id(stable_id)

    async def create(self, user: User) -> User:
        """Insert a new user.

        Raises:
            DuplicateStableIdError: If the stable id is taken
            DuplicateHandleError: If the handle is taken
        """
        with self.span(
            "create",
            stable_id=user.stable_id,
            provider=user.provider.value,
        ):
            created = await self.user_repository.insert(user)
            logfire.info(
                "User created",
                stable_id=user.stable_id,
                provider=user.provider.value,
                handle=user.handle.root if user.handle else None,
            )
            return created

    async def update(self, user: User) -> User:
        """Replace an existing user.

        Raises:
            RecordNotFoundError: If the user does not exist
            DuplicateHandleError: If the handle is taken by another user
        """
        with self.span("update", stable_id=user.stable_id):
            updated = await self.user_repository.update(user)
            logfire.info("User updated", stable_id=user.stable_id)
            return updated

    async def delete(self, user: User) -> None:
        """Delete a user and every record it owns.

        Owned records go first so no store is left referencing a user that
        no longer exists.
        """
        with self.span("delete", stable_id=user.stable_id):
            for repository in self.owned_record_repositories:
                count = await repository.delete_owned_by(user.stable_id)
                logfire.info(
                    "Owned records deleted",
                    stable_id=user.stable_id,
                    store=repository.name,
                    count=count,
                )
            await self.user_repository.delete(user)
            logfire.info("User deleted", stable_id=user.stable_id)
