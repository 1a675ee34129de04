"""In-memory user repository for testing."""

from typing import Optional

from gather.domain.error import (
    DuplicateHandleError,
    DuplicateStableIdError,
    RecordNotFoundError,
)
from gather.domain.model.user import User
from gather.domain.repository.user import UserRepository
from gather.domain.value import StableId
from gather.domain.value.types import Handle


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Each method runs without awaiting, so a check and the write that
    follows it cannot interleave with another coroutine.
    """

    def __init__(self) -> None:
        self._users: dict[StableId, User] = {}

    async def find_by_stable_id(self, stable_id: StableId) -> Optional[User]:
        """Find a user by stable id."""
        return self._users.get(stable_id)

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by their handle."""
        for user in self._users.values():
            if user.handle == handle:
                return user
        return None

    async def exists_by_stable_id(self, stable_id: StableId) -> bool:
        """Check whether a user with this stable id exists."""
        return stable_id in self._users

    async def exists_by_handle(self, handle: Handle) -> bool:
        """Check whether a user with this handle exists."""
        return self._handle_owner(handle) is not None

    async def insert(self, user: User) -> User:
        """Insert a new user, enforcing stable id and handle uniqueness."""
        if user.stable_id in self._users:
            raise DuplicateStableIdError(user.stable_id)
        if user.handle is not None and self._handle_owner(user.handle) is not None:
            raise DuplicateHandleError(user.handle.root)
        self._users[user.stable_id] = user
        return user

    async def update(self, user: User) -> User:
        """Replace an existing user, enforcing handle uniqueness."""
        if user.stable_id not in self._users:
            raise RecordNotFoundError("User", user.stable_id)
        if user.handle is not None:
            owner = self._handle_owner(user.handle)
            if owner is not None and owner != user.stable_id:
                raise DuplicateHandleError(user.handle.root)
        self._users[user.stable_id] = user
        return user

    async def delete(self, user: User) -> None:
        """Delete a user."""
        self._users.pop(user.stable_id, None)

    def _handle_owner(self, handle: Handle) -> Optional[StableId]:
        for user in self._users.values():
            if user.handle == handle:
                return user.stable_id
        return None
