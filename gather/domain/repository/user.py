"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from gather.domain.model.user import User
from gather.domain.value import StableId
from gather.domain.value.types import Handle


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations. Implementations
    must reject an insert or update that would duplicate a stable id or a
    handle, regardless of any check the caller performed beforehand.
    """

    @abstractmethod
    async def find_by_stable_id(self, stable_id: StableId) -> Optional[User]:
        """Find a user by stable id.

        Args:
            stable_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by their handle.

        Args:
            handle: The user's handle

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_stable_id(self, stable_id: StableId) -> bool:
        """Check whether a user with this stable id exists."""
        pass

    @abstractmethod
    async def exists_by_handle(self, handle: Handle) -> bool:
        """Check whether a user with this handle exists."""
        pass

    @abstractmethod
    async def insert(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The inserted user

        Raises:
            DuplicateStableIdError: If the stable id is taken
            DuplicateHandleError: If the handle is taken
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Replace an existing user.

        Args:
            user: The new state of the user

        Returns:
            The updated user

        Raises:
            RecordNotFoundError: If no user has this stable id
            DuplicateHandleError: If the handle is taken by another user
        """
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Delete a user.

        Args:
            user: The user to delete
        """
        pass
