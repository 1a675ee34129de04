"""PostgreSQL implementation of User repository."""

from typing import Optional

import logfire
from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gather.domain.error import (
    DuplicateHandleError,
    DuplicateStableIdError,
    RecordNotFoundError,
)
from gather.domain.model import User
from gather.domain.repository import UserRepository
from gather.domain.value import StableId
from gather.domain.value.types import Handle
from gather.persistence.mappers import row_to_user, user_to_dict
from gather.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository.

    Uniqueness of stable id (primary key) and handle (``uq_users_handle``)
    is enforced by the database; violations map to domain errors.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_stable_id(self, stable_id: StableId) -> Optional[User]:
        """Find a user by stable id."""
        stmt = select(users_table).where(users_table.c.stable_id == stable_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by their handle."""
        stmt = select(users_table).where(users_table.c.handle == handle.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def exists_by_stable_id(self, stable_id: StableId) -> bool:
        """Check whether a user with this stable id exists."""
        stmt = select(exists().where(users_table.c.stable_id == stable_id))
        return bool(await self.session.scalar(stmt))

    async def exists_by_handle(self, handle: Handle) -> bool:
        """Check whether a user with this handle exists."""
        stmt = select(exists().where(users_table.c.handle == handle.root))
        return bool(await self.session.scalar(stmt))

    async def insert(self, user: User) -> User:
        """Insert a new user.

        Runs inside a savepoint so a constraint violation leaves the
        request transaction usable.
        """
        stmt = users_table.insert().values(**user_to_dict(user))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise self._map_integrity_error(e, user) from e
        return user

    async def update(self, user: User) -> User:
        """Replace an existing user."""
        values = user_to_dict(user)
        values.pop("stable_id")
        values.pop("created_at")
        stmt = (
            users_table.update()
            .where(users_table.c.stable_id == user.stable_id)
            .values(**values)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except IntegrityError as e:
            raise self._map_integrity_error(e, user) from e

        if result.rowcount == 0:
            raise RecordNotFoundError("User", user.stable_id)
        return user

    async def delete(self, user: User) -> None:
        """Delete a user."""
        stmt = users_table.delete().where(users_table.c.stable_id == user.stable_id)
        await self.session.execute(stmt)
        await self.session.flush()

    @staticmethod
    def _map_integrity_error(error: IntegrityError, user: User) -> Exception:
        message = str(error.orig)
        if "uq_users_handle" in message and user.handle is not None:
            return DuplicateHandleError(user.handle.root)
        if "users_pkey" in message:
            return DuplicateStableIdError(user.stable_id)
        logfire.error("Unexpected integrity error", error=message)
        return error
