"""PostgreSQL implementation of the owned record repository."""

from sqlalchemy import column, or_, table
from sqlalchemy.ext.asyncio import AsyncSession

from gather.domain.repository import OwnedRecordRepository
from gather.domain.value import StableId


class PostgresOwnedRecordRepository(OwnedRecordRepository):
    """Deletes rows of one table whose owner columns reference a user.

    A row matches when any of ``owner_columns`` equals the stable id, which
    covers tables such as messages that reference a user as sender or
    receiver.
    """

    def __init__(
        self, session: AsyncSession, table_name: str, owner_columns: list[str]
    ) -> None:
        """Initialize repository.

        Args:
            session: SQLAlchemy async session
            table_name: Table holding the owned rows
            owner_columns: Columns holding the owner's stable id
        """
        if not owner_columns:
            raise ValueError(f"No owner columns configured for {table_name}")
        self.session = session
        self.name = table_name
        self._table = table(table_name, *(column(name) for name in owner_columns))
        self._owner_columns = owner_columns

    async def delete_owned_by(self, stable_id: StableId) -> int:
        """Delete every row owned by the user."""
        condition = or_(
            *(self._table.c[name] == stable_id for name in self._owner_columns)
        )
        result = await self.session.execute(self._table.delete().where(condition))
        return result.rowcount
