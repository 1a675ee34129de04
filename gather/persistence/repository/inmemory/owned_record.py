"""In-memory owned record repository for testing."""

from typing import Any

from gather.domain.repository.owned_record import OwnedRecordRepository
from gather.domain.value import StableId


class InMemoryOwnedRecordRepository(OwnedRecordRepository):
    """In-memory store of records keyed by owner, for testing the cascade."""

    def __init__(self, name: str = "owned_record") -> None:
        self.name = name
        self._records: dict[StableId, list[Any]] = {}

    def add(self, owner: StableId, record: Any) -> None:
        """Attach a record to an owner."""
        self._records.setdefault(owner, []).append(record)

    def find_all_by_owner(self, owner: StableId) -> list[Any]:
        """Return records owned by a user."""
        return list(self._records.get(owner, []))

    async def delete_owned_by(self, stable_id: StableId) -> int:
        """Delete every record owned by the user."""
        return len(self._records.pop(stable_id, []))
