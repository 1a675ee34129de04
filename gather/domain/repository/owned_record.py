"""Owned record repository interface."""

from abc import ABC, abstractmethod

from gather.domain.value import StableId


class OwnedRecordRepository(ABC):
    """Store holding records owned by a user.

    Account deletion cascades through every registered implementation
    before the user itself is removed.
    """

    name: str = "owned_record"

    @abstractmethod
    async def delete_owned_by(self, stable_id: StableId) -> int:
        """Delete every record owned by the user.

        Args:
            stable_id: Owner's stable id

        Returns:
            Number of records deleted
        """
        pass
