"""Repository interfaces for Gather domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from gather.domain.repository.owned_record import OwnedRecordRepository
from gather.domain.repository.user import UserRepository

__all__ = [
    "OwnedRecordRepository",
    "UserRepository",
]
