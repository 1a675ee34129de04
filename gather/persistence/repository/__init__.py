"""PostgreSQL repository implementations."""

from gather.persistence.repository.owned_record import PostgresOwnedRecordRepository
from gather.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresOwnedRecordRepository",
    "PostgresUserRepository",
]
