"""In-memory repository implementations for testing."""

from .owned_record import InMemoryOwnedRecordRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryOwnedRecordRepository",
    "InMemoryUserRepository",
]
