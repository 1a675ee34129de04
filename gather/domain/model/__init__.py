"""Domain model entities for Gather."""

from gather.domain.model.user import User

__all__ = [
    "User",
]
