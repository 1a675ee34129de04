"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict

from gather.domain.model import User
from gather.domain.value import AuthProvider, StableId
from gather.domain.value.types import Handle


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        stable_id=StableId(row["stable_id"]),
        handle=Handle(row["handle"]) if row.get("handle") else None,
        display_name=row["display_name"],
        email=row.get("email"),
        password_hash=row["password_hash"],
        provider=AuthProvider(row["provider"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["provider"] = user.provider.value
    return data
