"""User aggregate root.

A user is created by local signup or by the first successful federated
login, and is keyed by a stable id that is never reused.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from gather.domain.value import AuthProvider, StableId
from gather.domain.value.types import Handle


def _now() -> datetime:
    return datetime.now(timezone.utc)


class User(BaseModel):
    """User record.

    ``stable_id`` and ``handle`` are unique across all users. ``provider``
    is fixed at creation. Federated-only accounts carry the hash of their
    provider's placeholder secret as ``password_hash``.
    """

    model_config = ConfigDict(frozen=True)

    stable_id: StableId
    handle: Optional[Handle] = None
    display_name: str
    email: Optional[str] = None
    password_hash: str
    provider: AuthProvider
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)

    def differs_from(self, changes: dict) -> bool:
        """Whether applying ``changes`` would alter any field."""
        return any(getattr(self, field) != value for field, value in changes.items())

    def with_changes(self, **changes) -> "User":
        """Copy of this user with ``changes`` applied and ``updated_at`` bumped.

        ``stable_id``, ``provider`` and ``created_at`` never change.
        """
        for field in ("stable_id", "provider", "created_at"):
            if field in changes:
                raise ValueError(f"User.{field} cannot be changed")
        return self.model_copy(update={**changes, "updated_at": _now()})
