"""User response models and ownership checks shared by user use cases."""

from datetime import datetime

from pydantic import BaseModel

from gather.domain.error import NotAuthorizedError
from gather.domain.model import User
from gather.domain.value import AuthProvider


class UserResponse(BaseModel):
    """Public view of a user record (never includes the password hash)."""

    stable_id: str
    handle: str | None
    display_name: str
    email: str | None
    provider: AuthProvider
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            stable_id=user.stable_id,
            handle=user.handle.root if user.handle else None,
            display_name=user.display_name,
            email=user.email,
            provider=user.provider,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


def require_owner(stable_id: str, requester: str) -> None:
    """Only the account owner may read or change an account.

    Raises:
        NotAuthorizedError: If requester is not the account owner
    """
    if stable_id != requester:
        raise NotAuthorizedError("User", stable_id, requester)
