"""Domain value objects for Gather.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, RootModel, field_validator

from gather.domain.value.identifiers import StableId


class AuthProvider(str, Enum):
    """Where an account was created. Never changes after creation."""

    LOCAL = "local"
    KAKAO = "kakao"
    GOOGLE = "google"


class Handle(RootModel[str]):
    """Unique public username chosen by (or generated for) a user.

    2-30 characters of letters, digits, underscores, dots or hyphens.
    Compared by value; ``str()`` gives the bare handle.
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle length and characters."""
        if not re.fullmatch(r"[A-Za-z0-9_.\-]{2,30}", v):
            raise ValueError(
                "Handle must be 2-30 characters of letters, digits, '_', '.' or '-'"
            )
        return v

    def __str__(self) -> str:
        return self.root


class CanonicalProfile(BaseModel):
    """Normalized identity extracted from a provider profile payload."""

    model_config = ConfigDict(frozen=True)

    provider: AuthProvider
    stable_id: StableId
    display_name: str
    email: str | None = None
    display_name_generated: bool = False  # True when the provider supplied no name
