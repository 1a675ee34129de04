"""Domain value objects for Gather."""

from gather.domain.value.identifiers import StableId
from gather.domain.value.profile import GoogleProfile, KakaoProfile
from gather.domain.value.types import AuthProvider, CanonicalProfile, Handle

__all__ = [
    # Identifiers
    "StableId",
    # Types
    "AuthProvider",
    "CanonicalProfile",
    "Handle",
    # Provider payloads
    "GoogleProfile",
    "KakaoProfile",
]
