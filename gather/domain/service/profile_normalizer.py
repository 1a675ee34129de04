"""Provider profile normalization.

Turns a raw userinfo payload into a ``CanonicalProfile``. Each provider
keeps its identifier, name and email in different places; the normalizers
are the only code that knows where.
"""

from typing import Generic, Optional, TypeVar

import logfire
from pydantic import ValidationError as PydanticValidationError

from gather.adapter.error import MalformedUpstreamResponseError
from gather.domain.error import IdentityExtractionError, RequiredProfileFieldMissingError
from gather.domain.value import AuthProvider, CanonicalProfile, StableId
from gather.domain.value.profile import GoogleProfile, KakaoProfile, ProviderPayload

from .base import Service
from .nickname import NicknameGenerator

P = TypeVar("P", bound=ProviderPayload)


class ProfileNormalizer(Service, Generic[P]):
    """Base normalizer: validate, then extract id, email and display name."""

    provider: AuthProvider
    schema: type[P]

    # Field names reported in extraction errors
    id_field: str = "id"
    email_field: str = "email"

    # Whether a returning user without a handle gets one generated
    backfill_missing_handle: bool = False

    def __init__(self, nickname_generator: NicknameGenerator) -> None:
        """Initialize normalizer.

        Args:
            nickname_generator: Source of fallback display names
        """
        self.nickname_generator = nickname_generator

    def normalize(self, payload: dict) -> CanonicalProfile:
        """Normalize a raw profile payload.

        Args:
            payload: JSON object returned by the userinfo endpoint

        Returns:
            Canonical profile

        Raises:
            MalformedUpstreamResponseError: If the payload does not fit the schema
            IdentityExtractionError: If the payload has no stable id
            RequiredProfileFieldMissingError: If the payload has no email
        """
        provider = self.provider.value
        try:
            profile = self.schema.model_validate(payload)
        except PydanticValidationError as e:
            raise MalformedUpstreamResponseError(
                f"Profile payload does not match schema: {e.error_count()} error(s)",
                provider=provider,
                phase="profile_fetch",
            ) from e

        stable_id = self.extract_stable_id(profile)
        if stable_id is None:
            raise IdentityExtractionError(provider, self.id_field)

        email = self.extract_email(profile)
        if email is None:
            raise RequiredProfileFieldMissingError(provider, self.email_field)

        display_name = self.extract_display_name(profile)
        generated = display_name is None
        if generated:
            display_name = self.nickname_generator.generate()
            logfire.info(
                "Provider supplied no display name, generated one",
                provider=provider,
                stable_id=stable_id,
                display_name=display_name,
            )

        return CanonicalProfile(
            provider=self.provider,
            stable_id=StableId(stable_id),
            display_name=display_name,
            email=email,
            display_name_generated=generated,
        )

    def extract_stable_id(self, profile: P) -> Optional[str]:
        raise NotImplementedError

    def extract_email(self, profile: P) -> Optional[str]:
        raise NotImplementedError

    def extract_display_name(self, profile: P) -> Optional[str]:
        raise NotImplementedError


class KakaoProfileNormalizer(ProfileNormalizer[KakaoProfile]):
    """Kakao: ``id``, ``properties.nickname``, ``kakao_account.email``."""

    provider = AuthProvider.KAKAO
    schema = KakaoProfile
    id_field = "id"
    email_field = "kakao_account.email"
    backfill_missing_handle = False

    def extract_stable_id(self, profile: KakaoProfile) -> Optional[str]:
        # Kakao ids are numeric; stored in decimal form
        return str(profile.id) if profile.id is not None else None

    def extract_email(self, profile: KakaoProfile) -> Optional[str]:
        return profile.kakao_account.email if profile.kakao_account else None

    def extract_display_name(self, profile: KakaoProfile) -> Optional[str]:
        return profile.properties.nickname if profile.properties else None


class GoogleProfileNormalizer(ProfileNormalizer[GoogleProfile]):
    """Google: ``sub``, ``name``, ``email`` at the top level."""

    provider = AuthProvider.GOOGLE
    schema = GoogleProfile
    id_field = "sub"
    email_field = "email"
    backfill_missing_handle = True

    def extract_stable_id(self, profile: GoogleProfile) -> Optional[str]:
        return profile.sub

    def extract_email(self, profile: GoogleProfile) -> Optional[str]:
        return profile.email

    def extract_display_name(self, profile: GoogleProfile) -> Optional[str]:
        return profile.name
