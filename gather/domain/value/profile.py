"""Provider profile payload schemas.

Raw userinfo responses are validated into these models before any field is
read, so a wrongly shaped payload fails as a validation error instead of
surfacing later as a missing attribute. Fields the reconciliation needs are
optional here; their absence is reported by the normalizers with a
dedicated error.
"""

from pydantic import BaseModel, ConfigDict, field_validator


class ProviderPayload(BaseModel):
    """Base class for provider payload schemas."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Treat blank strings as absent."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class KakaoProperties(ProviderPayload):
    """``properties`` object of a Kakao profile."""

    nickname: str | None = None
    profile_image: str | None = None


class KakaoAccount(ProviderPayload):
    """``kakao_account`` object of a Kakao profile."""

    email: str | None = None
    is_email_verified: bool | None = None


class KakaoProfile(ProviderPayload):
    """Kakao ``/v2/user/me`` response.

    Example::

        {"id": 12345,
         "properties": {"nickname": "Kim"},
         "kakao_account": {"email": "a@b.com"}}
    """

    id: int | str | None = None
    properties: KakaoProperties | None = None
    kakao_account: KakaoAccount | None = None


class GoogleProfile(ProviderPayload):
    """Google OpenID Connect userinfo response (flat object)."""

    sub: str | None = None
    name: str | None = None
    email: str | None = None
    email_verified: bool | None = None
    picture: str | None = None
