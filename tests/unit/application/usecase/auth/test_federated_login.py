"""Unit tests for FederatedLoginUseCase."""

import httpx
import pytest

from gather.adapter.error import (
    MalformedUpstreamResponseError,
    UpstreamRejectedError,
    UpstreamUnavailableError,
)
from gather.adapter.google import GoogleGateway
from gather.adapter.kakao import KakaoGateway, RealKakaoGateway
from gather.application.usecase.auth import FederatedLoginUseCase
from gather.application.usecase.auth.federated_login import FederatedLoginRequest
from gather.config import KakaoOAuthSettings
from gather.domain.error import (
    IdentityExtractionError,
    ProviderAccountConflictError,
    RequiredProfileFieldMissingError,
)
from gather.domain.model import User
from gather.domain.repository import UserRepository
from gather.domain.service import JWTService
from gather.domain.service.nickname import ADJECTIVES
from gather.domain.value import AuthProvider, StableId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def kakao_payload(email: str = "a@b.com", nickname: str = "Kim") -> dict:
    return {
        "id": 12345,
        "properties": {"nickname": nickname},
        "kakao_account": {"email": email},
    }


def kakao_request(code: str = "abc") -> FederatedLoginRequest:
    return FederatedLoginRequest(provider=AuthProvider.KAKAO, code=code)


def google_request(code: str = "abc") -> FederatedLoginRequest:
    return FederatedLoginRequest(provider=AuthProvider.GOOGLE, code=code)


class TestFirstLogin:
    """Tests for a provider identity seen for the first time."""

    @pytest.mark.asyncio
    async def test_kakao_first_login_creates_user(self, unit_env):
        """Should create the user keyed by the Kakao id with a generated handle."""
        # Arrange
        gateway = await unit_env.get(KakaoGateway)
        gateway.prime_profile(kakao_payload())
        use_case = await unit_env.get(FederatedLoginUseCase)
        user_repo = await unit_env.get(UserRepository)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await use_case.execute(kakao_request())

        # Assert
        stored = await user_repo.find_by_stable_id(StableId("12345"))
        assert stored is not None
        assert stored.display_name == "Kim"
        assert stored.email == "a@b.com"
        assert stored.provider == AuthProvider.KAKAO
        assert stored.handle is not None
        assert response.user.handle == stored.handle.root
        assert jwt_service.verify_token(response.token).sub == "12345"
        assert gateway.codes == ["abc"]

    @pytest.mark.asyncio
    async def test_federated_account_stores_placeholder_hash(self, unit_env):
        use_case = await unit_env.get(FederatedLoginUseCase)
        user_repo = await unit_env.get(UserRepository)

        await use_case.execute(kakao_request())

        stored = await user_repo.find_by_stable_id(StableId("1234567890"))
        assert stored.password_hash != "oauth2user"
        assert stored.password_hash.startswith("$argon2")

    @pytest.mark.asyncio
    async def test_google_first_login_creates_user(self, unit_env):
        """Should key the user by Google's sub claim."""
        gateway = await unit_env.get(GoogleGateway)
        gateway.prime_profile({"sub": "g-1", "name": "Lee", "email": "lee@gmail.com"})
        use_case = await unit_env.get(FederatedLoginUseCase)

        response = await use_case.execute(google_request())

        assert response.user.stable_id == "g-1"
        assert response.user.display_name == "Lee"
        assert response.user.provider == AuthProvider.GOOGLE
        assert response.user.handle is not None

    @pytest.mark.asyncio
    async def test_missing_name_gets_generated_display_name(self, unit_env):
        gateway = await unit_env.get(GoogleGateway)
        gateway.prime_profile({"sub": "g-2", "email": "anon@gmail.com"})
        use_case = await unit_env.get(FederatedLoginUseCase)

        response = await use_case.execute(google_request())

        assert response.user.display_name.startswith(ADJECTIVES)

    @pytest.mark.asyncio
    async def test_concurrent_first_login_refreshes_winner(self, unit_env):
        """Losing the insert race should still log in the same account."""
        # Arrange
        gateway = await unit_env.get(KakaoGateway)
        gateway.prime_profile(kakao_payload(email="new@b.com"))
        use_case = await unit_env.get(FederatedLoginUseCase)
        user_repo = await unit_env.get(UserRepository)
        original_create = use_case.user_service.create

        async def create_after_rival(user: User) -> User:
            await user_repo.insert(
                user.model_copy(update={"handle": None, "email": "old@b.com"})
            )
            return await original_create(user)

        use_case.user_service.create = create_after_rival

        # Act
        response = await use_case.execute(kakao_request())

        # Assert
        assert response.user.stable_id == "12345"
        assert response.user.email == "new@b.com"


class TestReturningLogin:
    """Tests for a provider identity that already has an account."""

    @pytest.mark.asyncio
    async def test_second_login_refreshes_email_and_keeps_handle(self, unit_env):
        """Should update changed profile fields and never touch the handle."""
        # Arrange
        gateway = await unit_env.get(KakaoGateway)
        use_case = await unit_env.get(FederatedLoginUseCase)
        gateway.prime_profile(kakao_payload(email="a@b.com"))
        first = await use_case.execute(kakao_request("one"))

        # Act
        gateway.prime_profile(kakao_payload(email="c@d.com", nickname="Kim Jr"))
        second = await use_case.execute(kakao_request("two"))

        # Assert
        assert second.user.stable_id == first.user.stable_id
        assert second.user.handle == first.user.handle
        assert second.user.email == "c@d.com"
        assert second.user.display_name == "Kim Jr"
        assert second.user.created_at == first.user.created_at

    @pytest.mark.asyncio
    async def test_unchanged_profile_is_idempotent(self, unit_env):
        """Logging in twice with the same profile should not rewrite the record."""
        gateway = await unit_env.get(KakaoGateway)
        gateway.prime_profile(kakao_payload())
        use_case = await unit_env.get(FederatedLoginUseCase)
        first = await use_case.execute(kakao_request("one"))

        second = await use_case.execute(kakao_request("two"))

        assert second.user == first.user

    @pytest.mark.asyncio
    async def test_generated_name_does_not_overwrite_stored_name(self, unit_env):
        gateway = await unit_env.get(GoogleGateway)
        use_case = await unit_env.get(FederatedLoginUseCase)
        gateway.prime_profile({"sub": "g-1", "name": "Lee", "email": "lee@gmail.com"})
        await use_case.execute(google_request("one"))

        gateway.prime_profile({"sub": "g-1", "email": "lee@gmail.com"})
        second = await use_case.execute(google_request("two"))

        assert second.user.display_name == "Lee"

    @pytest.mark.asyncio
    async def test_google_backfills_missing_handle(self, unit_env):
        """A returning Google user without a handle gets one generated."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        await user_repo.insert(
            User(
                stable_id=StableId("g-1"),
                handle=None,
                display_name="Lee",
                email="lee@gmail.com",
                password_hash="hash",
                provider=AuthProvider.GOOGLE,
            )
        )
        gateway = await unit_env.get(GoogleGateway)
        gateway.prime_profile({"sub": "g-1", "name": "Lee", "email": "lee@gmail.com"})
        use_case = await unit_env.get(FederatedLoginUseCase)

        # Act
        response = await use_case.execute(google_request())

        # Assert
        assert response.user.handle is not None
        stored = await user_repo.find_by_stable_id(StableId("g-1"))
        assert stored.handle is not None

    @pytest.mark.asyncio
    async def test_kakao_does_not_backfill_missing_handle(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        await user_repo.insert(
            User(
                stable_id=StableId("12345"),
                handle=None,
                display_name="Kim",
                email="a@b.com",
                password_hash="hash",
                provider=AuthProvider.KAKAO,
            )
        )
        gateway = await unit_env.get(KakaoGateway)
        gateway.prime_profile(kakao_payload())
        use_case = await unit_env.get(FederatedLoginUseCase)

        response = await use_case.execute(kakao_request())

        assert response.user.handle is None


class TestCrossProviderLogin:
    """Tests for a provider id that matches another provider's account."""

    @pytest.mark.asyncio
    async def test_google_sub_matching_kakao_id_is_rejected(self, unit_env):
        """A Google login must not sign in as, or modify, the Kakao account."""
        # Arrange
        kakao = await unit_env.get(KakaoGateway)
        google = await unit_env.get(GoogleGateway)
        use_case = await unit_env.get(FederatedLoginUseCase)
        user_repo = await unit_env.get(UserRepository)
        kakao.prime_profile(kakao_payload(email="kim@b.com", nickname="Kim"))
        await use_case.execute(kakao_request())
        before = await user_repo.find_by_stable_id(StableId("12345"))
        google.prime_profile(
            {"sub": "12345", "name": "Mallory", "email": "mallory@gmail.com"}
        )

        # Act & Assert
        with pytest.raises(ProviderAccountConflictError) as exc_info:
            await use_case.execute(google_request())

        assert exc_info.value.account_provider == "kakao"
        assert exc_info.value.login_provider == "google"
        after = await user_repo.find_by_stable_id(StableId("12345"))
        assert after == before
        assert after.provider == AuthProvider.KAKAO
        assert after.email == "kim@b.com"

    @pytest.mark.asyncio
    async def test_local_account_cannot_be_claimed_by_provider_id(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        await user_repo.insert(
            User(
                stable_id=StableId("g-1"),
                handle=None,
                display_name="Local",
                email="local@b.com",
                password_hash="hash",
                provider=AuthProvider.LOCAL,
            )
        )
        google = await unit_env.get(GoogleGateway)
        google.prime_profile({"sub": "g-1", "name": "Lee", "email": "lee@gmail.com"})
        use_case = await unit_env.get(FederatedLoginUseCase)

        with pytest.raises(ProviderAccountConflictError):
            await use_case.execute(google_request())

        stored = await user_repo.find_by_stable_id(StableId("g-1"))
        assert stored.handle is None
        assert stored.email == "local@b.com"

    @pytest.mark.asyncio
    async def test_insert_race_with_other_provider_is_rejected(self, unit_env):
        """Losing the insert to another provider's account is a conflict too."""
        # Arrange
        google = await unit_env.get(GoogleGateway)
        google.prime_profile(
            {"sub": "12345", "name": "Mallory", "email": "mallory@gmail.com"}
        )
        use_case = await unit_env.get(FederatedLoginUseCase)
        user_repo = await unit_env.get(UserRepository)
        original_create = use_case.user_service.create

        async def create_after_rival(user: User) -> User:
            await user_repo.insert(
                user.model_copy(
                    update={
                        "handle": None,
                        "provider": AuthProvider.KAKAO,
                        "email": "kim@b.com",
                    }
                )
            )
            return await original_create(user)

        use_case.user_service.create = create_after_rival

        # Act & Assert
        with pytest.raises(ProviderAccountConflictError):
            await use_case.execute(google_request())

        stored = await user_repo.find_by_stable_id(StableId("12345"))
        assert stored.provider == AuthProvider.KAKAO
        assert stored.email == "kim@b.com"


class TestFailedLogin:
    """Tests for logins that must leave the store untouched."""

    @pytest.mark.asyncio
    async def test_missing_email_rejected_without_writes(self, unit_env):
        """A Kakao profile without an email should fail and create nothing."""
        gateway = await unit_env.get(KakaoGateway)
        gateway.prime_profile({"id": 12345, "properties": {"nickname": "Kim"}})
        use_case = await unit_env.get(FederatedLoginUseCase)
        user_repo = await unit_env.get(UserRepository)

        with pytest.raises(RequiredProfileFieldMissingError) as exc_info:
            await use_case.execute(kakao_request())

        assert exc_info.value.field == "kakao_account.email"
        assert await user_repo.exists_by_stable_id(StableId("12345")) is False

    @pytest.mark.asyncio
    async def test_missing_id_rejected(self, unit_env):
        gateway = await unit_env.get(KakaoGateway)
        gateway.prime_profile({"kakao_account": {"email": "a@b.com"}})
        use_case = await unit_env.get(FederatedLoginUseCase)

        with pytest.raises(IdentityExtractionError):
            await use_case.execute(kakao_request())

    @pytest.mark.asyncio
    async def test_rejected_code_leaves_store_untouched(self, unit_env):
        """A provider 400 on token exchange should surface with its phase."""
        # Arrange
        gateway = await unit_env.get(KakaoGateway)
        gateway.prime_failure(UpstreamRejectedError(400, "bad-code"))
        use_case = await unit_env.get(FederatedLoginUseCase)
        user_repo = await unit_env.get(UserRepository)

        # Act
        with pytest.raises(UpstreamRejectedError) as exc_info:
            await use_case.execute(kakao_request())

        # Assert
        assert exc_info.value.status_code == 400
        assert exc_info.value.provider == "kakao"
        assert await user_repo.exists_by_stable_id(StableId("1234567890")) is False

    @pytest.mark.asyncio
    async def test_profile_fetch_outage_surfaces(self, unit_env):
        gateway = await unit_env.get(GoogleGateway)
        gateway.prime_failure(
            UpstreamUnavailableError("timed out", provider="google", phase="profile_fetch")
        )
        use_case = await unit_env.get(FederatedLoginUseCase)

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await use_case.execute(google_request())

        assert exc_info.value.phase == "profile_fetch"

    @pytest.mark.asyncio
    async def test_http_gateway_rejection_leaves_store_untouched(self, unit_env):
        """The real Kakao gateway's 400 reaches the caller as a rejection."""
        # Arrange
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"error": "invalid_grant"})

        use_case = await unit_env.get(FederatedLoginUseCase)
        use_case.auth_service.gateways[AuthProvider.KAKAO] = RealKakaoGateway(
            settings=KakaoOAuthSettings(client_id="kakao-client"),
            transport=httpx.MockTransport(handler),
        )
        user_repo = await unit_env.get(UserRepository)

        # Act
        with pytest.raises(UpstreamRejectedError) as exc_info:
            await use_case.execute(kakao_request("bad-code"))

        # Assert
        assert exc_info.value.phase == "token_exchange"
        assert await user_repo.exists_by_stable_id(StableId("1234567890")) is False

    @pytest.mark.asyncio
    async def test_http_gateway_malformed_profile(self, unit_env):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "POST":
                return httpx.Response(200, json={"access_token": "t"})
            return httpx.Response(200, content=b"<html>")

        use_case = await unit_env.get(FederatedLoginUseCase)
        use_case.auth_service.gateways[AuthProvider.KAKAO] = RealKakaoGateway(
            settings=KakaoOAuthSettings(client_id="kakao-client"),
            transport=httpx.MockTransport(handler),
        )

        with pytest.raises(MalformedUpstreamResponseError) as exc_info:
            await use_case.execute(kakao_request())

        assert exc_info.value.phase == "profile_fetch"
