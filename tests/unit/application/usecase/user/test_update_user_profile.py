"""Unit tests for UpdateUserProfileUseCase."""

import pytest

from gather.application.usecase.auth import LocalLoginUseCase, RegisterUseCase
from gather.application.usecase.auth.login import LoginRequest
from gather.application.usecase.auth.register import RegisterRequest
from gather.application.usecase.user import UpdateUserProfileUseCase
from gather.application.usecase.user.update_user_profile import (
    UpdateUserProfileRequest,
)
from gather.domain.error import (
    CredentialMismatchError,
    NotAuthorizedError,
    RecordNotFoundError,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def register_alice(unit_env) -> str:
    register = await unit_env.get(RegisterUseCase)
    created = await register.execute(
        RegisterRequest(handle="alice", password="s3cret", display_name="Alice")
    )
    return created.stable_id


class TestUpdateUserProfileUseCase:
    """Tests for UpdateUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_update_display_name(self, unit_env):
        """Should change the display name and bump updated_at."""
        # Arrange
        stable_id = await register_alice(unit_env)
        use_case = await unit_env.get(UpdateUserProfileUseCase)

        # Act
        result = await use_case.execute(
            UpdateUserProfileRequest(
                stable_id=stable_id, requester=stable_id, display_name="Alice B"
            )
        )

        # Assert
        assert result.display_name == "Alice B"
        assert result.handle == "alice"
        assert result.updated_at >= result.created_at

    @pytest.mark.asyncio
    async def test_update_password_rehashes(self, unit_env):
        """The new password works for login and the old one stops working."""
        # Arrange
        stable_id = await register_alice(unit_env)
        use_case = await unit_env.get(UpdateUserProfileUseCase)
        login = await unit_env.get(LocalLoginUseCase)

        # Act
        await use_case.execute(
            UpdateUserProfileRequest(
                stable_id=stable_id, requester=stable_id, password="n3w"
            )
        )

        # Assert
        response = await login.execute(LoginRequest(handle="alice", password="n3w"))
        assert response.user.stable_id == stable_id
        with pytest.raises(CredentialMismatchError):
            await login.execute(LoginRequest(handle="alice", password="s3cret"))

    @pytest.mark.asyncio
    async def test_other_requester_rejected(self, unit_env):
        stable_id = await register_alice(unit_env)
        use_case = await unit_env.get(UpdateUserProfileUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateUserProfileRequest(
                    stable_id=stable_id, requester="mallory", display_name="Hacked"
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_user_not_found(self, unit_env):
        use_case = await unit_env.get(UpdateUserProfileUseCase)

        with pytest.raises(RecordNotFoundError):
            await use_case.execute(
                UpdateUserProfileRequest(
                    stable_id="ghost", requester="ghost", display_name="Boo"
                )
            )

    def test_empty_display_name_invalid(self):
        with pytest.raises(ValueError):
            UpdateUserProfileRequest(stable_id="u", requester="u", display_name="")
