"""Unit tests for ChangeHandleUseCase."""

import pytest

from gather.application.usecase.auth import FederatedLoginUseCase, RegisterUseCase
from gather.application.usecase.auth.federated_login import FederatedLoginRequest
from gather.application.usecase.auth.register import RegisterRequest
from gather.application.usecase.user import ChangeHandleUseCase
from gather.application.usecase.user.change_handle import ChangeHandleRequest
from gather.domain.error import DuplicateHandleError, NotAuthorizedError
from gather.domain.value import AuthProvider
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestChangeHandleUseCase:
    """Tests for ChangeHandleUseCase."""

    @pytest.mark.asyncio
    async def test_federated_user_replaces_generated_handle(self, unit_env):
        """Should swap the handle generated at first login."""
        # Arrange
        federated = await unit_env.get(FederatedLoginUseCase)
        login = await federated.execute(
            FederatedLoginRequest(provider=AuthProvider.KAKAO, code="abc")
        )
        stable_id = login.user.stable_id
        use_case = await unit_env.get(ChangeHandleUseCase)

        # Act
        result = await use_case.execute(
            ChangeHandleRequest(stable_id=stable_id, requester=stable_id, handle="kim")
        )

        # Assert
        assert result.handle == "kim"

    @pytest.mark.asyncio
    async def test_same_handle_is_noop(self, unit_env):
        register = await unit_env.get(RegisterUseCase)
        alice = await register.execute(
            RegisterRequest(handle="alice", password="s3cret", display_name="Alice")
        )
        use_case = await unit_env.get(ChangeHandleUseCase)

        result = await use_case.execute(
            ChangeHandleRequest(
                stable_id=alice.stable_id, requester=alice.stable_id, handle="alice"
            )
        )

        assert result == alice

    @pytest.mark.asyncio
    async def test_taken_handle_rejected(self, unit_env):
        register = await unit_env.get(RegisterUseCase)
        await register.execute(
            RegisterRequest(handle="alice", password="s3cret", display_name="Alice")
        )
        bob = await register.execute(
            RegisterRequest(handle="bob", password="s3cret", display_name="Bob")
        )
        use_case = await unit_env.get(ChangeHandleUseCase)

        with pytest.raises(DuplicateHandleError):
            await use_case.execute(
                ChangeHandleRequest(
                    stable_id=bob.stable_id, requester=bob.stable_id, handle="alice"
                )
            )

    @pytest.mark.asyncio
    async def test_other_requester_rejected(self, unit_env):
        register = await unit_env.get(RegisterUseCase)
        alice = await register.execute(
            RegisterRequest(handle="alice", password="s3cret", display_name="Alice")
        )
        use_case = await unit_env.get(ChangeHandleUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                ChangeHandleRequest(
                    stable_id=alice.stable_id, requester="mallory", handle="mal"
                )
            )
