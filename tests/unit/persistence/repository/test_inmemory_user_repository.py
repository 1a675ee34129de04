"""Unit tests for InMemoryUserRepository uniqueness rules."""

import pytest

from gather.domain.error import (
    DuplicateHandleError,
    DuplicateStableIdError,
    RecordNotFoundError,
)
from gather.domain.model import User
from gather.domain.value import AuthProvider, StableId
from gather.domain.value.types import Handle
from gather.persistence.repository.inmemory import InMemoryUserRepository


def make_user(stable_id: str, handle: str | None) -> User:
    return User(
        stable_id=StableId(stable_id),
        handle=Handle(handle) if handle else None,
        display_name=stable_id,
        password_hash="hash",
        provider=AuthProvider.LOCAL,
    )


class TestInMemoryUserRepository:
    """Tests for InMemoryUserRepository."""

    @pytest.mark.asyncio
    async def test_insert_duplicate_stable_id_rejected(self):
        repo = InMemoryUserRepository()
        await repo.insert(make_user("u1", "alice"))

        with pytest.raises(DuplicateStableIdError):
            await repo.insert(make_user("u1", "bob"))

    @pytest.mark.asyncio
    async def test_insert_duplicate_handle_rejected(self):
        repo = InMemoryUserRepository()
        await repo.insert(make_user("u1", "alice"))

        with pytest.raises(DuplicateHandleError):
            await repo.insert(make_user("u2", "alice"))

        assert await repo.exists_by_stable_id(StableId("u2")) is False

    @pytest.mark.asyncio
    async def test_users_without_handle_coexist(self):
        repo = InMemoryUserRepository()

        await repo.insert(make_user("u1", None))
        await repo.insert(make_user("u2", None))

        assert await repo.exists_by_stable_id(StableId("u2")) is True

    @pytest.mark.asyncio
    async def test_update_to_taken_handle_rejected(self):
        repo = InMemoryUserRepository()
        await repo.insert(make_user("u1", "alice"))
        bob = await repo.insert(make_user("u2", "bob"))

        with pytest.raises(DuplicateHandleError):
            await repo.update(bob.model_copy(update={"handle": Handle("alice")}))

    @pytest.mark.asyncio
    async def test_update_keeping_own_handle_allowed(self):
        repo = InMemoryUserRepository()
        alice = await repo.insert(make_user("u1", "alice"))

        updated = await repo.update(alice.model_copy(update={"display_name": "Al"}))

        assert updated.display_name == "Al"
        found = await repo.find_by_handle(Handle("alice"))
        assert found is not None and found.display_name == "Al"

    @pytest.mark.asyncio
    async def test_update_missing_user_rejected(self):
        repo = InMemoryUserRepository()

        with pytest.raises(RecordNotFoundError):
            await repo.update(make_user("ghost", "ghost"))

    @pytest.mark.asyncio
    async def test_delete_frees_handle(self):
        repo = InMemoryUserRepository()
        alice = await repo.insert(make_user("u1", "alice"))

        await repo.delete(alice)

        assert await repo.exists_by_handle(Handle("alice")) is False
        await repo.insert(make_user("u2", "alice"))
