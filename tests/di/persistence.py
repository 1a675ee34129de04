"""Mock persistence providers for testing."""

from dishka import Scope, provide

from gather.domain.repository import OwnedRecordRepository, UserRepository
from gather.persistence.repository.inmemory import (
    InMemoryOwnedRecordRepository,
    InMemoryUserRepository,
)
from gather.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scope so state survives across requests of one container (signup
    then login in e2e tests). Each test builds its own container, which
    keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> InMemoryOwnedRecordRepository:
        """Provide in-memory store of records owned by users."""
        return InMemoryOwnedRecordRepository(name="messages")

    @provide(scope=Scope.APP)
    def get_owned_record_repositories(
        self, messages: InMemoryOwnedRecordRepository
    ) -> list[OwnedRecordRepository]:
        """Provide stores cleared on account deletion."""
        return [messages]
