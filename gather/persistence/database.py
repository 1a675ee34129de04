"""Async PostgreSQL engine and session factory."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from gather.config import Settings

APPLICATION_NAME = "gather-accounts"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for ``settings.database``.

    SQL is echoed when ``settings.debug`` is set. Connections are checked
    before use so a restarted database does not fail the first requests.
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        # Shows up in pg_stat_activity
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for request-scoped sessions.

    Repositories use Core statements only, so rows are never expired or
    autoflushed; each session commits once at the end of its request.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
