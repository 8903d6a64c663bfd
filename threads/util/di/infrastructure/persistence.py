"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from threads.config import DatabaseSettings, Settings
from threads.domain.repository import (
    CommunityRepository,
    ThreadRepository,
    UserRepository,
    WriteCoordinator,
)
from threads.persistence.coordinator import SqlWriteCoordinator
from threads.persistence.database import DatabaseConnector
from threads.persistence.repository import (
    PostgresCommunityRepository,
    PostgresThreadRepository,
    PostgresUserRepository,
)
from threads.util.di.base import ProviderBase
from threads.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_connector(self, settings: Settings) -> AsyncIterator[DatabaseConnector]:
        """Provide the process-wide database connector.

        The engine is created lazily and disposed when the app container
        closes.
        """
        connector = DatabaseConnector(settings, on_connect=instrument_sqlalchemy)
        yield connector
        await connector.dispose()

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, connector: DatabaseConnector
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Anything left uncommitted at the end of the request is committed,
        or rolled back if an exception was raised.
        """
        async with connector.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_write_coordinator(
        self, session: AsyncSession, database: DatabaseSettings
    ) -> WriteCoordinator:
        """Provide write coordinator in the configured consistency mode."""
        return SqlWriteCoordinator(session, mode=database.consistency_mode)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, session: AsyncSession) -> ThreadRepository:
        """Provide Thread repository."""
        return PostgresThreadRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_community_repository(self, session: AsyncSession) -> CommunityRepository:
        """Provide Community repository."""
        return PostgresCommunityRepository(session)
