"""Database connection and session management.

Provides the process-wide async engine and session factory for PostgreSQL.
"""

import threading
from collections.abc import Callable

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from threads.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={"command_timeout": settings.database.command_timeout},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )


class DatabaseConnector:
    """Process-wide handle to the database.

    The engine is created on first use, exactly once, and then shared by
    every request. Nothing here tears it down mid-process; the hosting
    process calls ``dispose()`` on shutdown.
    """

    def __init__(
        self,
        settings: Settings,
        on_connect: Callable[[AsyncEngine], None] | None = None,
    ) -> None:
        """Initialize connector.

        Args:
            settings: Application settings
            on_connect: Called once with the engine right after it is created
        """
        self._settings = settings
        self._on_connect = on_connect
        self._lock = threading.Lock()
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    def _connect(self) -> async_sessionmaker[AsyncSession]:
        with self._lock:
            if self._session_factory is None:
                self._engine = create_engine(self._settings)
                self._session_factory = create_session_factory(self._engine)
                if self._on_connect is not None:
                    self._on_connect(self._engine)
                logfire.info(
                    "Database engine created",
                    pool_size=self._settings.database.pool_size,
                )
            return self._session_factory

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """The shared session factory, created on first access."""
        if self._session_factory is not None:
            return self._session_factory
        return self._connect()

    async def dispose(self) -> None:
        """Close pooled connections."""
        with self._lock:
            engine = self._engine
            self._engine = None
            self._session_factory = None
        if engine is not None:
            await engine.dispose()
            logfire.info("Database engine disposed")

