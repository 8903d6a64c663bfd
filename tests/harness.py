"""Test harness for unit, integration and E2E tests.

Integration tests that unmock persistence need PostgreSQL reachable at
DATABASE__URL with migrations applied; they are skipped otherwise.
"""

import asyncio
from functools import cache

import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine

from threads.config import Settings
from threads.util.di import Component
from tests.di import build_test_container


@cache
def database_available() -> bool:
    """Whether the configured database answers and has the threads schema."""

    async def _ping() -> None:
        engine = create_async_engine(
            Settings().database_url, connect_args={"timeout": 3}
        )
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1 FROM threads LIMIT 1"))
        finally:
            await engine.dispose()

    try:
        asyncio.run(_ping())
    except (OSError, SQLAlchemyError):
        return False
    return True


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    The fixture builds a fresh container per test and yields a
    request-scoped child container for service access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_create_thread(unit_env):
            service = await unit_env.get(ThreadService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
