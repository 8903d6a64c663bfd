"""PostgreSQL implementation of the write coordinator."""

from sqlalchemy.ext.asyncio import AsyncSession

from threads.domain.repository import WriteCoordinator
from threads.domain.value import ConsistencyMode


class SqlWriteCoordinator(WriteCoordinator):
    """Write coordinator backed by the request's SQLAlchemy session.

    Best effort mode commits the session at every checkpoint; transactional
    mode flushes at checkpoints and commits once when the unit closes.
    """

    def __init__(self, session: AsyncSession, mode: ConsistencyMode) -> None:
        """Initialize coordinator with database session.

        Args:
            session: SQLAlchemy async session
            mode: Consistency mode for multi-entity writes
        """
        super().__init__(mode)
        self.session = session

    async def _begin(self) -> None:
        # The session begins a transaction on first statement
        pass

    async def _commit(self) -> None:
        await self.session.commit()

    async def _flush(self) -> None:
        await self.session.flush()

    async def _rollback(self) -> None:
        await self.session.rollback()
