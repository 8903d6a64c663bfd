"""In-memory write coordinator for testing."""

from threads.domain.repository import WriteCoordinator
from threads.domain.value import ConsistencyMode

from .database import InMemoryDatabase, InMemorySnapshot


class InMemoryWriteCoordinator(WriteCoordinator):
    """Coordinator over an InMemoryDatabase.

    A commit records a snapshot; a rollback restores the last one.
    """

    def __init__(
        self,
        database: InMemoryDatabase,
        mode: ConsistencyMode = ConsistencyMode.BEST_EFFORT,
    ) -> None:
        super().__init__(mode)
        self.database = database
        self._committed: InMemorySnapshot | None = None

    async def _begin(self) -> None:
        self._committed = self.database.snapshot()

    async def _commit(self) -> None:
        self._committed = self.database.snapshot()

    async def _flush(self) -> None:
        pass

    async def _rollback(self) -> None:
        if self._committed is not None:
            self.database.restore(self._committed)
