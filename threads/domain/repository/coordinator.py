"""Write coordinator interface.

One logical operation (create a thread, delete a subtree, ...) touches
several entities. The coordinator groups those writes into a unit whose
failure behavior is chosen by configuration instead of by the incidental
ordering of independent calls.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire

from threads.domain.error import storage_operation
from threads.domain.value import ConsistencyMode


class WriteCoordinator(ABC):
    """Applies the write set of one operation against the store.

    Modes:
    - BEST_EFFORT: ``checkpoint()`` commits the steps completed so far. A
      failure rolls back only the in-flight step; nothing already committed
      is compensated.
    - TRANSACTIONAL: ``checkpoint()`` only makes earlier steps visible to
      later ones. The unit commits once at the end or not at all.

    Non-domain errors raised inside a unit surface as PersistenceError.
    """

    def __init__(self, mode: ConsistencyMode) -> None:
        self.mode = mode

    @asynccontextmanager
    async def unit(self, operation: str) -> AsyncIterator["WriteCoordinator"]:
        """Run one logical write operation.

        Args:
            operation: Human readable name, e.g. "deleting thread"

        Yields:
            The coordinator, for checkpointing
        """
        with logfire.span(
            "write_coordinator.unit", operation=operation, mode=self.mode.value
        ):
            try:
                with storage_operation(operation):
                    await self._begin()
                    yield self
                    await self._commit()
            except Exception as e:
                logfire.warn(
                    "Write unit rolled back",
                    operation=operation,
                    mode=self.mode.value,
                    error=str(e),
                )
                await self._rollback()
                raise

    async def checkpoint(self) -> None:
        """Mark the end of one step of the write set."""
        if self.mode is ConsistencyMode.BEST_EFFORT:
            await self._commit()
        else:
            await self._flush()

    @abstractmethod
    async def _begin(self) -> None:
        pass

    @abstractmethod
    async def _commit(self) -> None:
        pass

    @abstractmethod
    async def _flush(self) -> None:
        pass

    @abstractmethod
    async def _rollback(self) -> None:
        pass
