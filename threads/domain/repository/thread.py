"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from threads.domain.model.thread import Thread
from threads.domain.value import ThreadId, UserId


class ThreadRepository(ABC):
    """Repository for Thread entity.

    Defines the contract for thread persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, thread_ids: Sequence[ThreadId]) -> List[Thread]:
        """Find threads by ID.

        Args:
            thread_ids: Ids to look up

        Returns:
            Threads that exist, in the order of ``thread_ids``
        """
        pass

    @abstractmethod
    async def find_children(self, parent_ids: Sequence[ThreadId]) -> List[Thread]:
        """Find direct replies to any of the given threads.

        Args:
            parent_ids: Parent thread ids

        Returns:
            Threads whose parent_id is in ``parent_ids``, oldest first
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Thread]:
        """Find every thread written by a user, replies included.

        Args:
            author_id: The author's user ID

        Returns:
            Threads by the author, oldest first
        """
        pass

    @abstractmethod
    async def find_top_level(self, limit: int = 20, offset: int = 0) -> List[Thread]:
        """Find threads without a parent, newest first.

        Args:
            limit: Maximum number of threads to return
            offset: Number of threads to skip

        Returns:
            Page of top-level threads
        """
        pass

    @abstractmethod
    async def count_top_level(self) -> int:
        """Count threads without a parent."""
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Insert a new thread.

        Args:
            thread: The thread to save

        Returns:
            The saved thread
        """
        pass

    @abstractmethod
    async def push_child(self, parent_id: ThreadId, child_id: ThreadId) -> None:
        """Atomically append a reply id to a thread's children.

        Args:
            parent_id: Thread receiving the reply
            child_id: The reply's id
        """
        pass

    @abstractmethod
    async def pull_child(self, parent_id: ThreadId, child_id: ThreadId) -> None:
        """Atomically remove a reply id from a thread's children.

        Args:
            parent_id: Thread losing the reply
            child_id: The reply's id
        """
        pass

    @abstractmethod
    async def delete_many(self, thread_ids: Sequence[ThreadId]) -> int:
        """Delete threads in a single batch (hard delete).

        Args:
            thread_ids: Ids to delete

        Returns:
            Number of threads deleted
        """
        pass
