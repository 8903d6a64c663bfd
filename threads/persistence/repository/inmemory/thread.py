"""In-memory thread repository for testing."""

from typing import Optional, Sequence

from threads.domain.model.thread import Thread
from threads.domain.repository.thread import ThreadRepository
from threads.domain.value import ThreadId, UserId

from .database import InMemoryDatabase


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        return self.database.threads.get(thread_id)

    async def find_by_ids(self, thread_ids: Sequence[ThreadId]) -> list[Thread]:
        """Find threads by ID, preserving the requested order."""
        threads = self.database.threads
        return [threads[tid] for tid in dict.fromkeys(thread_ids) if tid in threads]

    async def find_children(self, parent_ids: Sequence[ThreadId]) -> list[Thread]:
        """Find direct replies to any of the given threads, oldest first."""
        wanted = set(parent_ids)
        children = [
            t for t in self.database.threads.values() if t.parent_id in wanted
        ]
        children.sort(key=lambda t: (t.created_at, t.id))
        return children

    async def find_by_author(self, author_id: UserId) -> list[Thread]:
        """Find every thread written by a user."""
        threads = [
            t for t in self.database.threads.values() if t.author_id == author_id
        ]
        threads.sort(key=lambda t: t.created_at)
        return threads

    async def find_top_level(self, limit: int = 20, offset: int = 0) -> list[Thread]:
        """Find threads without a parent, newest first."""
        # Reverse insertion order first so ties put the latest insert first
        threads = [t for t in reversed(self.database.threads.values()) if t.is_top_level]
        threads.sort(key=lambda t: t.created_at, reverse=True)
        return threads[offset : offset + limit]

    async def count_top_level(self) -> int:
        """Count threads without a parent."""
        return sum(1 for t in self.database.threads.values() if t.is_top_level)

    async def save(self, thread: Thread) -> Thread:
        """Insert a thread, checking the author exists like the FK would."""
        if thread.author_id not in self.database.users:
            raise LookupError(
                f"threads.author_id references missing user {thread.author_id}"
            )
        self.database.threads[thread.id] = thread
        return thread

    async def push_child(self, parent_id: ThreadId, child_id: ThreadId) -> None:
        """Append a reply id to a thread's children."""
        parent = self.database.threads.get(parent_id)
        if parent:
            self.database.threads[parent_id] = parent.model_copy(
                update={"children": [*parent.children, child_id]}
            )

    async def pull_child(self, parent_id: ThreadId, child_id: ThreadId) -> None:
        """Remove a reply id from a thread's children."""
        parent = self.database.threads.get(parent_id)
        if parent:
            self.database.threads[parent_id] = parent.model_copy(
                update={"children": [c for c in parent.children if c != child_id]}
            )

    async def delete_many(self, thread_ids: Sequence[ThreadId]) -> int:
        """Delete threads."""
        deleted = 0
        for thread_id in set(thread_ids):
            if self.database.threads.pop(thread_id, None) is not None:
                deleted += 1
        return deleted
