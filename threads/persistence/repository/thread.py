"""PostgreSQL implementation of Thread repository."""

from typing import List, Optional, Sequence

from sqlalchemy import asc, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from threads.domain.model import Thread
from threads.domain.repository import ThreadRepository
from threads.domain.value import ThreadId, UserId
from threads.persistence.mappers import row_to_thread, thread_to_dict
from threads.persistence.repository.arrays import array_append, array_remove_all
from threads.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        stmt = select(threads_table).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_thread(dict(row)) if row else None

    async def find_by_ids(self, thread_ids: Sequence[ThreadId]) -> List[Thread]:
        """Find threads by ID, preserving the requested order."""
        if not thread_ids:
            return []
        stmt = select(threads_table).where(threads_table.c.id.in_(list(thread_ids)))
        result = await self.session.execute(stmt)
        found = {row["id"]: row_to_thread(dict(row)) for row in result.mappings()}
        return [found[tid] for tid in dict.fromkeys(thread_ids) if tid in found]

    async def find_children(self, parent_ids: Sequence[ThreadId]) -> List[Thread]:
        """Find direct replies to any of the given threads, oldest first."""
        if not parent_ids:
            return []
        stmt = (
            select(threads_table)
            .where(threads_table.c.parent_id.in_(list(parent_ids)))
            .order_by(asc(threads_table.c.created_at), asc(threads_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_thread(dict(row)) for row in result.mappings()]

    async def find_by_author(self, author_id: UserId) -> List[Thread]:
        """Find every thread written by a user."""
        stmt = (
            select(threads_table)
            .where(threads_table.c.author_id == author_id)
            .order_by(asc(threads_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_thread(dict(row)) for row in result.mappings()]

    async def find_top_level(self, limit: int = 20, offset: int = 0) -> List[Thread]:
        """Find threads without a parent, newest first."""
        stmt = (
            select(threads_table)
            .where(threads_table.c.parent_id.is_(None))
            .order_by(desc(threads_table.c.created_at), desc(threads_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_thread(dict(row)) for row in result.mappings()]

    async def count_top_level(self) -> int:
        """Count threads without a parent."""
        stmt = (
            select(func.count())
            .select_from(threads_table)
            .where(threads_table.c.parent_id.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, thread: Thread) -> Thread:
        """Insert a new thread."""
        stmt = threads_table.insert().values(**thread_to_dict(thread))
        await self.session.execute(stmt)
        await self.session.flush()
        return thread

    async def push_child(self, parent_id: ThreadId, child_id: ThreadId) -> None:
        """Atomically append a reply id to a thread's children."""
        stmt = (
            threads_table.update()
            .where(threads_table.c.id == parent_id)
            .values(children=array_append(threads_table.c.children, child_id))
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def pull_child(self, parent_id: ThreadId, child_id: ThreadId) -> None:
        """Atomically remove a reply id from a thread's children."""
        stmt = (
            threads_table.update()
            .where(threads_table.c.id == parent_id)
            .values(children=array_remove_all(threads_table.c.children, [child_id]))
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_many(self, thread_ids: Sequence[ThreadId]) -> int:
        """Delete threads in a single statement."""
        if not thread_ids:
            return 0
        stmt = threads_table.delete().where(threads_table.c.id.in_(list(thread_ids)))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
