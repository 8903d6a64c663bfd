"""PostgreSQL implementation of Community repository."""

from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from threads.domain.model import Community
from threads.domain.repository import CommunityRepository
from threads.domain.value import CommunityId, ExternalCommunityId, ThreadId
from threads.persistence.mappers import row_to_community
from threads.persistence.repository.arrays import array_append, array_remove_all
from threads.persistence.tables import communities_table


class PostgresCommunityRepository(CommunityRepository):
    """PostgreSQL implementation of CommunityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_ids(
        self, community_ids: Sequence[CommunityId]
    ) -> List[Community]:
        """Find communities by internal ID."""
        if not community_ids:
            return []
        stmt = select(communities_table).where(
            communities_table.c.id.in_(list(community_ids))
        )
        result = await self.session.execute(stmt)
        return [row_to_community(dict(row)) for row in result.mappings()]

    async def find_by_external_id(
        self, external_id: ExternalCommunityId
    ) -> Optional[Community]:
        """Find a community by its external id."""
        stmt = select(communities_table).where(
            communities_table.c.external_id == external_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_community(dict(row)) if row else None

    async def push_thread(self, community_id: CommunityId, thread_id: ThreadId) -> None:
        """Atomically append a thread id to a community."""
        stmt = (
            communities_table.update()
            .where(communities_table.c.id == community_id)
            .values(threads=array_append(communities_table.c.threads, thread_id))
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def pull_threads(
        self, community_ids: Sequence[CommunityId], thread_ids: Sequence[ThreadId]
    ) -> None:
        """Remove thread ids from several communities in one statement."""
        if not community_ids or not thread_ids:
            return
        stmt = (
            communities_table.update()
            .where(communities_table.c.id.in_(list(community_ids)))
            .values(threads=array_remove_all(communities_table.c.threads, thread_ids))
        )
        await self.session.execute(stmt)
        await self.session.flush()
