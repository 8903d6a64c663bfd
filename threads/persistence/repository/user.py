"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence
from uuid import uuid4

from sqlalchemy import Select, asc, desc, func, or_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from threads.domain.model import User
from threads.domain.repository import UserRepository
from threads.domain.value import (
    ExternalUserId,
    MatchingUsers,
    SortOrder,
    ThreadId,
    UserFilter,
    UserId,
)
from threads.domain.value.types import Username
from threads.persistence.mappers import row_to_user
from threads.persistence.repository.arrays import array_append, array_remove_all
from threads.persistence.tables import users_table


def _escape_like(pattern: str) -> str:
    """Escape LIKE wildcards so the pattern matches literally."""
    return (
        pattern.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    )


def _apply_filter(
    stmt: Select, exclude: ExternalUserId, user_filter: UserFilter
) -> Select:
    stmt = stmt.where(users_table.c.external_id != exclude)
    if isinstance(user_filter, MatchingUsers):
        like = f"%{_escape_like(user_filter.pattern)}%"
        stmt = stmt.where(
            or_(
                users_table.c.username.ilike(like, escape="\\"),
                users_table.c.name.ilike(like, escape="\\"),
            )
        )
    return stmt


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find users by ID."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings()]

    async def find_by_external_id(
        self, external_id: ExternalUserId
    ) -> Optional[User]:
        """Find a user by the identity provider's id."""
        stmt = select(users_table).where(users_table.c.external_id == external_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def search(
        self,
        exclude: ExternalUserId,
        user_filter: UserFilter,
        sort: SortOrder = SortOrder.DESC,
        limit: int = 20,
        offset: int = 0,
    ) -> List[User]:
        """Find users matching a filter, ordered by creation time."""
        order = asc if sort is SortOrder.ASC else desc
        stmt = (
            _apply_filter(select(users_table), exclude, user_filter)
            .order_by(order(users_table.c.created_at), order(users_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings()]

    async def count(self, exclude: ExternalUserId, user_filter: UserFilter) -> int:
        """Count users matching a filter."""
        stmt = _apply_filter(
            select(func.count()).select_from(users_table), exclude, user_filter
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def upsert_profile(
        self,
        external_id: ExternalUserId,
        username: Username,
        name: str,
        bio: Optional[str],
        image: Optional[str],
    ) -> User:
        """Create or update a profile with INSERT ... ON CONFLICT."""
        profile = {
            "username": username.root,
            "name": name,
            "bio": bio,
            "image": image,
            "onboarded": True,
        }
        stmt = (
            insert(users_table)
            .values(id=uuid4(), external_id=external_id, **profile)
            .on_conflict_do_update(index_elements=["external_id"], set_=profile)
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_user(dict(row))

    async def push_thread(self, user_id: UserId, thread_id: ThreadId) -> None:
        """Atomically append an authored thread id."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(threads=array_append(users_table.c.threads, thread_id))
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def pull_threads(
        self, user_ids: Sequence[UserId], thread_ids: Sequence[ThreadId]
    ) -> None:
        """Remove thread ids from several users in one statement."""
        if not user_ids or not thread_ids:
            return
        stmt = (
            users_table.update()
            .where(users_table.c.id.in_(list(user_ids)))
            .values(threads=array_remove_all(users_table.c.threads, thread_ids))
        )
        await self.session.execute(stmt)
        await self.session.flush()
