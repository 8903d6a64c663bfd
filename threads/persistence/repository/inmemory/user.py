"""In-memory user repository for testing."""

from typing import Optional, Sequence
from uuid import uuid4

from threads.domain.model.user import User
from threads.domain.repository.user import UserRepository
from threads.domain.value import (
    ExternalUserId,
    MatchingUsers,
    SortOrder,
    ThreadId,
    UserFilter,
    UserId,
)
from threads.domain.value.types import Username

from .database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    def _matching(self, exclude: ExternalUserId, user_filter: UserFilter) -> list[User]:
        users = [u for u in self.database.users.values() if u.external_id != exclude]
        if isinstance(user_filter, MatchingUsers):
            users = [u for u in users if user_filter.matches(u.username.root, u.name)]
        return users

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find users by ID."""
        users = self.database.users
        return [users[uid] for uid in dict.fromkeys(user_ids) if uid in users]

    async def find_by_external_id(
        self, external_id: ExternalUserId
    ) -> Optional[User]:
        """Find a user by the identity provider's id."""
        for user in self.database.users.values():
            if user.external_id == external_id:
                return user
        return None

    async def search(
        self,
        exclude: ExternalUserId,
        user_filter: UserFilter,
        sort: SortOrder = SortOrder.DESC,
        limit: int = 20,
        offset: int = 0,
    ) -> list[User]:
        """Find users matching a filter, ordered by creation time."""
        users = self._matching(exclude, user_filter)
        users.sort(key=lambda u: u.created_at, reverse=sort is SortOrder.DESC)
        return users[offset : offset + limit]

    async def count(self, exclude: ExternalUserId, user_filter: UserFilter) -> int:
        """Count users matching a filter."""
        return len(self._matching(exclude, user_filter))

    async def upsert_profile(
        self,
        external_id: ExternalUserId,
        username: Username,
        name: str,
        bio: Optional[str],
        image: Optional[str],
    ) -> User:
        """Create or update a profile keyed on external id."""
        existing = await self.find_by_external_id(external_id)
        for user in self.database.users.values():
            if user.username == username and user.external_id != external_id:
                raise LookupError(f"username {username.root} is already taken")

        profile = {
            "username": username,
            "name": name,
            "bio": bio,
            "image": image,
            "onboarded": True,
        }
        if existing:
            user = existing.model_copy(update=profile)
        else:
            user = User(id=UserId(uuid4()), external_id=external_id, **profile)
        self.database.users[user.id] = user
        return user

    async def push_thread(self, user_id: UserId, thread_id: ThreadId) -> None:
        """Append an authored thread id."""
        user = self.database.users.get(user_id)
        if user:
            self.database.users[user_id] = user.model_copy(
                update={"threads": [*user.threads, thread_id]}
            )

    async def pull_threads(
        self, user_ids: Sequence[UserId], thread_ids: Sequence[ThreadId]
    ) -> None:
        """Remove thread ids from several users."""
        removed = set(thread_ids)
        for user_id in user_ids:
            user = self.database.users.get(user_id)
            if user:
                self.database.users[user_id] = user.model_copy(
                    update={"threads": [t for t in user.threads if t not in removed]}
                )
