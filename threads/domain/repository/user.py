"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from threads.domain.model.user import User
from threads.domain.value import (
    ExternalUserId,
    SortOrder,
    ThreadId,
    UserFilter,
    UserId,
)
from threads.domain.value.types import Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find users by internal ID.

        Args:
            user_ids: Ids to look up

        Returns:
            Users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_external_id(
        self, external_id: ExternalUserId
    ) -> Optional[User]:
        """Find a user by the identity provider's id.

        Args:
            external_id: External user id

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def search(
        self,
        exclude: ExternalUserId,
        user_filter: UserFilter,
        sort: SortOrder = SortOrder.DESC,
        limit: int = 20,
        offset: int = 0,
    ) -> List[User]:
        """Find users matching a filter, ordered by creation time.

        Args:
            exclude: External id of the user to leave out (the requester)
            user_filter: AnyUser or MatchingUsers
            sort: Creation time ordering
            limit: Maximum number of users to return
            offset: Number of users to skip

        Returns:
            Page of matching users
        """
        pass

    @abstractmethod
    async def count(self, exclude: ExternalUserId, user_filter: UserFilter) -> int:
        """Count users matching a filter.

        Args:
            exclude: External id of the user to leave out
            user_filter: AnyUser or MatchingUsers

        Returns:
            Number of matching users
        """
        pass

    @abstractmethod
    async def upsert_profile(
        self,
        external_id: ExternalUserId,
        username: Username,
        name: str,
        bio: Optional[str],
        image: Optional[str],
    ) -> User:
        """Create or update a user's profile keyed on external id.

        Marks the user as onboarded. Thread and community references,
        internal id and creation time of an existing user are kept.

        Returns:
            The stored user
        """
        pass

    @abstractmethod
    async def push_thread(self, user_id: UserId, thread_id: ThreadId) -> None:
        """Atomically append an authored thread id.

        Args:
            user_id: The author
            thread_id: The new thread's id
        """
        pass

    @abstractmethod
    async def pull_threads(
        self, user_ids: Sequence[UserId], thread_ids: Sequence[ThreadId]
    ) -> None:
        """Remove thread ids from the threads list of several users.

        Args:
            user_ids: Users to update
            thread_ids: Thread ids to remove
        """
        pass
