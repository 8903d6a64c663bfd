"""Community repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from threads.domain.model.community import Community
from threads.domain.value import CommunityId, ExternalCommunityId, ThreadId


class CommunityRepository(ABC):
    """Repository for Community entity.

    Communities are owned by another system; the core only looks them up
    and maintains their thread references.
    """

    @abstractmethod
    async def find_by_ids(self, community_ids: Sequence[CommunityId]) -> List[Community]:
        """Find communities by internal ID.

        Args:
            community_ids: Ids to look up

        Returns:
            Communities that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_external_id(
        self, external_id: ExternalCommunityId
    ) -> Optional[Community]:
        """Find a community by its external id.

        Args:
            external_id: External community id

        Returns:
            The community if found, None otherwise
        """
        pass

    @abstractmethod
    async def push_thread(self, community_id: CommunityId, thread_id: ThreadId) -> None:
        """Atomically append a thread id to a community."""
        pass

    @abstractmethod
    async def pull_threads(
        self, community_ids: Sequence[CommunityId], thread_ids: Sequence[ThreadId]
    ) -> None:
        """Remove thread ids from the threads list of several communities."""
        pass
