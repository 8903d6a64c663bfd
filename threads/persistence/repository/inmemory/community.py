"""In-memory community repository for testing."""

from typing import Optional, Sequence

from threads.domain.model.community import Community
from threads.domain.repository.community import CommunityRepository
from threads.domain.value import CommunityId, ExternalCommunityId, ThreadId

from .database import InMemoryDatabase


class InMemoryCommunityRepository(CommunityRepository):
    """In-memory implementation of CommunityRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_ids(
        self, community_ids: Sequence[CommunityId]
    ) -> list[Community]:
        """Find communities by internal ID."""
        communities = self.database.communities
        return [
            communities[cid] for cid in dict.fromkeys(community_ids) if cid in communities
        ]

    async def find_by_external_id(
        self, external_id: ExternalCommunityId
    ) -> Optional[Community]:
        """Find a community by its external id."""
        for community in self.database.communities.values():
            if community.external_id == external_id:
                return community
        return None

    async def push_thread(self, community_id: CommunityId, thread_id: ThreadId) -> None:
        """Append a thread id to a community."""
        community = self.database.communities.get(community_id)
        if community:
            self.database.communities[community_id] = community.model_copy(
                update={"threads": [*community.threads, thread_id]}
            )

    async def pull_threads(
        self, community_ids: Sequence[CommunityId], thread_ids: Sequence[ThreadId]
    ) -> None:
        """Remove thread ids from several communities."""
        removed = set(thread_ids)
        for community_id in community_ids:
            community = self.database.communities.get(community_id)
            if community:
                self.database.communities[community_id] = community.model_copy(
                    update={
                        "threads": [t for t in community.threads if t not in removed]
                    }
                )
