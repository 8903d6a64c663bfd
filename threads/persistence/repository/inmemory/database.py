"""In-memory store shared by the in-memory repositories."""

from copy import deepcopy
from dataclasses import dataclass, field

from threads.domain.model import Community, Thread, User
from threads.domain.value import CommunityId, ThreadId, UserId


@dataclass
class InMemorySnapshot:
    """Point-in-time copy of every table."""

    users: dict[UserId, User]
    threads: dict[ThreadId, Thread]
    communities: dict[CommunityId, Community]


@dataclass
class InMemoryDatabase:
    """Tables for the in-memory repositories.

    Repositories created from the same database see each other's writes,
    and the in-memory coordinator restores snapshots on rollback.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    threads: dict[ThreadId, Thread] = field(default_factory=dict)
    communities: dict[CommunityId, Community] = field(default_factory=dict)

    def snapshot(self) -> InMemorySnapshot:
        """Copy the current state."""
        return InMemorySnapshot(
            users=deepcopy(self.users),
            threads=deepcopy(self.threads),
            communities=deepcopy(self.communities),
        )

    def restore(self, snapshot: InMemorySnapshot) -> None:
        """Replace the current state with a snapshot."""
        self.users = deepcopy(snapshot.users)
        self.threads = deepcopy(snapshot.threads)
        self.communities = deepcopy(snapshot.communities)
