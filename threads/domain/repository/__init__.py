"""Repository interfaces for the threads domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from threads.domain.repository.community import CommunityRepository
from threads.domain.repository.coordinator import WriteCoordinator
from threads.domain.repository.thread import ThreadRepository
from threads.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ThreadRepository",
    "CommunityRepository",
    "WriteCoordinator",
]
