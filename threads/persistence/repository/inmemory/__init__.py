"""In-memory repository implementations for testing."""

from .community import InMemoryCommunityRepository
from .coordinator import InMemoryWriteCoordinator
from .database import InMemoryDatabase
from .thread import InMemoryThreadRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommunityRepository",
    "InMemoryDatabase",
    "InMemoryThreadRepository",
    "InMemoryUserRepository",
    "InMemoryWriteCoordinator",
]
