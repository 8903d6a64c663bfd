"""Domain value objects for the threads service."""

from threads.domain.value.identifiers import (
    CommunityId,
    ExternalCommunityId,
    ExternalUserId,
    ThreadId,
    UserId,
)
from threads.domain.value.types import (
    AnyUser,
    ConsistencyMode,
    MatchingUsers,
    SortOrder,
    UserFilter,
    Username,
    user_filter_from_search,
)

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "CommunityId",
    "ExternalUserId",
    "ExternalCommunityId",
    # Types
    "AnyUser",
    "ConsistencyMode",
    "MatchingUsers",
    "SortOrder",
    "UserFilter",
    "Username",
    "user_filter_from_search",
]
