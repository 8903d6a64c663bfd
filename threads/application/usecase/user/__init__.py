"""User use cases."""

from .get_activity import GetActivityRequest, GetActivityResponse, GetActivityUseCase
from .get_user_posts import (
    GetUserPostsRequest,
    GetUserPostsResponse,
    GetUserPostsUseCase,
)
from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from .search_users import (
    SearchUsersRequest,
    SearchUsersResponse,
    SearchUsersUseCase,
    UserListItem,
)
from .update_user_profile import (
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)

__all__ = [
    "GetActivityRequest",
    "GetActivityResponse",
    "GetActivityUseCase",
    "GetUserPostsRequest",
    "GetUserPostsResponse",
    "GetUserPostsUseCase",
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
    "SearchUsersRequest",
    "SearchUsersResponse",
    "SearchUsersUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileResponse",
    "UpdateUserProfileUseCase",
    "UserListItem",
]
