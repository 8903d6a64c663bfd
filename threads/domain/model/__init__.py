"""Domain model entities for the threads service."""

from threads.domain.model.community import Community
from threads.domain.model.thread import Thread
from threads.domain.model.user import User
from threads.domain.model.view import (
    AuthorSummary,
    CommunitySummary,
    FeedPage,
    ThreadView,
    UserPage,
    UserPostsView,
    UserProfileView,
)

__all__ = [
    "User",
    "Thread",
    "Community",
    "AuthorSummary",
    "CommunitySummary",
    "ThreadView",
    "FeedPage",
    "UserPage",
    "UserPostsView",
    "UserProfileView",
]
