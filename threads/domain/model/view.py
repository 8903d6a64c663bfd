"""Denormalized read models.

Views are assembled by the read service from entities and their resolved
references. Expansion depth differs per read, so a view always keeps the
raw ``child_ids`` and only fills ``children`` for expanded levels.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threads.domain.model.common import DomainModel
from threads.domain.model.user import User
from threads.domain.value import (
    CommunityId,
    ExternalCommunityId,
    ExternalUserId,
    ThreadId,
    UserId,
)


class AuthorSummary(DomainModel):
    """Author fields shown next to a thread."""

    id: UserId
    external_id: ExternalUserId
    name: str
    image: Optional[str] = None


class CommunitySummary(DomainModel):
    """Community fields shown next to a thread or profile."""

    id: CommunityId
    external_id: ExternalCommunityId
    name: str
    image: Optional[str] = None


class ThreadView(DomainModel):
    """Thread with resolved author, community and expanded replies."""

    id: ThreadId
    text: str
    parent_id: Optional[ThreadId] = None
    created_at: datetime
    author: Optional[AuthorSummary] = None
    community: Optional[CommunitySummary] = None
    child_ids: list[ThreadId] = Field(default_factory=list)
    children: list["ThreadView"] = Field(default_factory=list)


class FeedPage(DomainModel):
    """One page of top-level threads."""

    posts: list[ThreadView]
    has_next: bool


class UserPage(DomainModel):
    """One page of users."""

    users: list[User]
    has_next: bool


class UserPostsView(DomainModel):
    """User with the threads they authored."""

    user: User
    threads: list[ThreadView]


class UserProfileView(DomainModel):
    """User with resolved community memberships."""

    user: User
    communities: list[CommunitySummary]
