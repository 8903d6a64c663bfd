"""User aggregate root.

Users are identified by the external id issued by the identity provider
and carry back-references to the threads they authored.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threads.domain.model.common import DomainModel
from threads.domain.value import CommunityId, ExternalUserId, ThreadId, UserId
from threads.domain.value.types import Username


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    external_id: ExternalUserId
    username: Username
    name: str = Field(min_length=1, max_length=255)
    bio: Optional[str] = None
    image: Optional[str] = None
    onboarded: bool = False
    threads: list[ThreadId] = Field(default_factory=list)  # Authored, replies included
    communities: list[CommunityId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
