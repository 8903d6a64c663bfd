"""Community entity.

Communities are managed elsewhere; this service only references them and
keeps their ``threads`` list in step with thread creation and deletion.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threads.domain.model.common import DomainModel
from threads.domain.value import CommunityId, ExternalCommunityId, ThreadId


class Community(DomainModel):
    """Community entity."""

    id: CommunityId
    external_id: ExternalCommunityId
    name: str
    image: Optional[str] = None
    bio: Optional[str] = None
    threads: list[ThreadId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
