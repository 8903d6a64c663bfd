"""Thread entity.

A thread is a post. Replies are threads too: they carry the id of the
thread they answer in ``parent_id`` and are listed in that parent's
``children``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threads.domain.model.common import DomainModel
from threads.domain.value import CommunityId, ThreadId, UserId


class Thread(DomainModel):
    """Thread entity.

    Tree shape is kept in two directions:
    - parent_id: Thread this one replies to (None for top-level posts)
    - children: Ordered ids of direct replies

    A thread with a parent must appear exactly once in that parent's
    children.
    """

    id: ThreadId
    text: str = Field(min_length=1, max_length=10000)
    author_id: UserId
    community_id: Optional[CommunityId] = None
    parent_id: Optional[ThreadId] = None
    children: list[ThreadId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_top_level(self) -> bool:
        """Whether this thread is a post rather than a reply."""
        return self.parent_id is None
