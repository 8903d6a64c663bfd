"""Create thread use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase
from threads.domain.service import ThreadService
from threads.domain.value import ExternalCommunityId, UserId


class CreateThreadRequest(BaseModel):
    """Create thread request."""

    text: str
    author_id: str  # Internal user ID
    community_id: str | None = None  # External community id
    path: str


class CreateThreadResponse(BaseModel):
    """Create thread response."""

    thread_id: str
    text: str
    author_id: str
    community_id: str | None
    created_at: datetime


class CreateThreadUseCase(BaseUseCase[CreateThreadRequest, CreateThreadResponse]):
    """Use case for posting a new top-level thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize create thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: CreateThreadRequest) -> CreateThreadResponse:
        """Execute create thread flow.

        Args:
            request: Create thread request

        Returns:
            Created thread

        Raises:
            PersistenceError: If the author does not exist or a write fails
            ValueError: If the text is empty or too long
        """
        with logfire.span("create_thread.execute", author_id=request.author_id):
            thread = await self.thread_service.create_thread(
                text=request.text,
                author_id=UserId(UUID(request.author_id)),
                community_external_id=(
                    ExternalCommunityId(request.community_id)
                    if request.community_id
                    else None
                ),
                path=request.path,
            )

            return CreateThreadResponse(
                thread_id=str(thread.id),
                text=thread.text,
                author_id=str(thread.author_id),
                community_id=str(thread.community_id) if thread.community_id else None,
                created_at=thread.created_at,
            )
