"""Add comment use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase
from threads.domain.service import ThreadService
from threads.domain.value import ThreadId, UserId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    thread_id: str  # Parent thread
    text: str
    author_id: str
    path: str


class AddCommentResponse(BaseModel):
    """Add comment response."""

    comment_id: str
    parent_id: str
    text: str
    author_id: str
    created_at: datetime


class AddCommentUseCase(BaseUseCase[AddCommentRequest, AddCommentResponse]):
    """Use case for replying to a thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize add comment use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Args:
            request: Add comment request

        Returns:
            Created reply

        Raises:
            NotFoundError: If the parent thread does not exist
            PersistenceError: If a write fails
        """
        with logfire.span(
            "add_comment.execute",
            thread_id=request.thread_id,
            author_id=request.author_id,
        ):
            comment = await self.thread_service.attach_comment(
                parent_id=ThreadId(UUID(request.thread_id)),
                text=request.text,
                author_id=UserId(UUID(request.author_id)),
                path=request.path,
            )

            return AddCommentResponse(
                comment_id=str(comment.id),
                parent_id=request.thread_id,
                text=comment.text,
                author_id=str(comment.author_id),
                created_at=comment.created_at,
            )
