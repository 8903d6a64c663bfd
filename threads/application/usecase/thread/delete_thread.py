"""Delete thread use case."""

from uuid import UUID

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase
from threads.domain.service import ThreadService
from threads.domain.value import ThreadId


class DeleteThreadRequest(BaseModel):
    """Delete thread request."""

    thread_id: str
    path: str


class DeleteThreadResponse(BaseModel):
    """Delete thread response."""

    thread_id: str
    deleted: int  # Root plus every reply below it


class DeleteThreadUseCase(BaseUseCase[DeleteThreadRequest, DeleteThreadResponse]):
    """Use case for deleting a thread and its replies."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize delete thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: DeleteThreadRequest) -> DeleteThreadResponse:
        """Execute delete thread flow.

        Raises:
            NotFoundError: If the thread does not exist
            StructuralIntegrityError: If the reply tree contains a cycle
            PersistenceError: If a write fails
        """
        deleted = await self.thread_service.delete_thread_subtree(
            ThreadId(UUID(request.thread_id)), path=request.path
        )
        return DeleteThreadResponse(thread_id=request.thread_id, deleted=deleted)
