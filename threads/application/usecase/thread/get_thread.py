"""Get thread use case."""

from uuid import UUID

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase
from threads.domain.model import ThreadView
from threads.domain.service import ReadService
from threads.domain.value import ThreadId


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread_id: str


class GetThreadResponse(BaseModel):
    """Get thread response."""

    thread: ThreadView


class GetThreadUseCase(BaseUseCase[GetThreadRequest, GetThreadResponse | None]):
    """Use case for reading a thread with two levels of replies."""

    def __init__(self, read_service: ReadService) -> None:
        """Initialize get thread use case.

        Args:
            read_service: Read domain service
        """
        self.read_service = read_service

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse | None:
        """Execute get thread flow.

        Returns:
            Thread view if the thread exists, None otherwise
        """
        view = await self.read_service.fetch_thread_detail(
            ThreadId(UUID(request.thread_id))
        )
        if view is None:
            return None
        return GetThreadResponse(thread=view)
