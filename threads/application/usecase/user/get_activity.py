"""Get activity use case."""

from uuid import UUID

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase
from threads.domain.model import ThreadView
from threads.domain.service import ReadService
from threads.domain.value import UserId


class GetActivityRequest(BaseModel):
    """Get activity request."""

    user_id: str  # Internal user ID


class GetActivityResponse(BaseModel):
    """Get activity response."""

    replies: list[ThreadView]  # Newest first


class GetActivityUseCase(BaseUseCase[GetActivityRequest, GetActivityResponse]):
    """Use case for listing replies other users left on a user's threads."""

    def __init__(self, read_service: ReadService) -> None:
        """Initialize get activity use case.

        Args:
            read_service: Read domain service
        """
        self.read_service = read_service

    async def execute(self, request: GetActivityRequest) -> GetActivityResponse:
        """Execute get activity flow."""
        replies = await self.read_service.fetch_user_activity(
            UserId(UUID(request.user_id))
        )
        return GetActivityResponse(replies=replies)
