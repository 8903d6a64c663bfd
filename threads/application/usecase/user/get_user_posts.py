"""Get user posts use case."""

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase
from threads.domain.model import ThreadView
from threads.domain.service import ReadService
from threads.domain.value import ExternalUserId


class GetUserPostsRequest(BaseModel):
    """Get user posts request."""

    external_id: str


class GetUserPostsResponse(BaseModel):
    """Get user posts response."""

    user_id: str
    external_id: str
    name: str
    image: str | None
    threads: list[ThreadView]


class GetUserPostsUseCase(
    BaseUseCase[GetUserPostsRequest, GetUserPostsResponse | None]
):
    """Use case for listing the threads a user authored."""

    def __init__(self, read_service: ReadService) -> None:
        """Initialize get user posts use case.

        Args:
            read_service: Read domain service
        """
        self.read_service = read_service

    async def execute(self, request: GetUserPostsRequest) -> GetUserPostsResponse | None:
        """Execute get user posts flow.

        Returns:
            The user's threads if the user exists, None otherwise
        """
        posts = await self.read_service.fetch_user_posts(
            ExternalUserId(request.external_id)
        )
        if posts is None:
            return None

        return GetUserPostsResponse(
            user_id=str(posts.user.id),
            external_id=posts.user.external_id,
            name=posts.user.name,
            image=posts.user.image,
            threads=posts.threads,
        )
