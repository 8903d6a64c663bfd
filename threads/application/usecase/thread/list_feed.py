"""List feed use case."""

from pydantic import BaseModel, Field

from threads.application.usecase.base import BaseUseCase
from threads.config import PaginationSettings
from threads.domain.model import ThreadView
from threads.domain.service import ReadService


class ListFeedRequest(BaseModel):
    """List feed request."""

    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)  # None uses the default


class ListFeedResponse(BaseModel):
    """List feed response."""

    posts: list[ThreadView]
    page: int
    page_size: int
    has_next: bool


class ListFeedUseCase(BaseUseCase[ListFeedRequest, ListFeedResponse]):
    """Use case for paging through top-level threads."""

    def __init__(
        self, read_service: ReadService, pagination: PaginationSettings
    ) -> None:
        """Initialize list feed use case.

        Args:
            read_service: Read domain service
            pagination: Page size defaults and limits
        """
        self.read_service = read_service
        self.pagination = pagination

    async def execute(self, request: ListFeedRequest) -> ListFeedResponse:
        """Execute list feed flow.

        Page sizes above the configured maximum are clamped.
        """
        page_size = min(
            request.page_size or self.pagination.default_page_size,
            self.pagination.max_page_size,
        )
        page = await self.read_service.fetch_feed(
            page_number=request.page, page_size=page_size
        )
        return ListFeedResponse(
            posts=page.posts,
            page=request.page,
            page_size=page_size,
            has_next=page.has_next,
        )
