"""Search users use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from threads.application.usecase.base import BaseUseCase
from threads.config import PaginationSettings
from threads.domain.service import ReadService
from threads.domain.value import ExternalUserId, SortOrder, user_filter_from_search


class UserListItem(BaseModel):
    """User list item in response."""

    user_id: str
    external_id: str
    username: str
    name: str
    image: str | None
    created_at: datetime


class SearchUsersRequest(BaseModel):
    """Search users request."""

    requesting_user_id: str  # External id, excluded from results
    search: str | None = None  # Blank matches everyone
    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)
    sort: SortOrder = SortOrder.DESC


class SearchUsersResponse(BaseModel):
    """Search users response."""

    users: list[UserListItem]
    page: int
    page_size: int
    has_next: bool


class SearchUsersUseCase(BaseUseCase[SearchUsersRequest, SearchUsersResponse]):
    """Use case for paging through users, optionally filtered."""

    def __init__(
        self, read_service: ReadService, pagination: PaginationSettings
    ) -> None:
        """Initialize search users use case.

        Args:
            read_service: Read domain service
            pagination: Page size defaults and limits
        """
        self.read_service = read_service
        self.pagination = pagination

    async def execute(self, request: SearchUsersRequest) -> SearchUsersResponse:
        """Execute search users flow."""
        page_size = min(
            request.page_size or self.pagination.default_page_size,
            self.pagination.max_page_size,
        )
        page = await self.read_service.fetch_users(
            requesting_user_id=ExternalUserId(request.requesting_user_id),
            user_filter=user_filter_from_search(request.search),
            page_number=request.page,
            page_size=page_size,
            sort=request.sort,
        )

        return SearchUsersResponse(
            users=[
                UserListItem(
                    user_id=str(user.id),
                    external_id=user.external_id,
                    username=user.username.root,
                    name=user.name,
                    image=user.image,
                    created_at=user.created_at,
                )
                for user in page.users
            ],
            page=request.page,
            page_size=page_size,
            has_next=page.has_next,
        )
