"""Get user profile use case."""

from datetime import datetime

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase
from threads.domain.model import CommunitySummary
from threads.domain.service import ReadService
from threads.domain.value import ExternalUserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    external_id: str


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    user_id: str
    external_id: str
    username: str
    name: str
    bio: str | None
    image: str | None
    onboarded: bool
    thread_count: int
    created_at: datetime
    communities: list[CommunitySummary]


class GetUserProfileUseCase(
    BaseUseCase[GetUserProfileRequest, GetUserProfileResponse | None]
):
    """Use case for reading a user's profile and communities."""

    def __init__(self, read_service: ReadService) -> None:
        """Initialize get user profile use case.

        Args:
            read_service: Read domain service
        """
        self.read_service = read_service

    async def execute(
        self, request: GetUserProfileRequest
    ) -> GetUserProfileResponse | None:
        """Execute get user profile flow.

        Returns:
            User profile if the user exists, None otherwise
        """
        profile = await self.read_service.fetch_user(
            ExternalUserId(request.external_id)
        )
        if profile is None:
            return None

        user = profile.user
        return GetUserProfileResponse(
            user_id=str(user.id),
            external_id=user.external_id,
            username=user.username.root,
            name=user.name,
            bio=user.bio,
            image=user.image,
            onboarded=user.onboarded,
            thread_count=len(user.threads),
            created_at=user.created_at,
            communities=profile.communities,
        )
