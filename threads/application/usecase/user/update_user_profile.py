"""Update user profile use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase
from threads.domain.service import UserService
from threads.domain.value import ExternalUserId


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request.

    Creates the user on first call.
    """

    external_id: str
    username: str
    name: str
    bio: str | None = None
    image: str | None = None
    path: str


class UpdateUserProfileResponse(BaseModel):
    """Update user profile response."""

    user_id: str
    external_id: str
    username: str
    name: str
    bio: str | None
    image: str | None
    onboarded: bool
    created_at: datetime


class UpdateUserProfileUseCase(
    BaseUseCase[UpdateUserProfileRequest, UpdateUserProfileResponse]
):
    """Use case for creating or updating a user's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        """Execute update user profile flow.

        Raises:
            ValueError: If the username or name is invalid
            PersistenceError: If the write fails, e.g. username taken
        """
        with logfire.span(
            "update_user_profile.execute", external_id=request.external_id
        ):
            user = await self.user_service.upsert_user_profile(
                external_id=ExternalUserId(request.external_id),
                username=request.username,
                name=request.name,
                bio=request.bio,
                image=request.image,
                path=request.path,
            )

            return UpdateUserProfileResponse(
                user_id=str(user.id),
                external_id=user.external_id,
                username=user.username.root,
                name=user.name,
                bio=user.bio,
                image=user.image,
                onboarded=user.onboarded,
                created_at=user.created_at,
            )
