"""User domain service."""

import logfire

from threads.domain.model import User
from threads.domain.repository import UserRepository, WriteCoordinator
from threads.domain.value import ExternalUserId
from threads.domain.value.types import Username

from .base import Service
from .invalidation import PathInvalidator


class UserService(Service):
    """Domain service for user profile writes."""

    def __init__(
        self,
        user_repository: UserRepository,
        coordinator: WriteCoordinator,
        invalidator: PathInvalidator,
        profile_edit_path: str = "/profile/edit",
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            coordinator: Write coordinator
            invalidator: Port used to announce stale paths
            profile_edit_path: Only upserts from this path invalidate it
        """
        self.user_repository = user_repository
        self.coordinator = coordinator
        self.invalidator = invalidator
        self.profile_edit_path = profile_edit_path

    async def upsert_user_profile(
        self,
        external_id: ExternalUserId,
        username: str,
        name: str,
        bio: str | None,
        image: str | None,
        path: str,
    ) -> User:
        """Create or update a profile and mark the user as onboarded.

        Calling this twice with the same input leaves the record unchanged.
        Onboarding flows call it as well, so only the profile edit page is
        invalidated.

        Args:
            external_id: External user id (upsert key)
            username: Username, stored lowercased
            name: Display name
            bio: Profile bio
            image: Profile image URL
            path: Path of the calling page

        Returns:
            Stored user

        Raises:
            PersistenceError: If the write fails (e.g. username taken)
        """
        normalized = Username(username)
        with logfire.span(
            "user_service.upsert_user_profile",
            external_id=external_id,
            username=normalized.root,
        ):
            async with self.coordinator.unit("creating/updating user"):
                user = await self.user_repository.upsert_profile(
                    external_id=external_id,
                    username=normalized,
                    name=name,
                    bio=bio,
                    image=image,
                )

            logfire.info(
                "User profile upserted",
                user_id=str(user.id),
                external_id=external_id,
                username=user.username.root,
            )

            if path == self.profile_edit_path:
                await self.invalidator.invalidate(path)
            return user
