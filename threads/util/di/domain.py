"""Domain layer DI providers."""

from dishka import Scope, provide

from threads.config import Settings
from threads.domain.repository import (
    CommunityRepository,
    ThreadRepository,
    UserRepository,
    WriteCoordinator,
)
from threads.domain.service import (
    PathInvalidator,
    ReadService,
    ThreadService,
    UserService,
)
from threads.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped to align with the repository and session
    lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_thread_service(
        self,
        thread_repository: ThreadRepository,
        user_repository: UserRepository,
        community_repository: CommunityRepository,
        coordinator: WriteCoordinator,
        invalidator: PathInvalidator,
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(
            thread_repository=thread_repository,
            user_repository=user_repository,
            community_repository=community_repository,
            coordinator=coordinator,
            invalidator=invalidator,
        )

    @provide
    def get_read_service(
        self,
        thread_repository: ThreadRepository,
        user_repository: UserRepository,
        community_repository: CommunityRepository,
    ) -> ReadService:
        """Provide read domain service."""
        return ReadService(
            thread_repository=thread_repository,
            user_repository=user_repository,
            community_repository=community_repository,
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        coordinator: WriteCoordinator,
        invalidator: PathInvalidator,
        settings: Settings,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            coordinator=coordinator,
            invalidator=invalidator,
            profile_edit_path=settings.revalidation.profile_edit_path,
        )
