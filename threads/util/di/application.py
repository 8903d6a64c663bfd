"""Application layer DI providers."""

from dishka import Scope, provide

from threads.application.usecase.thread import (
    AddCommentUseCase,
    CreateThreadUseCase,
    DeleteThreadUseCase,
    GetThreadUseCase,
    ListFeedUseCase,
)
from threads.application.usecase.user import (
    GetActivityUseCase,
    GetUserPostsUseCase,
    GetUserProfileUseCase,
    SearchUsersUseCase,
    UpdateUserProfileUseCase,
)
from threads.config import PaginationSettings
from threads.domain.service import ReadService, ThreadService, UserService
from threads.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider."""

    scope = Scope.REQUEST

    # Thread use cases
    @provide
    def get_create_thread_use_case(
        self, thread_service: ThreadService
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(thread_service=thread_service)

    @provide
    def get_add_comment_use_case(
        self, thread_service: ThreadService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(thread_service=thread_service)

    @provide
    def get_delete_thread_use_case(
        self, thread_service: ThreadService
    ) -> DeleteThreadUseCase:
        """Provide delete thread use case."""
        return DeleteThreadUseCase(thread_service=thread_service)

    @provide
    def get_thread_use_case(self, read_service: ReadService) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(read_service=read_service)

    @provide
    def get_list_feed_use_case(
        self, read_service: ReadService, pagination: PaginationSettings
    ) -> ListFeedUseCase:
        """Provide list feed use case."""
        return ListFeedUseCase(read_service=read_service, pagination=pagination)

    # User use cases
    @provide
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service)

    @provide
    def get_user_profile_use_case(
        self, read_service: ReadService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(read_service=read_service)

    @provide
    def get_user_posts_use_case(self, read_service: ReadService) -> GetUserPostsUseCase:
        """Provide get user posts use case."""
        return GetUserPostsUseCase(read_service=read_service)

    @provide
    def get_search_users_use_case(
        self, read_service: ReadService, pagination: PaginationSettings
    ) -> SearchUsersUseCase:
        """Provide search users use case."""
        return SearchUsersUseCase(read_service=read_service, pagination=pagination)

    @provide
    def get_activity_use_case(self, read_service: ReadService) -> GetActivityUseCase:
        """Provide get activity use case."""
        return GetActivityUseCase(read_service=read_service)
