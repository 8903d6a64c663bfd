"""Unit tests for user use cases."""

import pytest

from threads.application.usecase.user import (
    GetActivityRequest,
    GetActivityUseCase,
    GetUserPostsRequest,
    GetUserPostsUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    SearchUsersRequest,
    SearchUsersUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from threads.domain.value import SortOrder
from threads.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import add_thread, add_user, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpdateAndGetProfile:
    """Tests for UpdateUserProfileUseCase and GetUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_upserted_profile_can_be_read_back(self, unit_env):
        # Arrange
        update = await unit_env.get(UpdateUserProfileUseCase)
        get_profile = await unit_env.get(GetUserProfileUseCase)

        # Act
        created = await update.execute(
            UpdateUserProfileRequest(
                external_id="ext-1",
                username="Alice",
                name="Alice Smith",
                bio="Chemist",
                path="/onboarding",
            )
        )
        profile = await get_profile.execute(GetUserProfileRequest(external_id="ext-1"))

        # Assert
        assert created.username == "alice"
        assert created.onboarded is True
        assert profile is not None
        assert profile.user_id == created.user_id
        assert profile.bio == "Chemist"
        assert profile.thread_count == 0
        assert profile.communities == []

    @pytest.mark.asyncio
    async def test_unknown_profile_returns_none(self, unit_env):
        get_profile = await unit_env.get(GetUserProfileUseCase)

        assert await get_profile.execute(GetUserProfileRequest(external_id="ghost")) is None


class TestGetUserPostsUseCase:
    """Tests for GetUserPostsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_authored_threads(self, unit_env):
        use_case = await unit_env.get(GetUserPostsUseCase)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))
        post = add_thread(database, alice, "Post")

        response = await use_case.execute(GetUserPostsRequest(external_id="alice"))

        assert response.user_id == str(alice.id)
        assert [t.id for t in response.threads] == [post.id]


class TestSearchUsersUseCase:
    """Tests for SearchUsersUseCase."""

    @pytest.mark.asyncio
    async def test_blank_search_lists_everyone_but_requester(self, unit_env):
        use_case = await unit_env.get(SearchUsersUseCase)
        database = await unit_env.get(InMemoryDatabase)
        add_user(database, make_user("me"))
        add_user(database, make_user("alice"))
        add_user(database, make_user("bob"))

        response = await use_case.execute(
            SearchUsersRequest(requesting_user_id="me", search="  ", sort=SortOrder.ASC)
        )

        assert sorted(u.external_id for u in response.users) == ["alice", "bob"]
        assert response.has_next is False

    @pytest.mark.asyncio
    async def test_search_filters_users(self, unit_env):
        use_case = await unit_env.get(SearchUsersUseCase)
        database = await unit_env.get(InMemoryDatabase)
        add_user(database, make_user("alice"))
        add_user(database, make_user("bob"))

        response = await use_case.execute(
            SearchUsersRequest(requesting_user_id="me", search="BO")
        )

        assert [u.username for u in response.users] == ["bob"]


class TestGetActivityUseCase:
    """Tests for GetActivityUseCase."""

    @pytest.mark.asyncio
    async def test_lists_replies(self, unit_env):
        use_case = await unit_env.get(GetActivityUseCase)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))
        bob = add_user(database, make_user("bob"))
        post = add_thread(database, alice, "Post")
        reply = add_thread(database, bob, "Reply", post)

        response = await use_case.execute(GetActivityRequest(user_id=str(alice.id)))

        assert [r.id for r in response.replies] == [reply.id]
