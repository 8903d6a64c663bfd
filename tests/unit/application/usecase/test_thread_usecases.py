"""Unit tests for thread use cases."""

from uuid import uuid4

import pytest

from threads.application.usecase.thread import (
    AddCommentRequest,
    AddCommentUseCase,
    CreateThreadRequest,
    CreateThreadUseCase,
    DeleteThreadRequest,
    DeleteThreadUseCase,
    GetThreadRequest,
    GetThreadUseCase,
    ListFeedRequest,
    ListFeedUseCase,
)
from threads.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import add_thread, add_user, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateThreadUseCase:
    """Tests for CreateThreadUseCase."""

    @pytest.mark.asyncio
    async def test_returns_created_thread(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateThreadUseCase)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))

        # Act
        response = await use_case.execute(
            CreateThreadRequest(text="Hello", author_id=str(alice.id), path="/")
        )

        # Assert
        assert response.author_id == str(alice.id)
        assert response.community_id is None
        assert response.thread_id in {str(tid) for tid in database.threads}

    @pytest.mark.asyncio
    async def test_empty_text_is_rejected(self, unit_env):
        use_case = await unit_env.get(CreateThreadUseCase)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))

        with pytest.raises(ValueError):
            await use_case.execute(
                CreateThreadRequest(text="", author_id=str(alice.id), path="/")
            )


class TestAddCommentAndDelete:
    """Tests for AddCommentUseCase and DeleteThreadUseCase."""

    @pytest.mark.asyncio
    async def test_comment_then_delete_whole_tree(self, unit_env):
        # Arrange
        add_comment = await unit_env.get(AddCommentUseCase)
        delete_thread = await unit_env.get(DeleteThreadUseCase)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))
        post = add_thread(database, alice, "Post")

        # Act
        comment = await add_comment.execute(
            AddCommentRequest(
                thread_id=str(post.id), text="Reply", author_id=str(alice.id), path="/"
            )
        )
        deleted = await delete_thread.execute(
            DeleteThreadRequest(thread_id=str(post.id), path="/")
        )

        # Assert
        assert comment.parent_id == str(post.id)
        assert deleted.deleted == 2
        assert database.threads == {}


class TestReadUseCases:
    """Tests for GetThreadUseCase and ListFeedUseCase."""

    @pytest.mark.asyncio
    async def test_get_missing_thread_returns_none(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)

        assert await use_case.execute(GetThreadRequest(thread_id=str(uuid4()))) is None

    @pytest.mark.asyncio
    async def test_get_thread_wraps_view(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))
        post = add_thread(database, alice, "Post")

        response = await use_case.execute(GetThreadRequest(thread_id=str(post.id)))

        assert response.thread.id == post.id
        assert response.thread.author.external_id == "alice"

    @pytest.mark.asyncio
    async def test_feed_uses_default_page_size(self, unit_env):
        use_case = await unit_env.get(ListFeedUseCase)

        response = await use_case.execute(ListFeedRequest())

        assert response.page == 1
        assert response.page_size == 20

    @pytest.mark.asyncio
    async def test_feed_clamps_page_size(self, unit_env):
        use_case = await unit_env.get(ListFeedUseCase)

        response = await use_case.execute(ListFeedRequest(page_size=500))

        assert response.page_size == 100
