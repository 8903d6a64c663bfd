"""Unit tests for ThreadService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from threads.adapter.revalidation import MockRevalidationClient
from threads.domain.error import (
    NotFoundError,
    PersistenceError,
    StructuralIntegrityError,
)
from threads.domain.service import PathInvalidator, ThreadService
from threads.domain.value import ExternalCommunityId, ThreadId, UserId
from threads.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import add_thread, add_user, make_community, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateThread:
    """Tests for create_thread."""

    @pytest.mark.asyncio
    async def test_links_thread_to_author(self, unit_env):
        """New thread should be stored and listed under its author."""
        # Arrange
        service = await unit_env.get(ThreadService)
        database = await unit_env.get(InMemoryDatabase)
        author = add_user(database, make_user("alice"))

        # Act
        thread = await service.create_thread(
            text="First post", author_id=author.id, community_external_id=None, path="/"
        )

        # Assert
        assert database.threads[thread.id].text == "First post"
        assert thread.parent_id is None
        assert thread.community_id is None
        assert database.users[author.id].threads == [thread.id]

    @pytest.mark.asyncio
    async def test_links_thread_to_community(self, unit_env):
        """Known community should be referenced and list the thread."""
        # Arrange
        service = await unit_env.get(ThreadService)
        database = await unit_env.get(InMemoryDatabase)
        author = add_user(database, make_user("alice"))
        community = make_community("physics")
        database.communities[community.id] = community

        # Act
        thread = await service.create_thread(
            text="Dark matter",
            author_id=author.id,
            community_external_id=ExternalCommunityId("physics"),
            path="/",
        )

        # Assert
        assert thread.community_id == community.id
        assert database.communities[community.id].threads == [thread.id]

    @pytest.mark.asyncio
    async def test_unknown_community_is_ignored(self, unit_env):
        """Unknown community id should create the thread without a community."""
        # Arrange
        service = await unit_env.get(ThreadService)
        database = await unit_env.get(InMemoryDatabase)
        author = add_user(database, make_user("alice"))

        # Act
        thread = await service.create_thread(
            text="Hello",
            author_id=author.id,
            community_external_id=ExternalCommunityId("nowhere"),
            path="/",
        )

        # Assert
        assert thread.community_id is None
        assert thread.id in database.threads

    @pytest.mark.asyncio
    async def test_invalidates_given_path(self, unit_env):
        """Creating a thread should invalidate the caller's path."""
        # Arrange
        service = await unit_env.get(ThreadService)
        invalidator = await unit_env.get(PathInvalidator)
        database = await unit_env.get(InMemoryDatabase)
        author = add_user(database, make_user("alice"))

        # Act
        await service.create_thread(
            text="Hello", author_id=author.id, community_external_id=None, path="/"
        )

        # Assert
        assert isinstance(invalidator, MockRevalidationClient)
        assert invalidator.invalidated == ["/"]

    @pytest.mark.asyncio
    async def test_missing_author_raises_persistence_error(self, unit_env):
        """Store failures should surface as PersistenceError naming the operation."""
        # Arrange
        service = await unit_env.get(ThreadService)
        database = await unit_env.get(InMemoryDatabase)
        invalidator = await unit_env.get(PathInvalidator)

        # Act & Assert
        with pytest.raises(PersistenceError) as exc_info:
            await service.create_thread(
                text="Orphan",
                author_id=UserId(uuid4()),
                community_external_id=None,
                path="/",
            )

        assert str(exc_info.value).startswith("failed creating thread:")
        assert exc_info.value.operation == "creating thread"
        assert database.threads == {}
        assert invalidator.invalidated == []


class TestAttachComment:
    """Tests for attach_comment."""

    @pytest.mark.asyncio
    async def test_links_comment_both_ways(self, unit_env):
        """Reply should point at its parent and be listed in parent's children."""
        # Arrange
        service = await unit_env.get(ThreadService)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))
        bob = add_user(database, make_user("bob"))
        post = add_thread(database, alice, "Original")

        # Act
        comment = await service.attach_comment(
            parent_id=post.id, text="Reply", author_id=bob.id, path="/thread/x"
        )

        # Assert
        assert comment.parent_id == post.id
        assert comment.community_id is None
        assert database.threads[post.id].children == [comment.id]
        assert database.users[bob.id].threads == [comment.id]
        assert database.users[alice.id].threads == [post.id]

    @pytest.mark.asyncio
    async def test_children_keep_reply_order(self, unit_env):
        """Replies should be appended in the order they were made."""
        # Arrange
        service = await unit_env.get(ThreadService)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))
        post = add_thread(database, alice, "Original")

        # Act
        first = await service.attach_comment(post.id, "One", alice.id, "/")
        second = await service.attach_comment(post.id, "Two", alice.id, "/")

        # Assert
        assert database.threads[post.id].children == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_invalidates_given_path(self, unit_env):
        """Commenting should invalidate the caller's path."""
        # Arrange
        service = await unit_env.get(ThreadService)
        invalidator = await unit_env.get(PathInvalidator)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))
        post = add_thread(database, alice, "Original")

        # Act
        await service.attach_comment(post.id, "Reply", alice.id, f"/thread/{post.id}")

        # Assert
        assert invalidator.invalidated == [f"/thread/{post.id}"]

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, unit_env):
        """Replying to a missing thread should fail without writing anything."""
        # Arrange
        service = await unit_env.get(ThreadService)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.attach_comment(ThreadId(uuid4()), "Reply", alice.id, "/")

        assert database.threads == {}
        assert database.users[alice.id].threads == []


class TestFetchAllDescendants:
    """Tests for fetch_all_descendants."""

    @pytest.mark.asyncio
    async def test_returns_nested_replies(self, unit_env):
        """A reply to a reply should be found from the root."""
        # Arrange
        service = await unit_env.get(ThreadService)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))
        t1 = add_thread(database, alice, "T1")
        c1 = await service.attach_comment(t1.id, "C1", alice.id, "/")
        c2 = await service.attach_comment(c1.id, "C2", alice.id, "/")

        # Act
        descendants = await service.fetch_all_descendants(t1.id)

        # Assert
        assert [d.id for d in descendants] == [c1.id, c2.id]

    @pytest.mark.asyncio
    async def test_returns_pre_order(self, unit_env):
        """Each reply should be followed by its own replies before its siblings."""
        # Arrange
        service = await unit_env.get(ThreadService)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))
        start = datetime(2025, 1, 1, 12, 0, 0)
        root = add_thread(database, alice, "root", created_at=start)
        a = add_thread(database, alice, "a", root, start + timedelta(minutes=1))
        b = add_thread(database, alice, "b", root, start + timedelta(minutes=2))
        a1 = add_thread(database, alice, "a1", a, start + timedelta(minutes=3))
        a1x = add_thread(database, alice, "a1x", a1, start + timedelta(minutes=4))
        b1 = add_thread(database, alice, "b1", b, start + timedelta(minutes=5))

        # Act
        descendants = await service.fetch_all_descendants(root.id)

        # Assert
        assert [d.text for d in descendants] == ["a", "a1", "a1x", "b", "b1"]
        assert {d.id for d in descendants} == {a.id, b.id, a1.id, a1x.id, b1.id}

    @pytest.mark.asyncio
    async def test_leaf_has_no_descendants(self, unit_env):
        """A thread without replies should have no descendants."""
        # Arrange
        service = await unit_env.get(ThreadService)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))
        post = add_thread(database, alice, "Lonely")

        # Act & Assert
        assert await service.fetch_all_descendants(post.id) == []

    @pytest.mark.asyncio
    async def test_deep_chain_does_not_recurse(self, unit_env):
        """Very deep reply chains should resolve without hitting recursion limits."""
        # Arrange
        service = await unit_env.get(ThreadService)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))
        root = add_thread(database, alice, "root")
        parent = root
        for i in range(1500):
            parent = add_thread(database, alice, f"reply {i}", parent)

        # Act
        descendants = await service.fetch_all_descendants(root.id)

        # Assert
        assert len(descendants) == 1500
        assert descendants[-1].id == parent.id

    @pytest.mark.asyncio
    async def test_cycle_raises_structural_integrity_error(self, unit_env):
        """Parent links that loop back should be reported, not followed forever."""
        # Arrange
        service = await unit_env.get(ThreadService)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))
        a = add_thread(database, alice, "a")
        b = add_thread(database, alice, "b", a)
        database.threads[a.id] = database.threads[a.id].model_copy(
            update={"parent_id": b.id}
        )

        # Act & Assert
        with pytest.raises(StructuralIntegrityError) as exc_info:
            await service.fetch_all_descendants(a.id)

        assert exc_info.value.repeated_id == str(a.id)


class TestDeleteThreadSubtree:
    """Tests for delete_thread_subtree."""

    @pytest.mark.asyncio
    async def test_deletes_thread_and_all_replies(self, unit_env):
        """Root and every descendant should be removed, others kept."""
        # Arrange
        service = await unit_env.get(ThreadService)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))
        t1 = add_thread(database, alice, "T1")
        c1 = add_thread(database, alice, "C1", t1)
        c2 = add_thread(database, alice, "C2", c1)
        other = add_thread(database, alice, "Other")

        # Act
        deleted = await service.delete_thread_subtree(t1.id, path="/")

        # Assert
        assert deleted == 3
        assert set(database.threads) == {other.id}
        for removed in (t1, c1, c2):
            assert removed.id not in database.threads
        assert database.users[alice.id].threads == [other.id]

    @pytest.mark.asyncio
    async def test_pulls_ids_from_every_author_and_community(self, unit_env):
        """Back-references of all involved users and communities should be cleaned."""
        # Arrange
        service = await unit_env.get(ThreadService)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))
        bob = add_user(database, make_user("bob"))
        carol = add_user(database, make_user("carol"))
        community = make_community("physics")
        database.communities[community.id] = community

        post = await service.create_thread(
            "Post", alice.id, ExternalCommunityId("physics"), "/"
        )
        reply = await service.attach_comment(post.id, "Reply", bob.id, "/")
        await service.attach_comment(reply.id, "Nested", carol.id, "/")
        kept = await service.create_thread("Kept", bob.id, None, "/")

        # Act
        await service.delete_thread_subtree(post.id, path="/")

        # Assert
        assert database.users[alice.id].threads == []
        assert database.users[bob.id].threads == [kept.id]
        assert database.users[carol.id].threads == []
        assert database.communities[community.id].threads == []

    @pytest.mark.asyncio
    async def test_deleting_reply_detaches_it_from_parent(self, unit_env):
        """Parent should no longer list a deleted reply."""
        # Arrange
        service = await unit_env.get(ThreadService)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))
        post = add_thread(database, alice, "Post")
        doomed = add_thread(database, alice, "Doomed", post)
        kept = add_thread(database, alice, "Kept", post)

        # Act
        await service.delete_thread_subtree(doomed.id, path="/")

        # Assert
        assert database.threads[post.id].children == [kept.id]

    @pytest.mark.asyncio
    async def test_invalidates_given_path(self, unit_env):
        """Deleting should invalidate the caller's path."""
        # Arrange
        service = await unit_env.get(ThreadService)
        invalidator = await unit_env.get(PathInvalidator)
        database = await unit_env.get(InMemoryDatabase)
        alice = add_user(database, make_user("alice"))
        post = add_thread(database, alice, "Post")

        # Act
        await service.delete_thread_subtree(post.id, path="/profile/alice")

        # Assert
        assert invalidator.invalidated == ["/profile/alice"]

    @pytest.mark.asyncio
    async def test_missing_thread_raises_not_found(self, unit_env):
        """Deleting a missing thread should fail and invalidate nothing."""
        # Arrange
        service = await unit_env.get(ThreadService)
        invalidator = await unit_env.get(PathInvalidator)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.delete_thread_subtree(ThreadId(uuid4()), path="/")

        assert invalidator.invalidated == []
