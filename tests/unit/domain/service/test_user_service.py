"""Unit tests for UserService."""

import pytest

from threads.domain.error import PersistenceError
from threads.domain.service import PathInvalidator, UserService
from threads.domain.value import ExternalUserId
from threads.persistence.repository.inmemory import InMemoryDatabase
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpsertUserProfile:
    """Tests for upsert_user_profile."""

    @pytest.mark.asyncio
    async def test_creates_onboarded_user_with_lowercase_username(self, unit_env):
        """First upsert should create the user, lowercasing the username."""
        # Arrange
        service = await unit_env.get(UserService)

        # Act
        user = await service.upsert_user_profile(
            external_id=ExternalUserId("ext-1"),
            username="  Alice ",
            name="Alice",
            bio="Physicist",
            image=None,
            path="/onboarding",
        )

        # Assert
        assert user.username.root == "alice"
        assert user.onboarded is True
        assert user.bio == "Physicist"

    @pytest.mark.asyncio
    async def test_repeated_upsert_is_idempotent(self, unit_env):
        """Same input twice should leave one identical record."""
        # Arrange
        service = await unit_env.get(UserService)
        database = await unit_env.get(InMemoryDatabase)
        profile = dict(
            external_id=ExternalUserId("ext-1"),
            username="alice",
            name="Alice",
            bio=None,
            image="https://example.com/a.png",
            path="/profile/edit",
        )

        # Act
        first = await service.upsert_user_profile(**profile)
        second = await service.upsert_user_profile(**profile)

        # Assert
        assert first == second
        assert list(database.users.values()) == [first]

    @pytest.mark.asyncio
    async def test_update_keeps_identity(self, unit_env):
        """Updating should change profile fields only."""
        # Arrange
        service = await unit_env.get(UserService)
        database = await unit_env.get(InMemoryDatabase)
        created = await service.upsert_user_profile(
            ExternalUserId("ext-1"), "alice", "Alice", None, None, "/onboarding"
        )

        # Act
        updated = await service.upsert_user_profile(
            ExternalUserId("ext-1"), "alice2", "Alice B", "New bio", None, "/profile/edit"
        )

        # Assert
        assert updated.id == created.id
        assert updated.created_at == created.created_at
        assert updated.username.root == "alice2"
        assert len(database.users) == 1

    @pytest.mark.asyncio
    async def test_only_profile_edit_path_is_invalidated(self, unit_env):
        """Onboarding upserts should not trigger an invalidation."""
        # Arrange
        service = await unit_env.get(UserService)
        invalidator = await unit_env.get(PathInvalidator)

        # Act
        await service.upsert_user_profile(
            ExternalUserId("ext-1"), "alice", "Alice", None, None, "/onboarding"
        )
        await service.upsert_user_profile(
            ExternalUserId("ext-1"), "alice", "Alice", None, None, "/profile/edit"
        )

        # Assert
        assert invalidator.invalidated == ["/profile/edit"]

    @pytest.mark.asyncio
    async def test_taken_username_raises_persistence_error(self, unit_env):
        """A username held by another user should fail the upsert."""
        # Arrange
        service = await unit_env.get(UserService)
        await service.upsert_user_profile(
            ExternalUserId("ext-1"), "alice", "Alice", None, None, "/onboarding"
        )

        # Act & Assert
        with pytest.raises(PersistenceError) as exc_info:
            await service.upsert_user_profile(
                ExternalUserId("ext-2"), "ALICE", "Other", None, None, "/onboarding"
            )

        assert str(exc_info.value).startswith("failed creating/updating user:")

    @pytest.mark.asyncio
    async def test_blank_username_is_rejected(self, unit_env):
        """Usernames must not be blank."""
        service = await unit_env.get(UserService)

        with pytest.raises(ValueError):
            await service.upsert_user_profile(
                ExternalUserId("ext-1"), "   ", "Alice", None, None, "/onboarding"
            )
