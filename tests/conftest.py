"""Test configuration and helpers."""

from datetime import datetime
from uuid import uuid4

from threads.domain.model import Community, Thread, User
from threads.domain.value import (
    CommunityId,
    ExternalCommunityId,
    ExternalUserId,
    ThreadId,
    UserId,
)
from threads.domain.value.types import Username
from threads.persistence.repository.inmemory import InMemoryDatabase


def make_user(
    external_id: str,
    username: str | None = None,
    name: str | None = None,
    created_at: datetime | None = None,
) -> User:
    """Build a user, deriving username and name from the external id."""
    return User(
        id=UserId(uuid4()),
        external_id=ExternalUserId(external_id),
        username=Username(username or external_id),
        name=name or external_id.title(),
        onboarded=True,
        created_at=created_at or datetime.now(),
    )


def make_community(external_id: str, name: str | None = None) -> Community:
    """Build a community."""
    return Community(
        id=CommunityId(uuid4()),
        external_id=ExternalCommunityId(external_id),
        name=name or external_id.title(),
    )


def add_user(database: InMemoryDatabase, user: User) -> User:
    """Store a user directly."""
    database.users[user.id] = user
    return user


def add_thread(
    database: InMemoryDatabase,
    author: User,
    text: str,
    parent: Thread | None = None,
    created_at: datetime | None = None,
) -> Thread:
    """Store a thread directly, linking it to its parent and author.

    Lets tests control timestamps precisely.
    """
    thread = Thread(
        id=ThreadId(uuid4()),
        text=text,
        author_id=author.id,
        parent_id=parent.id if parent else None,
        created_at=created_at or datetime.now(),
    )
    database.threads[thread.id] = thread
    if parent:
        stored = database.threads[parent.id]
        database.threads[parent.id] = stored.model_copy(
            update={"children": [*stored.children, thread.id]}
        )
    stored_author = database.users[author.id]
    database.users[author.id] = stored_author.model_copy(
        update={"threads": [*stored_author.threads, thread.id]}
    )
    return thread
