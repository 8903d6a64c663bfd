"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from threads.domain.model import Community, Thread, User
from threads.domain.value import (
    CommunityId,
    ExternalCommunityId,
    ExternalUserId,
    ThreadId,
    UserId,
)
from threads.domain.value.types import Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _uuid_list(values: Any) -> list[UUID]:
    return [_uuid(v) for v in values or []]


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        external_id=ExternalUserId(row["external_id"]),
        username=Username(row["username"]),
        name=row["name"],
        bio=row.get("bio"),
        image=row.get("image"),
        onboarded=row["onboarded"],
        threads=[ThreadId(t) for t in _uuid_list(row.get("threads"))],
        communities=[CommunityId(c) for c in _uuid_list(row.get("communities"))],
        created_at=row["created_at"],
    )


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict

    Returns:
        Thread domain model
    """
    return Thread(
        id=ThreadId(_uuid(row["id"])),
        text=row["text"],
        author_id=UserId(_uuid(row["author_id"])),
        community_id=CommunityId(_uuid(row["community_id"]))
        if row.get("community_id")
        else None,
        parent_id=ThreadId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        children=[ThreadId(c) for c in _uuid_list(row.get("children"))],
        created_at=row["created_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to database dict."""
    return thread.model_dump()


def row_to_community(row: Dict[str, Any]) -> Community:
    """Convert database row to Community domain model."""
    return Community(
        id=CommunityId(_uuid(row["id"])),
        external_id=ExternalCommunityId(row["external_id"]),
        name=row["name"],
        image=row.get("image"),
        bio=row.get("bio"),
        threads=[ThreadId(t) for t in _uuid_list(row.get("threads"))],
        created_at=row["created_at"],
    )
