"""SQLAlchemy table definitions for the threads service.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.

Id sequences (a user's threads, a thread's children, ...) are stored as
uuid[] columns so a push or pull is one atomic UPDATE.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("external_id", String(255), nullable=False, unique=True),  # Identity provider id
    Column("username", String(255), nullable=False, unique=True),  # Always lowercase
    Column("name", String(255), nullable=False),
    Column("bio", Text, nullable=True),
    Column("image", Text, nullable=True),
    Column("onboarded", Boolean, nullable=False, server_default="false"),
    Column(
        "threads",
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "communities",
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_created_at", users_table.c.created_at)

# ============================================================================
# COMMUNITIES TABLE
# ============================================================================
communities_table = Table(
    "communities",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("external_id", String(255), nullable=False, unique=True),
    Column("name", String(255), nullable=False),
    Column("image", Text, nullable=True),
    Column("bio", Text, nullable=True),
    Column(
        "threads",
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# THREADS TABLE (posts and replies)
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("text", Text, nullable=False),
    Column("author_id", UUID(as_uuid=True), ForeignKey("users.id"), nullable=False),
    Column(
        "community_id",
        UUID(as_uuid=True),
        ForeignKey("communities.id", ondelete="SET NULL"),
        nullable=True,
    ),
    # No FK: subtrees are deleted in one statement by the application
    Column("parent_id", UUID(as_uuid=True), nullable=True),
    Column(
        "children",
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_threads_created_at", threads_table.c.created_at.desc())
Index("idx_threads_parent_id", threads_table.c.parent_id)
Index("idx_threads_author_id", threads_table.c.author_id)
Index("idx_threads_community_id", threads_table.c.community_id)
