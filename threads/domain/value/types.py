"""Domain value objects for the threads service.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and normalization.
"""

from enum import Enum
from typing import Literal

from pydantic import field_validator

from threads.domain.value.common import RootValueObject, ValueObject


class SortOrder(str, Enum):
    """Creation-time ordering for listings."""

    ASC = "asc"
    DESC = "desc"


class ConsistencyMode(str, Enum):
    """How a multi-entity write set is applied to the store."""

    BEST_EFFORT = "best_effort"  # Commit per step, no rollback of earlier steps
    TRANSACTIONAL = "transactional"  # All steps commit or roll back together


class Username(RootValueObject[str]):
    """Unique username, always stored lowercased."""

    @field_validator("root")
    @classmethod
    def normalize_username(cls, v: str) -> str:
        """Strip, lowercase and bound the username."""
        v = v.strip().lower()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Username must be 1-255 characters")
        return v


class AnyUser(ValueObject):
    """User filter that matches every user."""

    kind: Literal["any"] = "any"


class MatchingUsers(ValueObject):
    """User filter matching a literal substring of username or name.

    Matching is case-insensitive.
    """

    kind: Literal["matching"] = "matching"
    pattern: str

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        """Reject blank patterns, use AnyUser instead."""
        v = v.strip()
        if not v:
            raise ValueError("Pattern must not be blank")
        return v

    def matches(self, *values: str | None) -> bool:
        """Check whether any of the given values contains the pattern."""
        needle = self.pattern.casefold()
        return any(value is not None and needle in value.casefold() for value in values)


UserFilter = AnyUser | MatchingUsers


def user_filter_from_search(search: str | None) -> UserFilter:
    """Build the user filter for a raw search string.

    Blank or missing searches match everyone.
    """
    if search is None or not search.strip():
        return AnyUser()
    return MatchingUsers(pattern=search)
