"""Strongly typed identifiers for thread domain entities.

Using NewType for strong typing prevents mixing up internal ids, which
reference rows, with the external ids handed to us by the identity provider.
"""

from typing import NewType
from uuid import UUID

# Internal identifiers (primary keys, used in cross references)
UserId = NewType("UserId", UUID)
ThreadId = NewType("ThreadId", UUID)
CommunityId = NewType("CommunityId", UUID)

# External identifiers (stable ids issued outside this service)
ExternalUserId = NewType("ExternalUserId", str)
ExternalCommunityId = NewType("ExternalCommunityId", str)
