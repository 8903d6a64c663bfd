"""Domain services."""

from .base import Service
from .invalidation import PathInvalidator
from .read_service import ReadService
from .thread_service import ThreadService
from .user_service import UserService

__all__ = [
    "PathInvalidator",
    "ReadService",
    "Service",
    "ThreadService",
    "UserService",
]
