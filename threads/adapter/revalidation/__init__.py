"""Presentation cache revalidation adapter."""

from .client import HttpRevalidationClient, MockRevalidationClient, RevalidationClient

__all__ = [
    "HttpRevalidationClient",
    "MockRevalidationClient",
    "RevalidationClient",
]
