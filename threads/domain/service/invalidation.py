"""Cache invalidation port.

After a mutation the presentation layer must recompute renderings of the
affected path. The domain only announces the path; delivery belongs to an
adapter.
"""

from abc import ABC, abstractmethod


class PathInvalidator(ABC):
    """Announces that cached renderings of a path are stale."""

    @abstractmethod
    async def invalidate(self, path: str) -> None:
        """Signal that ``path`` must be re-rendered on next access.

        Args:
            path: Presentation path, e.g. "/thread/<id>"
        """
        pass
