"""Revalidation client implementation.

Tells the presentation layer that the cached rendering of a path is stale.
"""

import httpx
import logfire

from threads.adapter.error import RevalidationError
from threads.domain.service.invalidation import PathInvalidator
from threads.util.logging import get_logger

logger = get_logger(__name__)


class RevalidationClient(PathInvalidator):
    """Base class for revalidation clients.

    Provides type distinction for dependency injection.
    """

    pass


class HttpRevalidationClient(RevalidationClient):
    """Revalidation over HTTP.

    Posts ``{"path": ...}`` to the frontend's revalidation endpoint with a
    shared secret header. Delivery failures are logged and swallowed: the
    mutation that triggered them has already been committed.
    """

    SECRET_HEADER = "X-Revalidate-Secret"

    def __init__(
        self,
        frontend_url: str,
        endpoint: str,
        secret: str | None = None,
        timeout: float = 5.0,
        enabled: bool = True,
    ) -> None:
        """Initialize revalidation client.

        Args:
            frontend_url: Base URL of the presentation layer
            endpoint: Revalidation endpoint path
            secret: Shared secret sent with every request
            timeout: Request timeout in seconds
            enabled: When False, paths are only logged
        """
        self.url = f"{frontend_url.rstrip('/')}{endpoint}"
        self.secret = secret
        self.timeout = timeout
        self.enabled = enabled

    async def invalidate(self, path: str) -> None:
        """Request revalidation of a path.

        Args:
            path: Presentation path whose rendering is stale
        """
        if not self.enabled:
            logfire.info("Revalidation disabled, skipping", path=path)
            return

        try:
            await self._post(path)
            logfire.info("Path revalidated", path=path)
        except RevalidationError as e:
            logfire.warn("Revalidation failed", path=path, error=str(e))

    async def _post(self, path: str) -> None:
        """Send the revalidation request.

        Raises:
            RevalidationError: If the request fails or is rejected
        """
        logger.debug(f"Revalidating {path} via {self.url}")
        headers = {"Content-Type": "application/json"}
        if self.secret:
            headers[self.SECRET_HEADER] = self.secret

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.url,
                    json={"path": path},
                    headers=headers,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            raise RevalidationError(f"HTTP error during revalidation: {e}") from e

        if response.status_code >= 400:
            logfire.error(
                "Revalidation rejected",
                status_code=response.status_code,
                error=response.text,
            )
            raise RevalidationError(f"Revalidation failed: {response.status_code}")


class MockRevalidationClient(RevalidationClient):
    """Mock revalidation client for testing.

    Records invalidated paths in call order without making requests.
    """

    def __init__(self) -> None:
        self.invalidated: list[str] = []

    async def invalidate(self, path: str) -> None:
        """Record the path.

        Args:
            path: Presentation path
        """
        self.invalidated.append(path)
