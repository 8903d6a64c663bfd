"""Revalidation infrastructure providers."""

from dishka import Scope, provide

from threads.adapter.revalidation import HttpRevalidationClient
from threads.config import Settings
from threads.domain.service import PathInvalidator
from threads.util.di.base import ProviderBase
from threads.util.error import ConfigurationError


class RevalidationProvider(ProviderBase):
    """Revalidation component base."""

    __mock_component__ = "revalidation"


class ProdRevalidationProvider(RevalidationProvider):
    """Production revalidation provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_path_invalidator(self, settings: Settings) -> PathInvalidator:
        """Provide HTTP revalidation client.

        Raises:
            ConfigurationError: If revalidation is enabled in production
                without a real secret
        """
        config = settings.revalidation
        if (
            config.enabled
            and settings.environment == "production"
            and config.secret == "CHANGE_ME_IN_PRODUCTION"
        ):
            raise ConfigurationError(
                "REVALIDATION__SECRET", "must be set when revalidation is enabled"
            )

        return HttpRevalidationClient(
            frontend_url=settings.frontend_url,
            endpoint=config.endpoint,
            secret=config.secret,
            timeout=config.timeout,
            enabled=config.enabled,
        )
