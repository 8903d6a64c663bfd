"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from threads.config import DatabaseSettings, PaginationSettings, Settings
from threads.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider, settings come from the environment and .env file."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_database_settings(self, settings: Settings) -> DatabaseSettings:
        """Provide database settings."""
        return settings.database

    @provide(scope=Scope.APP)
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        """Provide pagination settings."""
        return settings.pagination
