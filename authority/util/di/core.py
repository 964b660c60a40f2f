"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from authority.config import DiscoverySettings, Settings
from authority.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_discovery_settings(self, settings: Settings) -> DiscoverySettings:
        """Provide instance discovery settings."""
        return settings.discovery
