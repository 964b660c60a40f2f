"""Domain layer DI providers."""

from dishka import Scope, provide

from authority.config import DiscoverySettings
from authority.domain.repository import MetadataCache
from authority.domain.service import (
    DiscoveryTransport,
    EndpointFormatter,
    InstanceDiscoveryService,
    WhitelistRegistry,
)
from authority.persistence.repository.inmemory import InMemoryMetadataCache
from authority.util.di.base import ProviderBase
from authority.util.error import ConfigurationError


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Everything here is APP-scoped: the whitelist, the metadata cache and the
    discovery lock live as long as the container, so every consumer shares
    one discovery state.
    """

    scope = Scope.APP

    @provide
    def get_whitelist_registry(self) -> WhitelistRegistry:
        """Provide trusted host registry."""
        return WhitelistRegistry()

    @provide
    def get_metadata_cache(self) -> MetadataCache:
        """Provide metadata cache."""
        return InMemoryMetadataCache()

    @provide
    def get_endpoint_formatter(
        self, whitelist: WhitelistRegistry, discovery_settings: DiscoverySettings
    ) -> EndpointFormatter:
        """Provide discovery endpoint formatter.

        Raises:
            ConfigurationError: If the default trusted authority is not a bare host
        """
        default_authority = discovery_settings.default_trusted_authority
        if not default_authority or "/" in default_authority:
            raise ConfigurationError(
                f"Default trusted authority must be a host name, got {default_authority!r}"
            )

        return EndpointFormatter(
            whitelist=whitelist,
            default_trusted_authority=default_authority,
            api_version=discovery_settings.api_version,
        )

    @provide
    def get_instance_discovery_service(
        self,
        transport: DiscoveryTransport,
        cache: MetadataCache,
        whitelist: WhitelistRegistry,
        formatter: EndpointFormatter,
    ) -> InstanceDiscoveryService:
        """Provide instance discovery service."""
        return InstanceDiscoveryService(
            transport=transport,
            cache=cache,
            whitelist=whitelist,
            formatter=formatter,
        )
