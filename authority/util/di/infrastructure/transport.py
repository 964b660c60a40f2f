"""Discovery transport providers."""

from dishka import Scope, provide

from authority.adapter.oauth.client import HttpxDiscoveryTransport
from authority.config import DiscoverySettings
from authority.domain.service import DiscoveryTransport
from authority.util.di.base import ProviderBase


class TransportProvider(ProviderBase):
    """Discovery transport component base."""

    __mock_component__ = "transport"


class ProdTransportProvider(TransportProvider):
    """Production discovery transport provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_discovery_transport(
        self, discovery_settings: DiscoverySettings
    ) -> DiscoveryTransport:
        """Provide httpx discovery transport."""
        return HttpxDiscoveryTransport(timeout=discovery_settings.timeout)
