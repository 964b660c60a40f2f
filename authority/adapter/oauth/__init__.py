"""OAuth instance discovery transport."""

from .client import HttpxDiscoveryTransport, MockDiscoveryTransport

__all__ = [
    "HttpxDiscoveryTransport",
    "MockDiscoveryTransport",
]
