"""Domain services."""

from .base import Service
from .endpoint import EndpointFormatter
from .instance_discovery import (
    DiscoveryOutcome,
    DiscoveryTransport,
    InstanceDiscoveryService,
)
from .whitelist import STATIC_TRUSTED_HOSTS, WhitelistRegistry

__all__ = [
    "DiscoveryOutcome",
    "DiscoveryTransport",
    "EndpointFormatter",
    "InstanceDiscoveryService",
    "Service",
    "STATIC_TRUSTED_HOSTS",
    "WhitelistRegistry",
]
