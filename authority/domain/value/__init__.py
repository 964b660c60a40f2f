"""Domain value objects for authority instance discovery."""

from authority.domain.value.types import (
    AuthorityUri,
    InstanceDiscoveryResponse,
    MetadataEntry,
    RequestContext,
)

__all__ = [
    "AuthorityUri",
    "InstanceDiscoveryResponse",
    "MetadataEntry",
    "RequestContext",
]
