"""Domain value objects for authority instance discovery."""

from urllib.parse import urlsplit
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator

from authority.domain.value.common import RootValueObject, ValueObject


class AuthorityUri(RootValueObject[str]):
    """Identity provider authority, e.g. ``https://login.microsoftonline.com/common/``.

    Only absolute URIs with a host are accepted. The tenant and virtual
    directory segments are taken from the path as-is.
    """

    @field_validator("root")
    @classmethod
    def validate_absolute_uri(cls, v: str) -> str:
        """Validate the authority is an absolute URI with a host."""
        parts = urlsplit(v)
        if not parts.scheme or not parts.hostname:
            raise ValueError("Authority must be an absolute URI with a host")
        return v

    @property
    def host(self) -> str:
        """Lower-cased host name without port.

        IPv6 literals keep their brackets so the host can be put back into a URL.
        """
        hostname = urlsplit(self.root).hostname or ""
        if ":" in hostname:
            return f"[{hostname}]"
        return hostname

    @property
    def segments(self) -> list[str]:
        """Path segments, each keeping its trailing separator.

        ``/tenant/`` gives ``["/", "tenant/"]`` and ``/a/b`` gives
        ``["/", "a/", "b"]``.
        """
        parts = (urlsplit(self.root).path or "/").split("/")
        segments = ["/"] + [p + "/" for p in parts[1:-1]]
        if parts[-1]:
            segments.append(parts[-1])
        return segments

    @property
    def tenant(self) -> str:
        """Last path segment without its trailing separator."""
        return self.segments[-1].rstrip("/")

    @property
    def virtual_directory(self) -> str:
        """First path segment without its trailing separator."""
        segments = self.segments
        return segments[1].rstrip("/") if len(segments) > 1 else ""


class MetadataEntry(ValueObject):
    """One equivalence class of authority hosts.

    A single instance is shared by every alias key in the metadata cache.

    Attributes:
        preferred_network: Host to use for outbound network calls
        preferred_cache: Host to use as the canonical token cache key
        aliases: Hosts considered equivalent to this entry

    The preferred hosts may be missing from a provider document; the
    aliases of such an entry are still cached.
    """

    preferred_network: str | None = None
    preferred_cache: str | None = None
    aliases: tuple[str, ...] | None = None

    @classmethod
    def for_host(cls, host: str) -> "MetadataEntry":
        """Build a self-referential entry for a host nobody vouched for."""
        return cls(preferred_network=host, preferred_cache=host, aliases=None)


class InstanceDiscoveryResponse(BaseModel):
    """Body of the ``common/discovery/instance`` endpoint.

    Attributes:
        tenant_discovery_endpoint: OpenID configuration URL for the tenant;
            absent when the provider does not recognize the authority
        metadata: Alias groups known to the provider
    """

    tenant_discovery_endpoint: str | None = None
    metadata: list[MetadataEntry | None] | None = None


class RequestContext(ValueObject):
    """Per-request trace context passed down to the transport."""

    correlation_id: UUID = Field(default_factory=uuid4)
