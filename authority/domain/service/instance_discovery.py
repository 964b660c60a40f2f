"""Instance discovery domain service."""

import asyncio

import logfire
from pydantic import BaseModel, ConfigDict

from authority.domain.error import (
    AuthorityNotInValidListError,
    AuthorityValidationFailedError,
    DiscoveryServiceError,
)
from authority.domain.repository import MetadataCache
from authority.domain.value import (
    AuthorityUri,
    InstanceDiscoveryResponse,
    MetadataEntry,
    RequestContext,
)

from .base import Service
from .endpoint import EndpointFormatter, as_authority
from .whitelist import WhitelistRegistry

INVALID_INSTANCE = "invalid_instance"


class DiscoveryTransport:
    """Transport for the instance discovery endpoint."""

    async def get_instance_discovery(
        self, url: str, context: RequestContext
    ) -> InstanceDiscoveryResponse:
        """Fetch and parse an instance discovery document.

        Args:
            url: Fully formed discovery URL
            context: Request trace context

        Returns:
            Parsed discovery response

        Raises:
            DiscoveryServiceError: If the provider answered with an error response
        """
        raise NotImplementedError


class DiscoveryOutcome(BaseModel):
    """Result of one discovery call: a response or a provider error."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    response: InstanceDiscoveryResponse | None = None
    service_error: DiscoveryServiceError | None = None


class InstanceDiscoveryService(Service):
    """Resolves authority metadata and keeps it cached.

    Cache hits are served without synchronization. Misses go through a
    single lock shared by every authority, so at most one discovery call
    is in flight at any time and each host is discovered at most once.
    """

    def __init__(
        self,
        transport: DiscoveryTransport,
        cache: MetadataCache,
        whitelist: WhitelistRegistry,
        formatter: EndpointFormatter,
    ) -> None:
        """Initialize instance discovery service.

        Args:
            transport: Discovery endpoint transport
            cache: Metadata cache populated by discovery
            whitelist: Trusted host registry
            formatter: Discovery URL builder
        """
        self.transport = transport
        self.cache = cache
        self.whitelist = whitelist
        self.formatter = formatter
        self._lock = asyncio.Lock()

    async def get_metadata_entry(
        self,
        authority: AuthorityUri | str | None,
        validate_authority: bool,
        request_context: RequestContext | None = None,
    ) -> MetadataEntry:
        """Get the metadata entry for an authority, discovering it if needed.

        Args:
            authority: Authority URI, e.g. "https://login.microsoftonline.com/common/"
            validate_authority: Fail when the provider does not vouch for the authority
            request_context: Trace context for the discovery request

        Returns:
            Metadata entry for the authority host

        Raises:
            ValueError: If authority is None or not an absolute URI
            AuthorityNotInValidListError: If validating and the provider does not know the authority
            AuthorityValidationFailedError: If validating and the provider returned another error
        """
        if authority is None:
            raise ValueError("authority is required")
        authority = as_authority(authority)
        host = authority.host

        entry = self.cache.try_get(host)
        if entry is not None:
            return entry

        async with self._lock:
            suffix = self.whitelist.extend_for_federated_host(host)
            if suffix:
                logfire.info("Federated domain trusted", host=host, suffix=suffix)

            # Another caller may have populated the entry while we waited
            entry = self.cache.try_get(host)
            if entry is None:
                await self._discover(
                    authority, validate_authority, request_context or RequestContext()
                )
                entry = self.cache.try_get(host)

        return entry

    def add_metadata_entry(self, host: str) -> bool:
        """Cache a self-referential entry for a host unless it already has one.

        Args:
            host: Authority host

        Returns:
            True if the entry was inserted

        Raises:
            ValueError: If host is None
        """
        if host is None:
            raise ValueError("host is required")
        return self.cache.try_insert(host, MetadataEntry.for_host(host))

    async def _discover(
        self,
        authority: AuthorityUri,
        validate_authority: bool,
        context: RequestContext,
    ) -> None:
        """Run discovery for an authority and merge the result into the cache."""
        url = self.formatter.build_discovery_url(authority)

        with logfire.span(
            "instance_discovery",
            host=authority.host,
            correlation_id=str(context.correlation_id),
        ):
            outcome = await self._fetch(url, context)
            response = self._apply_validation_policy(
                authority, outcome, validate_authority
            )

            inserted = 0
            for entry in (response.metadata or []) if response else []:
                if entry is None:
                    continue
                for alias in entry.aliases or ():
                    if self.cache.try_insert(alias, entry):
                        inserted += 1

            self.add_metadata_entry(authority.host)

            logfire.info(
                "Instance discovery completed",
                host=authority.host,
                aliases_cached=inserted,
            )

    async def _fetch(self, url: str, context: RequestContext) -> DiscoveryOutcome:
        try:
            response = await self.transport.get_instance_discovery(url, context)
        except DiscoveryServiceError as e:
            return DiscoveryOutcome(service_error=e)
        return DiscoveryOutcome(response=response)

    def _apply_validation_policy(
        self,
        authority: AuthorityUri,
        outcome: DiscoveryOutcome,
        validate_authority: bool,
    ) -> InstanceDiscoveryResponse | None:
        """Decide whether a discovery outcome is fatal for this caller.

        Returns:
            The response to merge, or None when an error was absorbed

        Raises:
            AuthorityNotInValidListError: Unknown authority under validation
            AuthorityValidationFailedError: Other provider error under validation
        """
        error = outcome.service_error
        if error is not None:
            if validate_authority:
                if error.error_code == INVALID_INSTANCE:
                    raise AuthorityNotInValidListError(str(authority)) from error
                raise AuthorityValidationFailedError(str(authority)) from error

            logfire.warning(
                "Instance discovery failed, continuing without authority validation",
                host=authority.host,
                error_code=error.error_code,
                status_code=error.status_code,
            )
            return None

        if validate_authority and outcome.response.tenant_discovery_endpoint is None:
            raise AuthorityNotInValidListError(str(authority))

        return outcome.response
