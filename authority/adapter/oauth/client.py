"""Instance discovery transport over HTTP.

Performs the GET against the discovery endpoint and turns the provider's
answer into either an InstanceDiscoveryResponse or a ServiceError.
"""

import asyncio

import httpx
import logfire
from pydantic import ValidationError

from authority.adapter.error import ServiceError, TransportError
from authority.domain.service.instance_discovery import DiscoveryTransport
from authority.domain.value import InstanceDiscoveryResponse, RequestContext

SERVICE_RETURNED_ERROR = "service_returned_error"


class HttpxDiscoveryTransport(DiscoveryTransport):
    """Discovery transport backed by httpx."""

    def __init__(self, timeout: float = 30.0) -> None:
        """Initialize transport.

        Args:
            timeout: Request timeout in seconds
        """
        self.timeout = timeout

    async def get_instance_discovery(
        self, url: str, context: RequestContext
    ) -> InstanceDiscoveryResponse:
        """Fetch and parse an instance discovery document.

        Args:
            url: Fully formed discovery URL
            context: Request trace context; its correlation id is sent as
                the client-request-id header

        Returns:
            Parsed discovery response

        Raises:
            ServiceError: If the provider answered with a non-success status
            TransportError: If the request failed or the body is malformed
        """
        headers = {
            "Accept": "application/json",
            "client-request-id": str(context.correlation_id),
            "return-client-request-id": "true",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, headers=headers)
        except httpx.HTTPError as e:
            logfire.error(
                "Instance discovery HTTP error",
                url=url,
                correlation_id=str(context.correlation_id),
                error=str(e),
            )
            raise TransportError(f"HTTP error during instance discovery: {e}") from e

        if not response.is_success:
            raise self._service_error(response, context)

        try:
            return InstanceDiscoveryResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise TransportError(f"Malformed instance discovery response: {e}") from e

    @staticmethod
    def _service_error(response: httpx.Response, context: RequestContext) -> ServiceError:
        """Build a ServiceError from an error response.

        Bodies look like ``{"error": "invalid_instance", "error_description": "..."}``.
        Bodies that cannot be parsed map to ``service_returned_error``.
        """
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and body.get("error"):
            error = ServiceError(
                error_code=body["error"],
                status_code=response.status_code,
                description=body.get("error_description"),
                correlation_id=body.get("correlation_id"),
            )
        else:
            error = ServiceError(
                error_code=SERVICE_RETURNED_ERROR,
                status_code=response.status_code,
                description=response.text or None,
            )

        logfire.error(
            "Instance discovery request failed",
            status_code=response.status_code,
            error_code=error.error_code,
            correlation_id=str(context.correlation_id),
        )
        return error


class MockDiscoveryTransport(DiscoveryTransport):
    """Mock discovery transport for testing.

    Returns a fixed response (or raises a fixed error) without network access
    and records every URL it was asked for.
    """

    def __init__(
        self,
        response: InstanceDiscoveryResponse | dict | None = None,
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        """Initialize mock transport.

        Args:
            response: Response to return; dicts are parsed as discovery JSON
            error: Exception to raise instead of returning a response
            delay: Seconds to sleep before answering, to let callers pile up
        """
        if isinstance(response, dict):
            response = InstanceDiscoveryResponse.model_validate(response)
        self.response = response if response is not None else InstanceDiscoveryResponse()
        self.error = error
        self.delay = delay
        self.requested_urls: list[str] = []

    @property
    def call_count(self) -> int:
        return len(self.requested_urls)

    async def get_instance_discovery(
        self, url: str, context: RequestContext
    ) -> InstanceDiscoveryResponse:
        """Return the configured response."""
        self.requested_urls.append(url)
        await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.response
