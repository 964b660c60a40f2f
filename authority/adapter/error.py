"""Infrastructure layer errors."""

from authority.domain.error import DiscoveryServiceError


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class ServiceError(ProviderError, DiscoveryServiceError):
    """Identity provider answered with an HTTP error response.

    Carries the same fields as DiscoveryServiceError (error_code,
    status_code, description, correlation_id).
    """

    pass


class TransportError(ProviderError):
    """Request failed before a provider error response was obtained.

    Covers connection failures, timeouts and malformed success bodies.
    """

    pass
