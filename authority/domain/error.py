"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class AuthorityValidationError(DomainError):
    """Authority could not be confirmed by the identity provider.

    Raised only for callers that asked for authority validation. The
    originating provider error, if any, is chained as ``__cause__``.

    Attributes:
        error_code: Machine-readable reason
        authority: Host of the authority being resolved
    """

    error_code: str = "authority_validation_error"

    def __init__(self, authority: str, message: str | None = None):
        self.authority = authority
        super().__init__(message or f"{self.error_code}: {authority}")


class AuthorityNotInValidListError(AuthorityValidationError):
    """The provider does not vouch for the authority."""

    error_code = "authority_not_in_valid_list"

    def __init__(self, authority: str):
        super().__init__(
            authority,
            f"Authority {authority} is not in the list of valid addresses",
        )


class AuthorityValidationFailedError(AuthorityValidationError):
    """Authority validation failed for a reason other than an unknown instance."""

    error_code = "authority_validation_failed"

    def __init__(self, authority: str):
        super().__init__(authority, f"Authority validation failed for {authority}")


class DiscoveryServiceError(DomainError):
    """Identity provider answered the discovery request with an error.

    Transports raise this (or a subclass) so the discovery service can apply
    its validation policy without knowing how the request was made.

    Attributes:
        error_code: Provider error code (e.g. "invalid_instance")
        status_code: HTTP status of the response
        description: Provider error description, if any
        correlation_id: Correlation id echoed by the provider, if any
    """

    def __init__(
        self,
        error_code: str,
        status_code: int,
        description: str | None = None,
        correlation_id: str | None = None,
    ):
        self.error_code = error_code
        self.status_code = status_code
        self.description = description
        self.correlation_id = correlation_id
        super().__init__(
            f"{error_code} (HTTP {status_code})"
            + (f": {description}" if description else "")
        )
