"""Discovery and authorization endpoint construction."""

from authority.config import DEFAULT_TRUSTED_AUTHORITY
from authority.domain.value import AuthorityUri

from .base import Service
from .whitelist import WhitelistRegistry

DISCOVERY_URL_TEMPLATE = (
    "https://{base}/common/discovery/instance"
    "?api-version={api_version}&authorization_endpoint={authorization_endpoint}"
)


def as_authority(authority: AuthorityUri | str) -> AuthorityUri:
    """Coerce a string into an AuthorityUri.

    Raises:
        ValueError: If the string is not an absolute URI with a host
    """
    if isinstance(authority, AuthorityUri):
        return authority
    return AuthorityUri(authority)


class EndpointFormatter(Service):
    """Builds the URLs used during instance discovery.

    The discovery request is sent to the queried host only when that host
    is trusted. Anything else is routed through the default trusted
    authority, so an untrusted host never gets to vouch for itself.
    """

    def __init__(
        self,
        whitelist: WhitelistRegistry,
        default_trusted_authority: str = DEFAULT_TRUSTED_AUTHORITY,
        api_version: str = "1.1",
    ) -> None:
        """Initialize formatter.

        Args:
            whitelist: Registry deciding which hosts are trusted
            default_trusted_authority: Host used to discover untrusted authorities
            api_version: Discovery API version
        """
        self.whitelist = whitelist
        self.default_trusted_authority = default_trusted_authority
        self.api_version = api_version

    @staticmethod
    def build_authorization_endpoint(host: str, tenant: str) -> str:
        """Format the authorize endpoint for a host and tenant.

        The tenant is used as-is and must already be a valid path segment.
        """
        return f"https://{host}/{tenant}/oauth2/authorize"

    @staticmethod
    def extract_tenant(authority: AuthorityUri | str) -> str:
        """Return the last path segment of the authority, without trailing '/'."""
        return as_authority(authority).tenant

    def resolve_cache_key_host(self, authority: AuthorityUri | str) -> str:
        """Return the host to key discovery by.

        Federated hosts serve many tenants from one host, so their key also
        carries the first path segment (``host/virtual-directory``).
        """
        authority = as_authority(authority)
        if self.whitelist.matches_dynamic_suffix(authority.host):
            return f"{authority.host}/{authority.virtual_directory}"
        return authority.host

    def build_discovery_url(self, authority: AuthorityUri | str) -> str:
        """Build the instance discovery URL for an authority.

        Example:
            >>> formatter.build_discovery_url("https://login.microsoftonline.com/common/")
            "https://login.microsoftonline.com/common/discovery/instance?api-version=1.1&authorization_endpoint=https://login.microsoftonline.com/common/oauth2/authorize"
        """
        authority = as_authority(authority)
        if self.whitelist.is_trusted(authority.host):
            base = self.resolve_cache_key_host(authority)
        else:
            base = self.default_trusted_authority

        return DISCOVERY_URL_TEMPLATE.format(
            base=base,
            api_version=self.api_version,
            authorization_endpoint=self.build_authorization_endpoint(
                authority.host, authority.tenant
            ),
        )
