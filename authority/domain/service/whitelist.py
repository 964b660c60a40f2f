"""Trusted authority hosts."""

from .base import Service

STATIC_TRUSTED_HOSTS: frozenset[str] = frozenset(
    {
        "login.windows.net",  # Microsoft Azure Worldwide, used when the queried host is not in this list
        "login.chinacloudapi.cn",  # Microsoft Azure China
        "login.microsoftonline.de",  # Microsoft Azure Blackforest
        "login-us.microsoftonline.com",  # Microsoft Azure US Government - Legacy
        "login.microsoftonline.us",  # Microsoft Azure US Government
        "login.microsoftonline.com",  # Microsoft Azure Worldwide
    }
)

FEDERATION_MARKER = ".dsts."


class WhitelistRegistry(Service):
    """Decides which authority hosts are trusted without a network round trip.

    Trust comes from a fixed list of production hosts plus domain suffixes
    learned at runtime from federated (dSTS) authorities. Suffixes are only
    ever appended, so a check that races with an append can at worst miss a
    suffix that is about to appear.
    """

    def __init__(self, static_hosts: frozenset[str] = STATIC_TRUSTED_HOSTS) -> None:
        """Initialize registry.

        Args:
            static_hosts: Hosts trusted from the start
        """
        self._static_hosts = frozenset(h.lower() for h in static_hosts)
        self._dynamic_suffixes: list[str] = []

    @property
    def static_hosts(self) -> frozenset[str]:
        return self._static_hosts

    @property
    def dynamic_domain_suffixes(self) -> tuple[str, ...]:
        return tuple(self._dynamic_suffixes)

    def is_trusted(self, host: str) -> bool:
        """Check whether a host is trusted.

        Args:
            host: Authority host

        Returns:
            True if the host is a static trusted host or ends with a learned
            federated suffix (both case-insensitive)
        """
        return host.lower() in self._static_hosts or self.matches_dynamic_suffix(host)

    def matches_dynamic_suffix(self, host: str) -> bool:
        """Check whether a host falls under a learned federated suffix."""
        host = host.lower()
        return any(host.endswith(suffix.lower()) for suffix in self.dynamic_domain_suffixes)

    def extend_for_federated_host(self, host: str) -> str | None:
        """Trust the parent domain of a federated host.

        For ``tenant.dsts.core.windows.net`` the suffix ``dsts.core.windows.net``
        is recorded, so every sibling under it becomes trusted. Must only be
        called while holding the discovery lock.

        Args:
            host: Authority host

        Returns:
            The newly recorded suffix, or None if nothing was added
        """
        index = host.lower().find(FEDERATION_MARKER)
        if index < 0 or self.matches_dynamic_suffix(host):
            return None

        suffix = host[index + 1 :]
        self._dynamic_suffixes.append(suffix)
        return suffix
