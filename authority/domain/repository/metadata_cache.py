"""Metadata cache interface."""

from abc import ABC, abstractmethod
from typing import Optional

from authority.domain.value import MetadataEntry


class MetadataCache(ABC):
    """Host to MetadataEntry mapping with first-write-wins insertion.

    Keys are host strings as received. Entries are never removed or
    replaced for the lifetime of the cache.
    """

    @abstractmethod
    def try_get(self, host: str) -> Optional[MetadataEntry]:
        """Find the entry cached for a host.

        Args:
            host: Authority host (or host/virtual-directory key)

        Returns:
            Cached entry if present, None otherwise
        """
        pass

    @abstractmethod
    def try_insert(self, host: str, entry: MetadataEntry) -> bool:
        """Insert an entry only if the host has none yet.

        Args:
            host: Cache key
            entry: Entry to store; stored by reference, not copied

        Returns:
            True if this call performed the insertion
        """
        pass

    @abstractmethod
    def __contains__(self, host: object) -> bool:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass
