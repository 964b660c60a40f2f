"""In-memory implementation of the metadata cache."""

from typing import Optional

from authority.domain.repository.metadata_cache import MetadataCache
from authority.domain.value import MetadataEntry


class InMemoryMetadataCache(MetadataCache):
    """Dict-backed metadata cache.

    Entries are stored by reference so that every alias of one discovery
    record points at the same object. ``dict.setdefault`` is a single
    atomic operation, so concurrent inserts for one key cannot both win.
    """

    def __init__(self) -> None:
        """Initialize empty cache."""
        self._entries: dict[str, MetadataEntry] = {}

    def try_get(self, host: str) -> Optional[MetadataEntry]:
        """Find the entry cached for a host."""
        return self._entries.get(host)

    def try_insert(self, host: str, entry: MetadataEntry) -> bool:
        """Insert an entry only if the host has none yet."""
        return self._entries.setdefault(host, entry) is entry

    def __contains__(self, host: object) -> bool:
        return host in self._entries

    def __len__(self) -> int:
        return len(self._entries)
