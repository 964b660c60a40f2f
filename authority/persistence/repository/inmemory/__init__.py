"""In-memory repository implementations."""

from authority.persistence.repository.inmemory.metadata_cache import (
    InMemoryMetadataCache,
)

__all__ = [
    "InMemoryMetadataCache",
]
