"""Repository interfaces for authority discovery.

Interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from authority.domain.repository.metadata_cache import MetadataCache

__all__ = [
    "MetadataCache",
]
