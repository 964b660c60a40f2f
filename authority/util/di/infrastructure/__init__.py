"""Infrastructure providers."""

# Import bases
from .transport import TransportProvider

# Import implementations (needed for __subclasses__())
from .transport import ProdTransportProvider  # noqa: F401

__all__ = [
    "ProdTransportProvider",
    "TransportProvider",
]
