"""Mock providers for testing."""

from .transport import MockTransportProvider
from .container import build_test_container

__all__ = [
    "MockTransportProvider",
    "build_test_container",
]
