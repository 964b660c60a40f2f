"""Test configuration and fixtures."""

import logfire
import pytest

from tests.documents import standard_discovery_document

# Keep Logfire local and silent during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def discovery_document() -> dict:
    """Standard five-region discovery document."""
    return standard_discovery_document()
