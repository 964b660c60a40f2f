"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the discovery and trust logic; they are built once
    by the composition root and shared by every caller.
    """

    pass
