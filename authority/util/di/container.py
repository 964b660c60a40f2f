"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from authority.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    The container is the owner of the discovery state: resolve
    InstanceDiscoveryService from it once per process and share it.

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances)
