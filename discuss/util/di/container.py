"""Dependency injection container."""

from dishka import Container, make_container

from discuss.config import Settings
from discuss.util.di import PROVIDERS, get_provider
from discuss.util.logging import setup_logging
from discuss.util.observability import configure_logfire


def create_container() -> Container:
    """Build production container (all prod implementations).

    Logging and Logfire are configured first so container construction is
    already observed. Settings are loaded from environment variables.

    Returns:
        Configured DI container with production providers
    """
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_container(*provider_instances)
