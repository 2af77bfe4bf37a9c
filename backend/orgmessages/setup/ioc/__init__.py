"""Dishka DI container."""

from orgmessages.setup.ioc.container import (
    AppProvider,
    InMemoryRepositoryProvider,
    create_container,
)

__all__ = [
    "AppProvider",
    "InMemoryRepositoryProvider",
    "create_container",
]
