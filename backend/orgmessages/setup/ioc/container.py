"""
Dishka DI Container Setup.

- Registers the message repository and MessageService
- Maps the abstract MessageRepository to a concrete implementation
- Manages lifecycle (APP = singleton, REQUEST = per-request)

Flow:
  Container → provides → InMemoryMessageRepository / PrismaMessageRepository
                                    ↓
                   MessageService (uses MessageRepository interface)

Store selection (Config.MESSAGE_STORE):
- "memory": one InMemoryMessageRepository shared by the whole app
- "prisma": one connected Prisma client per app, repository per request
"""

from typing import Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from orgmessages.application.services import MessageService
from orgmessages.config.settings import Config
from orgmessages.domain.ports.repositories import MessageRepository
from orgmessages.infrastructure.persistence import InMemoryMessageRepository

MEMORY_STORE = "memory"
PRISMA_STORE = "prisma"


class AppProvider(Provider):
    """Application services. Repository comes from a store provider."""

    @provide(scope=Scope.REQUEST)
    def get_message_service(
        self, message_repository: MessageRepository
    ) -> MessageService:
        """
        Provide MessageService.

        - Parameter asks for MessageRepository (abstract)
        - Dishka resolves it from whichever store provider is registered
        """
        return MessageService(message_repository)


class InMemoryRepositoryProvider(Provider):
    """
    Process-local store.

    Scope.APP so every request sees the same messages.
    """

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> MessageRepository:
        return InMemoryMessageRepository()


def create_container(store: Optional[str] = None) -> AsyncContainer:
    """
    Create and configure the DI container.

    Args:
        store: "memory" or "prisma". Defaults to Config.MESSAGE_STORE.
    """
    store = (store or Config.MESSAGE_STORE).lower()
    if store == MEMORY_STORE:
        repository_provider = InMemoryRepositoryProvider()
    elif store == PRISMA_STORE:
        from orgmessages.setup.ioc.prisma_provider import PrismaRepositoryProvider

        repository_provider = PrismaRepositoryProvider()
    else:
        raise ValueError(f"Unknown message store: {store}")

    return make_async_container(AppProvider(), repository_provider)
