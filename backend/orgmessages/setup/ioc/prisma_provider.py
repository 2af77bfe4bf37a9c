"""
Prisma-backed repository provider.

Imported only when MESSAGE_STORE=prisma, because the Prisma client package
exists only after `prisma generate --schema prisma/schema.prisma`.
"""

from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from orgmessages.config.settings import Config
from orgmessages.domain.ports.repositories import MessageRepository
from orgmessages.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)


class PrismaRepositoryProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = created ONCE, shared across all requests
        - disconnected when the container closes
        """
        if Config.DATABASE_URL:
            prisma = Prisma(datasource={"url": Config.DATABASE_URL})
        else:
            prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        """
        Provide MessageRepository implementation.

        - Return type is ABSTRACT (MessageRepository)
        - Implementation is CONCRETE (PrismaMessageRepository)
        - Scope.REQUEST = new instance per HTTP request
        """
        return PrismaMessageRepository(prisma)
