"""
Persistence Layer - MessageRepository implementations.

PrismaMessageRepository is imported from its own module so that the
generated Prisma client is only required when the prisma store is used.
"""

from orgmessages.infrastructure.persistence.in_memory_message_repository import (
    InMemoryMessageRepository,
)

__all__ = [
    "InMemoryMessageRepository",
]
