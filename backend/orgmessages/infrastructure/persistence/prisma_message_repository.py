"""
Prisma Message Repository Implementation.

Guidelines:
- Implements MessageRepository port from domain layer
- Uses Prisma client (asyncio interface) for PostgreSQL operations
- Maps between Prisma models and domain entities
- All methods are async

Mapping:
- Prisma model fields: id, organization_id, title, content, is_active,
  created_at, updated_at (see prisma/schema.prisma)
- Domain entity: Message with value objects (MessageId, OrganizationId)
- Convert str -> MessageId, str -> OrganizationId when reading
- Convert MessageId.value, OrganizationId.value -> str when writing

The database assigns id and created_at on create. updated_at is written
explicitly on every update so it stays NULL until the first one.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from prisma import Prisma
from prisma.models import Message as PrismaMessage

from orgmessages.domain.entities.message import Message
from orgmessages.domain.ports.repositories import MessageRepository
from orgmessages.domain.value_objects.message_id import MessageId
from orgmessages.domain.value_objects.organization_id import OrganizationId

logger = logging.getLogger(__name__)


class PrismaMessageRepository(MessageRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaMessage) -> Message:
        """Map Prisma record to domain entity."""
        return Message(
            id=MessageId(record.id),
            organization_id=OrganizationId(record.organization_id),
            title=record.title,
            content=record.content,
            is_active=record.is_active,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def get_all(self, organization_id: OrganizationId) -> list[Message]:
        """Get all messages for an organization, oldest first."""
        records = await self._prisma.message.find_many(
            where={"organization_id": organization_id.value},
            order={"created_at": "asc"},
        )
        return [self._to_entity(record) for record in records]

    async def get_by_id(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> Optional[Message]:
        record = await self._prisma.message.find_first(
            where={
                "id": message_id.value,
                "organization_id": organization_id.value,
            }
        )
        return self._to_entity(record) if record else None

    async def get_by_title(
        self, organization_id: OrganizationId, title: str
    ) -> Optional[Message]:
        record = await self._prisma.message.find_first(
            where={
                "organization_id": organization_id.value,
                "title": title,
            }
        )
        return self._to_entity(record) if record else None

    async def create(self, message: Message) -> Message:
        record = await self._prisma.message.create(
            data={
                "organization_id": message.organization_id.value,
                "title": message.title,
                "content": message.content,
                "is_active": message.is_active,
            }
        )
        logger.info(
            f"[PrismaRepo] Created message {record.id} for org {record.organization_id}"
        )
        return self._to_entity(record)

    async def update(self, message: Message) -> Optional[Message]:
        """Update title, content and is_active. Returns None if the row is gone."""
        if message.id is None:
            return None

        count = await self._prisma.message.update_many(
            where={
                "id": message.id.value,
                "organization_id": message.organization_id.value,
            },
            data={
                "title": message.title,
                "content": message.content,
                "is_active": message.is_active,
                "updated_at": datetime.now(timezone.utc),
            },
        )
        if count == 0:
            logger.info(f"[PrismaRepo] Message {message.id} vanished before update")
            return None

        record = await self._prisma.message.find_unique(where={"id": message.id.value})
        return self._to_entity(record) if record else None

    async def delete(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> bool:
        """Delete message by ID. Returns True if deleted."""
        count = await self._prisma.message.delete_many(
            where={
                "id": message_id.value,
                "organization_id": organization_id.value,
            }
        )
        return count > 0
