"""
In-Memory Message Repository.

Process-local MessageRepository used for development and tests.

Notes:
- Records live in a dict keyed by message id; iteration order is insertion order
- Entities are copied on the way in and out, so a caller holding a returned
  Message cannot change stored state without calling update()
- No awaits happen between reading and writing the dict, so each call is
  atomic on the event loop
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from orgmessages.domain.entities.message import Message
from orgmessages.domain.ports.repositories import MessageRepository
from orgmessages.domain.value_objects.message_id import MessageId
from orgmessages.domain.value_objects.organization_id import OrganizationId

logger = logging.getLogger(__name__)


class InMemoryMessageRepository(MessageRepository):
    _messages: dict[str, Message]

    def __init__(self):
        self._messages = {}

    def _find(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> Optional[Message]:
        message = self._messages.get(message_id.value)
        if message and message.organization_id == organization_id:
            return message
        return None

    async def get_all(self, organization_id: OrganizationId) -> list[Message]:
        return [
            replace(message)
            for message in self._messages.values()
            if message.organization_id == organization_id
        ]

    async def get_by_id(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> Optional[Message]:
        message = self._find(organization_id, message_id)
        return replace(message) if message else None

    async def get_by_title(
        self, organization_id: OrganizationId, title: str
    ) -> Optional[Message]:
        for message in self._messages.values():
            if message.organization_id == organization_id and message.title == title:
                return replace(message)
        return None

    async def create(self, message: Message) -> Message:
        stored = replace(
            message,
            id=MessageId(str(uuid4())),
            created_at=datetime.now(timezone.utc),
            updated_at=None,
        )
        self._messages[stored.id.value] = stored
        logger.debug(
            f"[InMemoryRepo] Created message {stored.id} for org {stored.organization_id}"
        )
        return replace(stored)

    async def update(self, message: Message) -> Optional[Message]:
        if message.id is None:
            return None
        current = self._find(message.organization_id, message.id)
        if not current:
            return None

        stored = replace(
            current,
            title=message.title,
            content=message.content,
            is_active=message.is_active,
            updated_at=datetime.now(timezone.utc),
        )
        self._messages[stored.id.value] = stored
        logger.debug(f"[InMemoryRepo] Updated message {stored.id}")
        return replace(stored)

    async def delete(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> bool:
        if not self._find(organization_id, message_id):
            return False
        del self._messages[message_id.value]
        logger.debug(f"[InMemoryRepo] Deleted message {message_id}")
        return True
