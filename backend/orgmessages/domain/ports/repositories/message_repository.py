"""
Message Repository Port - Interface for message persistence.
Implementations: orgmessages/infrastructure/persistence/
"""

from abc import ABC, abstractmethod
from typing import Optional

from orgmessages.domain.entities.message import Message
from orgmessages.domain.value_objects.message_id import MessageId
from orgmessages.domain.value_objects.organization_id import OrganizationId


class MessageRepository(ABC):
    @abstractmethod
    async def get_all(self, organization_id: OrganizationId) -> list[Message]: ...

    @abstractmethod
    async def get_by_id(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> Optional[Message]: ...

    @abstractmethod
    async def get_by_title(
        self, organization_id: OrganizationId, title: str
    ) -> Optional[Message]: ...

    @abstractmethod
    async def create(self, message: Message) -> Message:
        """Persist a new message. Assigns id and created_at."""
        ...

    @abstractmethod
    async def update(self, message: Message) -> Optional[Message]:
        """Persist changes. Returns None if the message no longer exists."""
        ...

    @abstractmethod
    async def delete(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> bool: ...
