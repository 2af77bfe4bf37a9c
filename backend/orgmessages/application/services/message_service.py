"""
Message Service - create, update, delete, get and list messages.

Flow per write operation:
    validate fields → look up existing state → enforce rules → repository call
                                                                    ↓
                                                        result variant ←

Notes:
- Stateless: one instance per request, receives the repository via __init__ (DI)
- Business outcomes are returned as result variants, never raised
- Repository exceptions propagate unchanged
- Title uniqueness is checked against every message in the organization,
  inactive ones included
- The duplicate-title check and the write are separate repository calls;
  atomicity is left to the repository's own constraints
"""

from typing import Optional

from orgmessages.application.common.results import (
    Conflict,
    Created,
    CreateResult,
    Deleted,
    DeleteResult,
    NotFound,
    Updated,
    UpdateResult,
    ValidationError,
)
from orgmessages.domain.entities.message import Message
from orgmessages.domain.ports.repositories import MessageRepository
from orgmessages.domain.services.message_validator import (
    IS_ACTIVE_FIELD,
    validate_message,
)
from orgmessages.domain.value_objects.message_id import MessageId
from orgmessages.domain.value_objects.organization_id import OrganizationId

CANNOT_UPDATE_INACTIVE = "Cannot update inactive messages"
CANNOT_DELETE_INACTIVE = "Cannot delete inactive messages"
TITLE_ALREADY_EXISTS = "A message with title '{}' already exists in this organization"
MESSAGE_NOT_FOUND = "Message with id '{}' not found"


class MessageService:
    _message_repository: MessageRepository

    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def create_message(
        self,
        organization_id: OrganizationId,
        title: Optional[str],
        content: Optional[str],
    ) -> CreateResult:
        errors = validate_message(title, content)
        if errors:
            return ValidationError(errors)

        existing = await self._message_repository.get_by_title(organization_id, title)
        if existing:
            return Conflict(TITLE_ALREADY_EXISTS.format(title))

        message = Message.create(
            organization_id=organization_id, title=title, content=content
        )
        created = await self._message_repository.create(message)
        return Created(created)

    async def update_message(
        self,
        organization_id: OrganizationId,
        message_id: MessageId,
        title: Optional[str],
        content: Optional[str],
        is_active: bool,
    ) -> UpdateResult:
        errors = validate_message(title, content)
        if errors:
            return ValidationError(errors)

        message = await self._message_repository.get_by_id(organization_id, message_id)
        if not message:
            return NotFound(MESSAGE_NOT_FOUND.format(message_id))

        if not message.is_active:
            return ValidationError({IS_ACTIVE_FIELD: [CANNOT_UPDATE_INACTIVE]})

        duplicate = await self._message_repository.get_by_title(organization_id, title)
        if duplicate and duplicate.id != message_id:
            return Conflict(TITLE_ALREADY_EXISTS.format(title))

        message.apply_changes(title=title, content=content, is_active=is_active)
        updated = await self._message_repository.update(message)
        if not updated:
            return NotFound(MESSAGE_NOT_FOUND.format(message_id))

        return Updated()

    async def delete_message(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> DeleteResult:
        message = await self._message_repository.get_by_id(organization_id, message_id)
        if not message:
            return NotFound(MESSAGE_NOT_FOUND.format(message_id))

        if not message.is_active:
            return ValidationError({IS_ACTIVE_FIELD: [CANNOT_DELETE_INACTIVE]})

        deleted = await self._message_repository.delete(organization_id, message_id)
        if not deleted:
            return NotFound(MESSAGE_NOT_FOUND.format(message_id))

        return Deleted()

    async def get_message(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> Optional[Message]:
        return await self._message_repository.get_by_id(organization_id, message_id)

    async def list_messages(self, organization_id: OrganizationId) -> list[Message]:
        return await self._message_repository.get_all(organization_id)
