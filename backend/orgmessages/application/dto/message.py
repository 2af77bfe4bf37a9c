"""Message DTOs for API request/response."""

from __future__ import annotations
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from orgmessages.domain.entities.message import Message


class CreateMessageRequest(BaseModel):
    # Optional so missing fields reach the domain validator
    title: Optional[str] = None
    content: Optional[str] = None


class UpdateMessageRequest(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    is_active: bool = True


class MessageDTO(BaseModel):
    id: str
    organization_id: str
    title: str
    content: str
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, message: Message) -> MessageDTO:
        return cls(
            id=message.id.value,
            organization_id=message.organization_id.value,
            title=message.title,
            content=message.content,
            is_active=message.is_active,
            created_at=message.created_at,
            updated_at=message.updated_at,
        )
