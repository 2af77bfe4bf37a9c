"""
Message Entity - A titled piece of content owned by an organization.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from orgmessages.domain.value_objects.message_id import MessageId
from orgmessages.domain.value_objects.organization_id import OrganizationId


@dataclass
class Message:
    organization_id: OrganizationId
    title: str
    content: str
    is_active: bool = True
    id: Optional[MessageId] = None  # assigned by the repository on create
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        organization_id: OrganizationId,
        title: str,
        content: str,
    ) -> Message:
        """Factory method for a new, not yet persisted, active message."""
        return cls(
            organization_id=organization_id,
            title=title,
            content=content,
            is_active=True,
        )

    def apply_changes(self, title: str, content: str, is_active: bool) -> None:
        self.title = title
        self.content = content
        self.is_active = is_active
