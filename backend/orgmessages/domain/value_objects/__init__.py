"""
VALUE OBJECTS - Immutable identity wrappers
"""

from orgmessages.domain.value_objects.message_id import MessageId
from orgmessages.domain.value_objects.organization_id import OrganizationId

__all__ = [
    "MessageId",
    "OrganizationId",
]
