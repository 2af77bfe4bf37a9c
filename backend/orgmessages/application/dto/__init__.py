"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- message.py → MessageDTO, CreateMessageRequest, UpdateMessageRequest

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from orgmessages.application.dto.message import (
    CreateMessageRequest,
    MessageDTO,
    UpdateMessageRequest,
)

__all__ = [
    "CreateMessageRequest",
    "MessageDTO",
    "UpdateMessageRequest",
]
