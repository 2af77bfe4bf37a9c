"""Application services."""

from orgmessages.application.services.message_service import MessageService

__all__ = [
    "MessageService",
]
