"""
DOMAIN SERVICES - Pure domain logic (no I/O)
"""

from orgmessages.domain.services.message_validator import (
    FieldErrors,
    validate_message,
)

__all__ = [
    "FieldErrors",
    "validate_message",
]
