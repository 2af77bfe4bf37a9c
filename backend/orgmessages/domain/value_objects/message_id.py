"""
MessageId Value Object - UUID wrapper for message identity.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class MessageId:
    value: str  # message id, presented as UUID string

    def __post_init__(self):
        if not self.value:
            raise ValueError("MessageId cannot be empty")

        UUID(self.value)  # Validate UUID format

    def __str__(self) -> str:
        return self.value
