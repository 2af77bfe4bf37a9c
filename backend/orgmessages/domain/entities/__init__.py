"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from orgmessages.domain.entities.message import Message

__all__ = [
    "Message",
]
