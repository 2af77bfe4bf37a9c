"""
OrganizationId Value Object - tenant scope for every message operation.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class OrganizationId:
    value: str  # organization id, presented as UUID string

    def __post_init__(self):
        if not self.value or not self._is_valid_uuid(self.value):
            raise ValueError(f"Invalid organization ID (UUID): {self.value}")

    def _is_valid_uuid(self, value: str) -> bool:
        """Check if string is a valid UUID."""
        try:
            UUID(value)
            return True
        except ValueError:
            return False

    def __str__(self) -> str:
        return self.value
