"""Shared application types."""

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

__all__ = [
    "Conflict",
    "Created",
    "CreateResult",
    "Deleted",
    "DeleteResult",
    "NotFound",
    "Updated",
    "UpdateResult",
    "ValidationError",
]
