"""
Result variants returned by message use cases.

Each operation returns exactly one variant instead of raising for business
outcomes. The presentation layer matches on the variant and picks the
HTTP response:

    Created          → 201
    Updated, Deleted → 204
    NotFound         → 404
    ValidationError  → 400
    Conflict         → 409

Usage:
    match await service.create_message(org_id, title, content):
        case Created(value=message): ...
        case ValidationError(errors=errors): ...
        case Conflict(message=text): ...
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

from orgmessages.domain.entities.message import Message

T = TypeVar("T")


@dataclass(frozen=True)
class Created(Generic[T]):
    value: T


@dataclass(frozen=True)
class Updated:
    pass


@dataclass(frozen=True)
class Deleted:
    pass


@dataclass(frozen=True)
class NotFound:
    message: str


@dataclass(frozen=True)
class ValidationError:
    errors: dict[str, list[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class Conflict:
    message: str


CreateResult = Union[Created[Message], ValidationError, Conflict]
UpdateResult = Union[Updated, NotFound, ValidationError, Conflict]
DeleteResult = Union[Deleted, NotFound, ValidationError]
