"""
Outcome variants returned by message commands.

Expected failures (bad input, missing record, broken business rule) are
values, not exceptions. Callers match on the concrete type:

    if isinstance(result, Created): ...
    elif isinstance(result, Conflict): ...

Only infrastructure failures raised by a repository propagate as exceptions.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

from message_api.domain.entities.message import Message

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
    reason: str


@dataclass(frozen=True)
class Conflict:
    reason: str


@dataclass(frozen=True)
class ValidationError:
    errors: dict[str, list[str]] = field(default_factory=dict)


MessageResult = Union[
    Created[Message], Updated, Deleted, NotFound, Conflict, ValidationError
]

MESSAGE_NOT_FOUND = "Message not found."
