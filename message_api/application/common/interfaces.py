"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class DeleteMessageCommand(Command[MessageResult]):
        organization_id: OrganizationId
        message_id: MessageId

    class DeleteMessageHandler(CommandHandler[MessageResult]):
        def __init__(self, message_repository: MessageRepository):
            self._message_repository = message_repository

        async def execute(self, command: DeleteMessageCommand) -> MessageResult:
            ...
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...


class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
