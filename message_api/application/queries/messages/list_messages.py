"""
List Messages Query.

An empty list is a valid answer here; deciding whether it means
"not found" is up to the caller.
"""

from dataclasses import dataclass
from message_api.application.common.interfaces import Query, QueryHandler
from message_api.domain.entities.message import Message
from message_api.domain.ports.repositories import MessageRepository
from message_api.domain.value_objects.organization_id import OrganizationId


@dataclass(frozen=True)
class ListMessagesQuery(Query[list[Message]]):
    organization_id: OrganizationId


class ListMessagesHandler(QueryHandler[list[Message]]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: ListMessagesQuery) -> list[Message]:
        return await self._message_repository.get_by_organization(
            query.organization_id
        )
