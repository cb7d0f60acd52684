"""Get Message Query."""

from dataclasses import dataclass
from typing import Optional
from message_api.application.common.interfaces import Query, QueryHandler
from message_api.domain.entities.message import Message
from message_api.domain.ports.repositories import MessageRepository
from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import OrganizationId


@dataclass(frozen=True)
class GetMessageQuery(Query[Optional[Message]]):
    organization_id: OrganizationId
    message_id: MessageId


class GetMessageHandler(QueryHandler[Optional[Message]]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: GetMessageQuery) -> Optional[Message]:
        return await self._message_repository.get_by_id(
            query.organization_id, query.message_id
        )
