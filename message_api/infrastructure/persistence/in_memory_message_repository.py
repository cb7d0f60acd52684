"""
In-memory Message Repository Implementation.

Guidelines:
- Implements MessageRepository port from domain layer
- Records are keyed by (organization_id, message_id)
- Copies go in and copies come out, so callers mutating an entity never
  touch stored state until they call update()
- One instance lives for the whole application (registered as Scope.APP)

Known gap: the title uniqueness check in the handlers and the insert here are
two separate awaits. Two concurrent creates with the same title can both pass
the check. Nothing is persisted across restarts.
"""

import asyncio
import logging
from dataclasses import replace
from typing import Optional

from message_api.domain.entities.message import Message
from message_api.domain.ports.repositories.message_repository import MessageRepository
from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import OrganizationId

logger = logging.getLogger(__name__)

_Key = tuple[OrganizationId, MessageId]


class InMemoryMessageRepository(MessageRepository):
    """
    Dict-backed implementation of MessageRepository.

    Insertion order is preserved, so listings come back oldest first.
    """

    _records: dict[_Key, Message]

    def __init__(self):
        self._records = {}
        self._lock = asyncio.Lock()

    async def get_by_id(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> Optional[Message]:
        record = self._records.get((organization_id, message_id))
        return replace(record) if record else None

    async def get_by_title(
        self, organization_id: OrganizationId, title: str
    ) -> Optional[Message]:
        """Exact, case-sensitive title match inside one organization."""
        for record in self._records.values():
            if record.organization_id == organization_id and record.title == title:
                return replace(record)
        return None

    async def get_by_organization(
        self, organization_id: OrganizationId
    ) -> list[Message]:
        return [
            replace(record)
            for record in self._records.values()
            if record.organization_id == organization_id
        ]

    async def insert(self, message: Message) -> Message:
        async with self._lock:
            self._records[(message.organization_id, message.id)] = replace(message)
        logger.debug(f"[InMemoryRepo] Inserted message {message.id}")
        return message

    async def update(self, message: Message) -> Message:
        """Replace the stored record with the same id. Unknown ids are ignored."""
        key = (message.organization_id, message.id)
        async with self._lock:
            if key not in self._records:
                logger.warning(f"[InMemoryRepo] Update of unknown message {message.id}")
                return message
            self._records[key] = replace(message)
        return message

    async def delete(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> bool:
        async with self._lock:
            removed = self._records.pop((organization_id, message_id), None)
        return removed is not None

    def __len__(self) -> int:
        return len(self._records)
