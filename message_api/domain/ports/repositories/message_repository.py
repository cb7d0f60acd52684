"""
Message Repository Port - Interface for message persistence.
Implementation: message_api/infrastructure/persistence/in_memory_message_repository.py

Every lookup is scoped to an organization. Absence is reported as None or
False; anything else an implementation raises is an infrastructure failure.
"""

from abc import ABC, abstractmethod
from typing import Optional

from message_api.domain.entities.message import Message
from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import OrganizationId


class MessageRepository(ABC):
    @abstractmethod
    async def get_by_id(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> Optional[Message]: ...

    @abstractmethod
    async def get_by_title(
        self, organization_id: OrganizationId, title: str
    ) -> Optional[Message]: ...

    @abstractmethod
    async def get_by_organization(
        self, organization_id: OrganizationId
    ) -> list[Message]: ...

    @abstractmethod
    async def insert(self, message: Message) -> Message: ...

    @abstractmethod
    async def update(self, message: Message) -> Message: ...

    @abstractmethod
    async def delete(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> bool: ...
