"""Delete Message Command."""

import logging
from dataclasses import dataclass
from message_api.application.common.interfaces import Command, CommandHandler
from message_api.application.common.results import (
    MESSAGE_NOT_FOUND,
    Conflict,
    Deleted,
    MessageResult,
    NotFound,
)
from message_api.domain.ports.repositories import MessageRepository
from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import OrganizationId

logger = logging.getLogger(__name__)

INACTIVE_DELETE = "Cannot delete an inactive message."


@dataclass(frozen=True)
class DeleteMessageCommand(Command[MessageResult]):
    organization_id: OrganizationId
    message_id: MessageId


class DeleteMessageHandler(CommandHandler[MessageResult]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: DeleteMessageCommand) -> MessageResult:
        existing = await self._message_repository.get_by_id(
            command.organization_id, command.message_id
        )
        if not existing:
            return NotFound(MESSAGE_NOT_FOUND)

        if not existing.is_active:
            return Conflict(INACTIVE_DELETE)

        # Record may vanish between lookup and delete
        deleted = await self._message_repository.delete(
            command.organization_id, command.message_id
        )
        if not deleted:
            logger.warning(
                f"[DeleteMessage] Message {command.message_id} disappeared before delete"
            )
            return NotFound(MESSAGE_NOT_FOUND)

        logger.info(f"[DeleteMessage] Deleted message {command.message_id}")
        return Deleted()
