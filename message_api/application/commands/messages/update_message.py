"""
Update Message Command.

Check order: existence, active state, field validation, title uniqueness.
An inactive message is rejected before its payload is even looked at.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from message_api.application.common.interfaces import Command, CommandHandler
from message_api.application.common.results import (
    MESSAGE_NOT_FOUND,
    Conflict,
    MessageResult,
    NotFound,
    Updated,
    ValidationError,
)
from message_api.domain.ports.repositories import MessageRepository
from message_api.domain.services import validate_message_fields
from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import OrganizationId

logger = logging.getLogger(__name__)

INACTIVE_UPDATE = "Cannot update an inactive message."
DUPLICATE_TITLE = "A message with this title already exists."


@dataclass(frozen=True)
class UpdateMessageCommand(Command[MessageResult]):
    organization_id: OrganizationId
    message_id: MessageId
    title: Optional[str]
    content: Optional[str]
    is_active: bool = True


class UpdateMessageHandler(CommandHandler[MessageResult]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: UpdateMessageCommand) -> MessageResult:
        existing = await self._message_repository.get_by_id(
            command.organization_id, command.message_id
        )
        if not existing:
            return NotFound(MESSAGE_NOT_FOUND)

        if not existing.is_active:
            logger.info(f"[UpdateMessage] Message {existing.id} is inactive")
            return Conflict(INACTIVE_UPDATE)

        errors = validate_message_fields(command.title, command.content)
        if errors:
            return ValidationError(errors)

        if existing.title != command.title:
            other = await self._message_repository.get_by_title(
                command.organization_id, command.title
            )
            if other:
                logger.info(
                    f"[UpdateMessage] Title taken in org {command.organization_id}"
                )
                return Conflict(DUPLICATE_TITLE)

        existing.revise(
            title=command.title,
            content=command.content,
            is_active=command.is_active,
        )
        await self._message_repository.update(existing)

        logger.info(
            f"[UpdateMessage] Updated message {existing.id} (active={existing.is_active})"
        )
        return Updated()
