"""
Create Message Command.

Steps:
1. Validate title and content (all field errors collected)
2. Reject a title already used inside the organization
3. Build the Message entity (new id, active, created now)
4. Insert via repository and return Created(message)
"""

import logging
from dataclasses import dataclass
from typing import Optional
from message_api.application.common.interfaces import Command, CommandHandler
from message_api.application.common.results import (
    Conflict,
    Created,
    MessageResult,
    ValidationError,
)
from message_api.domain.entities.message import Message
from message_api.domain.ports.repositories import MessageRepository
from message_api.domain.services import validate_message_fields
from message_api.domain.value_objects.organization_id import OrganizationId

logger = logging.getLogger(__name__)

DUPLICATE_TITLE = "A message with the same title already exists."


@dataclass(frozen=True)
class CreateMessageCommand(Command[MessageResult]):
    organization_id: OrganizationId
    title: Optional[str]
    content: Optional[str]


class CreateMessageHandler(CommandHandler[MessageResult]):
    _message_repository: MessageRepository

    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: CreateMessageCommand) -> MessageResult:
        errors = validate_message_fields(command.title, command.content)
        if errors:
            logger.info(
                f"[CreateMessage] Validation failed for org {command.organization_id}: "
                f"{sorted(errors)}"
            )
            return ValidationError(errors)

        existing = await self._message_repository.get_by_title(
            command.organization_id, command.title
        )
        if existing:
            logger.info(
                f"[CreateMessage] Duplicate title in org {command.organization_id}"
            )
            return Conflict(DUPLICATE_TITLE)

        message = Message.create(
            organization_id=command.organization_id,
            title=command.title,
            content=command.content,
        )
        await self._message_repository.insert(message)

        logger.info(
            f"[CreateMessage] Created message {message.id} in org {command.organization_id}"
        )
        return Created(message)
