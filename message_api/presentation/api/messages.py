"""
Messages API Router - FastAPI endpoints for organization messages.

- Thin layer: only handles HTTP concerns (request/response)
- Receives handlers via Dependency Injection (Dishka)
- Delegates business logic to Application layer handlers
- Maps every outcome variant to a status code and envelope

Flow:
  HTTP Request -> Router -> Command -> Handler -> Repository
                                         |
  HTTP Response <- Router <- Outcome <---+
"""

from logging import getLogger
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, Field
from message_api.application.commands.messages import (
    CreateMessageCommand,
    CreateMessageHandler,
    DeleteMessageCommand,
    DeleteMessageHandler,
    UpdateMessageCommand,
    UpdateMessageHandler,
)
from message_api.application.queries.messages import (
    GetMessageQuery,
    GetMessageHandler,
    ListMessagesQuery,
    ListMessagesHandler,
)
from message_api.application.common.results import (
    MESSAGE_NOT_FOUND,
    Conflict,
    Created,
    Deleted,
    MessageResult,
    NotFound,
    Updated,
    ValidationError,
)
from message_api.application.dto.message import MessageDTO
from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import OrganizationId
from message_api.presentation.api.responses import ResponseEnvelope, envelope_response
from message_api.config.settings import Config

logger = getLogger(__name__)


# ==================== REQUEST MODELS ====================


class CreateMessageRequest(BaseModel):
    """
    Request body for creating a message.

    Fields are optional here so that a missing value is reported as a field
    error by the business rules, not as a schema error.
    """

    title: Optional[str] = None
    content: Optional[str] = None


class UpdateMessageRequest(BaseModel):
    """
    Request body for updating a message.

    Omitting is_active keeps the message active; send false to deactivate.
    """

    title: Optional[str] = None
    content: Optional[str] = None
    is_active: bool = Field(
        default=True, description="Defaults to true when omitted"
    )


# ==================== OUTCOME MAPPING ====================


def to_response(
    result: MessageResult, action: str, success_status: int = status.HTTP_200_OK
) -> JSONResponse:
    """Map an outcome variant to its HTTP response. Unknown variants are a bug."""
    if isinstance(result, Created):
        logger.info(f"[Messages] {action}: created {result.value.id}")
        return envelope_response(
            success_status,
            "Message created successfully.",
            data=MessageDTO.from_entity(result.value),
        )
    if isinstance(result, Updated):
        return envelope_response(success_status, "Message updated successfully.")
    if isinstance(result, Deleted):
        return envelope_response(success_status, "Message deleted successfully.")
    if isinstance(result, NotFound):
        logger.warning(f"[Messages] {action}: not found. {result.reason}")
        return envelope_response(status.HTTP_404_NOT_FOUND, result.reason)
    if isinstance(result, Conflict):
        logger.warning(f"[Messages] {action}: conflict. {result.reason}")
        return envelope_response(status.HTTP_409_CONFLICT, result.reason)
    if isinstance(result, ValidationError):
        logger.warning(f"[Messages] {action}: validation error {sorted(result.errors)}")
        return envelope_response(
            status.HTTP_400_BAD_REQUEST, f"{action} failed.", errors=result.errors
        )
    raise TypeError(f"Unhandled outcome: {type(result).__name__}")


# ==================== ROUTER ====================

router = APIRouter(
    prefix=f"{Config.API_PREFIX}/organizations/{{organization_id}}/messages",
    tags=["messages"],
)


# ==================== ENDPOINTS ====================


@router.get("", response_model=ResponseEnvelope)
@inject
async def list_messages(
    organization_id: UUID,
    handler: FromDishka[ListMessagesHandler],
):
    """List all messages of an organization. An empty organization answers 404."""
    query = ListMessagesQuery(organization_id=OrganizationId(str(organization_id)))
    messages = await handler.execute(query)

    if not messages:
        return envelope_response(
            status.HTTP_404_NOT_FOUND, "Organization messages not found.", data=[]
        )

    return envelope_response(
        status.HTTP_200_OK,
        "All organization messages fetched successfully.",
        data=[MessageDTO.from_entity(message) for message in messages],
    )


@router.get("/{message_id}", response_model=ResponseEnvelope)
@inject
async def get_message(
    organization_id: UUID,
    message_id: UUID,
    handler: FromDishka[GetMessageHandler],
):
    """Get one message by ID."""
    query = GetMessageQuery(
        organization_id=OrganizationId(str(organization_id)),
        message_id=MessageId(str(message_id)),
    )
    message = await handler.execute(query)

    if message is None:
        return envelope_response(status.HTTP_404_NOT_FOUND, MESSAGE_NOT_FOUND)

    return envelope_response(
        status.HTTP_200_OK,
        "Message fetched successfully.",
        data=MessageDTO.from_entity(message),
    )


@router.post(
    "",
    response_model=ResponseEnvelope,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_message(
    organization_id: UUID,
    request: CreateMessageRequest,
    handler: FromDishka[CreateMessageHandler],
):
    """Create a message."""
    command = CreateMessageCommand(
        organization_id=OrganizationId(str(organization_id)),
        title=request.title,
        content=request.content,
    )
    result = await handler.execute(command)
    return to_response(result, "Create", success_status=status.HTTP_201_CREATED)


@router.put("/{message_id}", response_model=ResponseEnvelope)
@inject
async def update_message(
    organization_id: UUID,
    message_id: UUID,
    request: UpdateMessageRequest,
    handler: FromDishka[UpdateMessageHandler],
):
    """
    Replace title, content and active flag of a message.

    Request: {"title": "...", "content": "...", "is_active": false}
    is_active defaults to true when omitted.
    """
    command = UpdateMessageCommand(
        organization_id=OrganizationId(str(organization_id)),
        message_id=MessageId(str(message_id)),
        title=request.title,
        content=request.content,
        is_active=request.is_active,
    )
    result = await handler.execute(command)
    return to_response(result, "Update")


@router.delete("/{message_id}", response_model=ResponseEnvelope)
@inject
async def delete_message(
    organization_id: UUID,
    message_id: UUID,
    handler: FromDishka[DeleteMessageHandler],
):
    """Delete a message. Inactive messages cannot be deleted."""
    command = DeleteMessageCommand(
        organization_id=OrganizationId(str(organization_id)),
        message_id=MessageId(str(message_id)),
    )
    result = await handler.execute(command)
    return to_response(result, "Delete")
