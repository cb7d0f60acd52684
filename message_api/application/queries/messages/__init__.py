"""Message queries."""

from message_api.application.queries.messages.get_message import (
    GetMessageQuery,
    GetMessageHandler,
)
from message_api.application.queries.messages.list_messages import (
    ListMessagesQuery,
    ListMessagesHandler,
)

__all__ = [
    "GetMessageQuery",
    "GetMessageHandler",
    "ListMessagesQuery",
    "ListMessagesHandler",
]
