"""
Dishka DI Container Setup.

- Registers the repository and the command/query handlers
- Maps the abstract MessageRepository to its concrete implementation
- Scope.APP = created once and shared; Scope.REQUEST = new per HTTP request

Flow:
  Container -> provides -> InMemoryMessageRepository -> to -> CreateMessageHandler
                                    |
                            uses MessageRepository interface
"""

from typing import Optional
from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from message_api.domain.ports.repositories import MessageRepository
from message_api.infrastructure.persistence import InMemoryMessageRepository
from message_api.application.commands.messages import (
    CreateMessageHandler,
    DeleteMessageHandler,
    UpdateMessageHandler,
)
from message_api.application.queries.messages import (
    GetMessageHandler,
    ListMessagesHandler,
)


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers all dependencies and their implementations.
    A pre-built repository can be handed in to replace the in-memory store.
    """

    def __init__(self, message_repository: Optional[MessageRepository] = None):
        super().__init__()
        self._message_repository = message_repository

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> MessageRepository:
        """
        Provide MessageRepository implementation.

        - Return type is ABSTRACT (MessageRepository)
        - Implementation is CONCRETE (InMemoryMessageRepository)
        - Scope.APP because the in-memory store must outlive a single request
        """
        if self._message_repository is not None:
            return self._message_repository
        return InMemoryMessageRepository()

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_message_handler(
        self, message_repository: MessageRepository
    ) -> CreateMessageHandler:
        return CreateMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_message_handler(
        self, message_repository: MessageRepository
    ) -> UpdateMessageHandler:
        return UpdateMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_message_handler(
        self, message_repository: MessageRepository
    ) -> DeleteMessageHandler:
        return DeleteMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_message_handler(
        self, message_repository: MessageRepository
    ) -> GetMessageHandler:
        return GetMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_messages_handler(
        self, message_repository: MessageRepository
    ) -> ListMessagesHandler:
        return ListMessagesHandler(message_repository)


def create_container(
    message_repository: Optional[MessageRepository] = None,
) -> AsyncContainer:
    """Create the DI container. Call once per application instance."""
    return make_async_container(AppProvider(message_repository))
