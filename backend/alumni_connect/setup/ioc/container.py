"""
Dishka DI Container Setup.

- HandlerProvider registers the use-case handlers against the repository ports
- PersistenceProvider (setup/ioc/persistence.py) binds the ports to Prisma
- Tests bind the ports to in-memory repositories instead

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)

Flow:
  Container → provides → PrismaConversationRepository → to → ResolveConversationHandler
                                    ↓
                            uses ConversationRepository interface
"""

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from alumni_connect.application.commands.chat import SendMessageHandler
from alumni_connect.application.commands.conversations import ResolveConversationHandler
from alumni_connect.application.queries.chat import LoadMessagesHandler
from alumni_connect.application.queries.conversations import ListConversationsHandler
from alumni_connect.config.settings import Config
from alumni_connect.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
)
from alumni_connect.domain.value_objects.content_limit import ContentLimit


class HandlerProvider(Provider):
    """Registers command and query handlers."""

    @provide(scope=Scope.APP)
    def get_message_limit(self) -> ContentLimit:
        return ContentLimit(Config.MESSAGE_CHAR_LIMIT)

    @provide(scope=Scope.REQUEST)
    def get_resolve_conversation_handler(
        self, conversation_repository: ConversationRepository
    ) -> ResolveConversationHandler:
        """
        - Parameter asks for ConversationRepository (abstract)
        - Dishka resolves it from whichever provider binds the port
        """
        return ResolveConversationHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
    ) -> ListConversationsHandler:
        return ListConversationsHandler(conversation_repository, message_repository)

    @provide(scope=Scope.REQUEST)
    def get_load_messages_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
    ) -> LoadMessagesHandler:
        return LoadMessagesHandler(
            conv_repo=conversation_repository,
            msg_repo=message_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        load_messages: LoadMessagesHandler,
        limit: ContentLimit,
    ) -> SendMessageHandler:
        return SendMessageHandler(
            conv_repo=conversation_repository,
            msg_repo=message_repository,
            load_messages=load_messages,
            limit=limit,
        )


def create_container(*providers: Provider) -> AsyncContainer:
    """
    Create the DI container from the handler provider plus the given
    repository providers. Call this ONCE at app startup.
    """
    return make_async_container(HandlerProvider(), *providers)
