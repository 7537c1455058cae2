"""
Message Repository Port - Interface for message persistence.
Implementation: alumni_connect/infrastructure/persistence/prisma_message_repository.py
"""

from abc import ABC, abstractmethod

from alumni_connect.domain.entities.message import Message
from alumni_connect.domain.value_objects.conversation_id import ConversationId


class MessageRepository(ABC):
    @abstractmethod
    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        """Whole thread, oldest first, with sender profiles."""
        ...

    @abstractmethod
    async def get_latest_first(
        self, conversation_ids: list[ConversationId]
    ) -> list[Message]:
        """Every message of the given conversations, newest first."""
        ...

    @abstractmethod
    async def save(self, message: Message) -> None: ...
