"""
Conversation Repository Port - Interface for conversations and their participants.
Implementation: alumni_connect/infrastructure/persistence/prisma_conversation_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from alumni_connect.domain.entities.participant import ConversationParticipant
from alumni_connect.domain.value_objects.conversation_id import ConversationId
from alumni_connect.domain.value_objects.user_id import UserId


class ConversationRepository(ABC):
    @abstractmethod
    async def get_ids_for_user(self, user_id: UserId) -> list[ConversationId]: ...

    @abstractmethod
    async def find_with_participant(
        self, conversation_ids: list[ConversationId], user_id: UserId
    ) -> Optional[ConversationId]: ...

    @abstractmethod
    async def create(self) -> ConversationId: ...

    @abstractmethod
    async def add_participants(
        self, conversation_id: ConversationId, user_ids: list[UserId]
    ) -> None: ...

    @abstractmethod
    async def get_participants(
        self, conversation_ids: list[ConversationId]
    ) -> list[ConversationParticipant]: ...

    @abstractmethod
    async def is_participant(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> bool: ...
