"""
Prisma Message Repository Implementation.

Prisma Message Model (from prisma/schema.prisma):
    model Message {
        id              String   @id @default(uuid())
        conversation_id String
        sender_id       String
        content         String
        created_at      DateTime @default(now())
    }

Mapping:
- Prisma: id (str) ←→ Domain: id (MessageId)
- Prisma: conversation_id (str) ←→ Domain: conversation_id (ConversationId)
- Prisma: sender_id (str) ←→ Domain: sender_id (UserId)
- Sender profiles are joined from the profiles table when loading a thread
"""

import logging
from typing import Optional
from prisma import Prisma
from prisma.models import Message as PrismaMessage

from alumni_connect.domain.entities.message import Message
from alumni_connect.domain.entities.profile import Profile
from alumni_connect.domain.ports.repositories.message_repository import MessageRepository
from alumni_connect.domain.value_objects.conversation_id import ConversationId
from alumni_connect.domain.value_objects.message_id import MessageId
from alumni_connect.domain.value_objects.user_id import UserId
from alumni_connect.infrastructure.persistence.profile_mapping import fetch_profiles
from alumni_connect.infrastructure.persistence.store_errors import store_errors

logger = logging.getLogger(__name__)


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    def _to_entity(
        self, record: PrismaMessage, sender: Optional[Profile] = None
    ) -> Message:
        """Map Prisma record to domain entity."""
        return Message(
            id=MessageId(record.id),
            conversation_id=ConversationId(record.conversation_id),
            sender_id=UserId(record.sender_id),
            content=record.content,
            created_at=record.created_at,
            sender=sender,
        )

    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        """
        Get the whole thread, oldest first, with each sender's profile.

        Args:
            conversation_id: ConversationId value object

        Returns:
            List of Message entities in chronological order
        """
        with store_errors("load messages"):
            records = await self._prisma.message.find_many(
                where={"conversation_id": conversation_id.value},
                order={"created_at": "asc"},
            )
            profiles = await fetch_profiles(
                self._prisma, {record.sender_id for record in records}
            )
        logger.debug(f"Loaded {len(records)} messages for {conversation_id}")
        return [self._to_entity(record, profiles.get(record.sender_id)) for record in records]

    async def get_latest_first(
        self, conversation_ids: list[ConversationId]
    ) -> list[Message]:
        """
        Get every message of several conversations, newest first.

        Used for list previews, so sender profiles are not joined.
        """
        if not conversation_ids:
            return []
        with store_errors("load your conversations"):
            records = await self._prisma.message.find_many(
                where={"conversation_id": {"in": [c.value for c in conversation_ids]}},
                order={"created_at": "desc"},
            )
        return [self._to_entity(record) for record in records]

    async def save(self, message: Message) -> None:
        """
        Insert a message. Messages are never updated after creation.

        Args:
            message: Message entity to persist
        """
        with store_errors("send your message"):
            await self._prisma.message.create(
                data={
                    "id": message.id.value,
                    "conversation_id": message.conversation_id.value,
                    "sender_id": message.sender_id.value,
                    "content": message.content,
                    "created_at": message.created_at,
                },
            )
