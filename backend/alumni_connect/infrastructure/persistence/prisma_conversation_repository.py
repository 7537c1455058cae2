"""
Prisma Conversation Repository Implementation.

Mapping:
- Prisma models: Conversation (id, created_at),
  ConversationParticipant (conversation_id, user_id)
- Domain: ConversationId values and ConversationParticipant entities
- Participant profiles are joined from the profiles table in one extra query;
  a participant without a profile row keeps profile=None
"""

from typing import Optional
from prisma import Prisma
from prisma.models import ConversationParticipant as PrismaParticipant

from alumni_connect.domain.entities.participant import ConversationParticipant
from alumni_connect.domain.entities.profile import Profile
from alumni_connect.domain.ports.repositories import ConversationRepository
from alumni_connect.domain.value_objects.conversation_id import ConversationId
from alumni_connect.domain.value_objects.user_id import UserId
from alumni_connect.infrastructure.persistence.profile_mapping import fetch_profiles
from alumni_connect.infrastructure.persistence.store_errors import store_errors


class PrismaConversationRepository(ConversationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(
        self, record: PrismaParticipant, profiles: dict[str, Profile]
    ) -> ConversationParticipant:
        """Map Prisma record to domain entity."""
        return ConversationParticipant(
            conversation_id=ConversationId(record.conversation_id),
            user_id=UserId(record.user_id),
            profile=profiles.get(record.user_id),
        )

    async def get_ids_for_user(self, user_id: UserId) -> list[ConversationId]:
        with store_errors("load your conversations"):
            records = await self._prisma.conversationparticipant.find_many(
                where={"user_id": user_id.value},
            )
        return [ConversationId(record.conversation_id) for record in records]

    async def find_with_participant(
        self, conversation_ids: list[ConversationId], user_id: UserId
    ) -> Optional[ConversationId]:
        with store_errors("look up the conversation"):
            record = await self._prisma.conversationparticipant.find_first(
                where={
                    "user_id": user_id.value,
                    "conversation_id": {"in": [c.value for c in conversation_ids]},
                },
            )
        return ConversationId(record.conversation_id) if record else None

    async def create(self) -> ConversationId:
        """Insert a conversation and return its store-generated id."""
        with store_errors("start the conversation"):
            record = await self._prisma.conversation.create(data={})
        return ConversationId(record.id)

    async def add_participants(
        self, conversation_id: ConversationId, user_ids: list[UserId]
    ) -> None:
        """Insert all participant rows in a single statement."""
        with store_errors("start the conversation"):
            await self._prisma.conversationparticipant.create_many(
                data=[
                    {"conversation_id": conversation_id.value, "user_id": u.value}
                    for u in user_ids
                ],
            )

    async def get_participants(
        self, conversation_ids: list[ConversationId]
    ) -> list[ConversationParticipant]:
        if not conversation_ids:
            return []
        with store_errors("load conversation participants"):
            records = await self._prisma.conversationparticipant.find_many(
                where={"conversation_id": {"in": [c.value for c in conversation_ids]}},
            )
            profiles = await fetch_profiles(
                self._prisma, {record.user_id for record in records}
            )
        return [self._to_entity(record, profiles) for record in records]

    async def is_participant(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> bool:
        with store_errors("check conversation access"):
            count = await self._prisma.conversationparticipant.count(
                where={
                    "conversation_id": conversation_id.value,
                    "user_id": user_id.value,
                },
            )
        return count > 0
