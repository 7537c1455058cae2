"""
List Conversations Query - A member's inbox, most recently active first.

Steps:
1. Get the ids of every conversation the user takes part in
2. Bulk-fetch the participants (with profiles) of those conversations
3. Bulk-fetch their messages, newest first
4. Build one Conversation per id; the newest message becomes the preview
5. Sort by latest activity, descending

A conversation whose own or other participant has no profile is incomplete
data. It is left out of the result and logged, never raised. Conversations
without messages are kept and use the load time as their activity time.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from alumni_connect.application.common.interfaces import Query, QueryHandler
from alumni_connect.domain.entities.conversation import Conversation
from alumni_connect.domain.entities.message import Message, MessagePreview
from alumni_connect.domain.entities.participant import ConversationParticipant
from alumni_connect.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
)
from alumni_connect.domain.value_objects.conversation_id import ConversationId
from alumni_connect.domain.value_objects.user_id import UserId
from alumni_connect.observability import increment_dropped_conversations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[Conversation]]):
    user_id: UserId
    search: str = ""


class ListConversationsHandler(QueryHandler[list[Conversation]]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
    ):
        self._conversation_repository = conversation_repository
        self._message_repository = message_repository

    async def execute(self, query: ListConversationsQuery) -> list[Conversation]:
        user_id = query.user_id
        conversation_ids = await self._conversation_repository.get_ids_for_user(user_id)
        if not conversation_ids:
            return []

        participants = await self._conversation_repository.get_participants(
            conversation_ids
        )
        messages = await self._message_repository.get_latest_first(conversation_ids)

        participants_by_conversation: dict[
            ConversationId, list[ConversationParticipant]
        ] = defaultdict(list)
        for participant in participants:
            participants_by_conversation[participant.conversation_id].append(participant)

        # messages arrive newest first, so the first one seen per id is the latest
        latest_by_conversation: dict[ConversationId, Message] = {}
        for message in messages:
            latest_by_conversation.setdefault(message.conversation_id, message)

        fallback = datetime.now(timezone.utc)
        conversations = []
        dropped = 0
        for conversation_id in conversation_ids:
            conversation = self._assemble(
                conversation_id,
                user_id,
                participants_by_conversation.get(conversation_id, []),
                latest_by_conversation.get(conversation_id),
                fallback,
            )
            if conversation is None:
                dropped += 1
                continue
            conversations.append(conversation)

        if dropped:
            increment_dropped_conversations(dropped)

        if query.search:
            conversations = [
                c
                for c in conversations
                if c.other_participant(user_id).profile.matches(query.search)
            ]

        conversations.sort(key=lambda c: c.updated_at, reverse=True)
        return conversations

    def _assemble(
        self,
        conversation_id: ConversationId,
        user_id: UserId,
        participants: list[ConversationParticipant],
        latest: Optional[Message],
        fallback: datetime,
    ) -> Optional[Conversation]:
        own = next((p for p in participants if p.user_id == user_id), None)
        other = next((p for p in participants if p.user_id != user_id), None)
        if own is None or other is None or own.profile is None or other.profile is None:
            logger.warning(
                f"Skipping conversation {conversation_id}: participant profile missing"
            )
            return None

        return Conversation(
            id=conversation_id,
            participants=[own, other],
            last_message=MessagePreview.of(latest) if latest else None,
            updated_at=latest.created_at if latest else fallback,
        )
