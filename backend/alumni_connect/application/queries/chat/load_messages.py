"""
LoadMessages Query - The full ordered thread of one conversation.

Messages come back oldest first, each with its sender's profile. There is no
incremental fetch: every call reloads the whole thread.
"""

from dataclasses import dataclass
from typing import Optional

from alumni_connect.application.common.interfaces import Query, QueryHandler
from alumni_connect.domain.entities.message import Message
from alumni_connect.domain.exceptions import AccessDeniedError
from alumni_connect.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
)
from alumni_connect.domain.value_objects.conversation_id import ConversationId
from alumni_connect.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class LoadMessagesQuery(Query[list[Message]]):
    """
    Query to load a conversation's thread.

    When viewer_id is set, the viewer must be a participant.
    """

    conversation_id: ConversationId
    viewer_id: Optional[UserId] = None


class LoadMessagesHandler(QueryHandler[list[Message]]):
    def __init__(
        self,
        conv_repo: ConversationRepository,
        msg_repo: MessageRepository,
    ):
        self._conv_repo = conv_repo
        self._msg_repo = msg_repo

    async def execute(self, query: LoadMessagesQuery) -> list[Message]:
        """
        Raises:
            AccessDeniedError: If the viewer is not in the conversation
            QueryFailureError: If the store fails
        """
        if query.viewer_id is not None:
            if not await self._conv_repo.is_participant(
                query.conversation_id, query.viewer_id
            ):
                raise AccessDeniedError("You don't have access to this conversation")

        messages = await self._msg_repo.get_by_conversation(query.conversation_id)
        # thread order is created_at, never insertion order
        return sorted(messages, key=lambda m: m.created_at)
