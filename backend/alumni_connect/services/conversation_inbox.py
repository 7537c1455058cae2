"""
Conversation Inbox - A member's list of conversations.

Holds the last loaded list, a loading flag and an error string. A failed load
keeps the previous list and only sets the error.
"""

import logging
from typing import Optional

from alumni_connect.application.commands.conversations import (
    ResolveConversationCommand,
    ResolveConversationHandler,
)
from alumni_connect.application.queries.conversations import (
    ListConversationsHandler,
    ListConversationsQuery,
)
from alumni_connect.domain.entities.conversation import Conversation
from alumni_connect.domain.exceptions import NotAuthenticatedError
from alumni_connect.domain.value_objects.conversation_id import ConversationId
from alumni_connect.domain.value_objects.user_id import UserId
from alumni_connect.services.errors import describe_error

logger = logging.getLogger(__name__)


class ConversationInbox:
    def __init__(
        self,
        list_conversations: ListConversationsHandler,
        resolve_conversation: ResolveConversationHandler,
        user_id: Optional[UserId],
    ):
        if user_id is None:
            raise NotAuthenticatedError()
        self._list_conversations = list_conversations
        self._resolve_conversation = resolve_conversation
        self.user_id = user_id
        self.conversations: list[Conversation] = []
        self.is_loading = False
        self.error: Optional[str] = None

    async def load(self) -> list[Conversation]:
        self.is_loading = True
        try:
            self.conversations = await self._list_conversations.execute(
                ListConversationsQuery(user_id=self.user_id)
            )
            self.error = None
        except Exception as e:
            self.error = describe_error(e, "Error loading conversations")
        finally:
            self.is_loading = False
        return self.conversations

    def search(self, text: str) -> list[Conversation]:
        """Filter the loaded list by the other participant's name."""
        if not text:
            return list(self.conversations)
        return [
            c
            for c in self.conversations
            if c.other_participant(self.user_id).profile.matches(text)
        ]

    def find(self, conversation_id: ConversationId) -> Optional[Conversation]:
        return next((c for c in self.conversations if c.id == conversation_id), None)

    async def open_with(self, other_user_id: UserId) -> Optional[ConversationId]:
        """
        Find or create the conversation with another member, then refresh the list.

        Returns None and sets the error if resolving fails.
        """
        try:
            conversation_id = await self._resolve_conversation.execute(
                ResolveConversationCommand(
                    current_user_id=self.user_id, other_user_id=other_user_id
                )
            )
        except Exception as e:
            self.error = describe_error(e, "Error starting conversation")
            return None

        await self.load()
        return conversation_id
