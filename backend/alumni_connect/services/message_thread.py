"""
Message Thread - The message view of one selected conversation.

States:
    UNSELECTED -> LOADING -> LOADED -> SENDING -> LOADED
                                              -> ERROR

Selecting another conversation clears the messages and goes back to LOADING.
Each load remembers the conversation id it was issued for; a response that
arrives after the selection changed is discarded, so a thread never shows
another conversation's messages.
"""

import logging
from enum import Enum
from typing import Optional

from alumni_connect.application.commands.chat import (
    SendMessageCommand,
    SendMessageHandler,
)
from alumni_connect.application.queries.chat import (
    LoadMessagesHandler,
    LoadMessagesQuery,
)
from alumni_connect.domain.entities.message import Message
from alumni_connect.domain.exceptions import NotAuthenticatedError
from alumni_connect.domain.value_objects.conversation_id import ConversationId
from alumni_connect.domain.value_objects.user_id import UserId
from alumni_connect.services.errors import describe_error

logger = logging.getLogger(__name__)


class ThreadState(str, Enum):
    UNSELECTED = "unselected"
    LOADING = "loading"
    LOADED = "loaded"
    SENDING = "sending"
    ERROR = "error"


class MessageThread:
    def __init__(
        self,
        load_messages: LoadMessagesHandler,
        send_message: SendMessageHandler,
        viewer_id: Optional[UserId],
    ):
        if viewer_id is None:
            raise NotAuthenticatedError()
        self._load_messages = load_messages
        self._send_message = send_message
        self.viewer_id = viewer_id
        self.state = ThreadState.UNSELECTED
        self.conversation_id: Optional[ConversationId] = None
        self.messages: list[Message] = []
        self.error: Optional[str] = None

    def _is_current(self, conversation_id: ConversationId) -> bool:
        return self.conversation_id == conversation_id

    async def select(self, conversation_id: ConversationId) -> None:
        self.conversation_id = conversation_id
        self.messages = []
        self.error = None
        self.state = ThreadState.LOADING
        await self._load(conversation_id)

    async def refresh(self) -> None:
        if self.conversation_id is None:
            return
        self.state = ThreadState.LOADING
        await self._load(self.conversation_id)

    async def _load(self, conversation_id: ConversationId) -> None:
        try:
            messages = await self._load_messages.execute(
                LoadMessagesQuery(conversation_id=conversation_id, viewer_id=self.viewer_id)
            )
        except Exception as e:
            if self._is_current(conversation_id):
                self.error = describe_error(e, "Error loading messages")
                self.state = ThreadState.ERROR
            return

        if not self._is_current(conversation_id):
            logger.debug(f"Discarding stale messages for {conversation_id}")
            return
        self.messages = messages
        self.error = None
        self.state = ThreadState.LOADED

    async def send(self, content: str) -> bool:
        """
        Send a message to the selected conversation.

        The thread is replaced by the store's reloaded copy on success.
        Returns False when nothing is selected, when the content is rejected
        (blank or too long, no error set) or when the store fails (error set).
        """
        conversation_id = self.conversation_id
        if conversation_id is None:
            return False

        previous_state = self.state
        self.state = ThreadState.SENDING
        try:
            result = await self._send_message.execute(
                SendMessageCommand(
                    conversation_id=conversation_id,
                    sender_id=self.viewer_id,
                    content=content,
                )
            )
        except Exception as e:
            if self._is_current(conversation_id):
                self.error = describe_error(e, "Error sending message")
                self.state = ThreadState.ERROR
            return False

        if not self._is_current(conversation_id):
            return result.sent
        if not result.sent:
            self.state = previous_state
            return False

        self.messages = result.thread
        self.error = None
        self.state = ThreadState.LOADED
        return True
