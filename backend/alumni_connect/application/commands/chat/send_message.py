"""
SendMessage Command - Append a message to a conversation and reload the thread.

Command data:
- conversation_id: ConversationId
- sender_id: UserId
- content: str

Handler:
1. Drop blank or over-length content without touching the store
2. Verify the conversation exists and the sender takes part in it
3. Save the message
4. Reload the full thread (the sender always sees their own message)

Reload-after-write is part of the contract: the result carries the thread as
read back from the store, never a locally appended copy.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from alumni_connect.application.common.interfaces import Command, CommandHandler
from alumni_connect.application.queries.chat.load_messages import (
    LoadMessagesHandler,
    LoadMessagesQuery,
)
from alumni_connect.domain.entities.message import Message
from alumni_connect.domain.exceptions import AccessDeniedError, EntityNotFoundError
from alumni_connect.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
)
from alumni_connect.domain.value_objects.content_limit import ContentLimit, MESSAGE_LIMIT
from alumni_connect.domain.value_objects.conversation_id import ConversationId
from alumni_connect.domain.value_objects.user_id import UserId
from alumni_connect.observability import MessageOutcome, increment_messages

logger = logging.getLogger(__name__)


@dataclass
class SendMessageResult:
    sent: bool
    message: Optional[Message] = None
    thread: list[Message] = field(default_factory=list)


@dataclass(frozen=True)
class SendMessageCommand(Command[SendMessageResult]):
    conversation_id: ConversationId
    sender_id: UserId
    content: str


class SendMessageHandler(CommandHandler[SendMessageResult]):
    def __init__(
        self,
        conv_repo: ConversationRepository,
        msg_repo: MessageRepository,
        load_messages: LoadMessagesHandler,
        limit: ContentLimit = MESSAGE_LIMIT,
    ):
        self.conv_repo = conv_repo
        self.msg_repo = msg_repo
        self.load_messages = load_messages
        self.limit = limit

    async def execute(self, command: SendMessageCommand) -> SendMessageResult:
        if not self.limit.accepts(command.content):
            increment_messages(MessageOutcome.REJECTED)
            logger.debug(
                f"Message to {command.conversation_id} not sent: blank or over "
                f"{self.limit.max_chars} characters"
            )
            return SendMessageResult(sent=False)

        participants = await self.conv_repo.get_participants([command.conversation_id])
        if not participants:
            raise EntityNotFoundError(
                f"Conversation {command.conversation_id.value} not found"
            )
        if all(p.user_id != command.sender_id for p in participants):
            raise AccessDeniedError("Sender is not part of this conversation")

        message = Message.create(
            conversation_id=command.conversation_id,
            sender_id=command.sender_id,
            content=command.content,
        )
        await self.msg_repo.save(message)
        increment_messages(MessageOutcome.SENT)
        logger.info(f"Message {message.id} sent to {command.conversation_id}")

        thread = await self.load_messages.execute(
            LoadMessagesQuery(conversation_id=command.conversation_id)
        )
        return SendMessageResult(sent=True, message=message, thread=thread)
