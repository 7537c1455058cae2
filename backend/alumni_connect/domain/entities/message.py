"""
Message Entity - A single message in a conversation.

Messages are immutable once created.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from alumni_connect.domain.entities.profile import Profile
from alumni_connect.domain.value_objects.conversation_id import ConversationId
from alumni_connect.domain.value_objects.message_id import MessageId
from alumni_connect.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class Message:
    id: MessageId
    conversation_id: ConversationId
    sender_id: UserId
    content: str
    created_at: datetime
    sender: Optional[Profile] = None

    @classmethod
    def create(
        cls,
        conversation_id: ConversationId,
        sender_id: UserId,
        content: str,
    ) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        return cls(
            id=MessageId(str(uuid4())),
            conversation_id=conversation_id,
            sender_id=sender_id,
            content=content,
            created_at=datetime.now(timezone.utc),
        )


@dataclass(frozen=True)
class MessagePreview:
    content: str
    created_at: datetime

    @classmethod
    def of(cls, message: Message) -> MessagePreview:
        return cls(content=message.content, created_at=message.created_at)
