"""
Conversation Entity - A persistent two-party messaging thread.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from alumni_connect.domain.entities.message import MessagePreview
from alumni_connect.domain.entities.participant import ConversationParticipant
from alumni_connect.domain.value_objects.conversation_id import ConversationId
from alumni_connect.domain.value_objects.user_id import UserId


@dataclass
class Conversation:
    id: ConversationId
    updated_at: datetime
    participants: list[ConversationParticipant] = field(default_factory=list)
    last_message: Optional[MessagePreview] = None

    def involves(self, user_id: UserId) -> bool:
        return any(p.user_id == user_id for p in self.participants)

    def other_participant(self, user_id: UserId) -> Optional[ConversationParticipant]:
        return next((p for p in self.participants if p.user_id != user_id), None)
